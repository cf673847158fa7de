"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gpa_tools package
(apart from the interactive prompts in cli.py).

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from typing import Optional

from ..engines import GradeScale
from ..models import (
    CalculatorDefinition,
    ClassRankResult,
    GPAResult,
    TransferResult,
    UKDegreeResult,
    format_gpa,
)


class TerminalDisplay:
    """
    Pretty terminal output for GPA results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and serialize the GPAResult dataclass.

    3. FOR A DOWNLOADABLE REPORT:
       See TextReport in report.py.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, ok: bool) -> str:
        """Return a colored yes/no badge."""
        if ok:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ YES {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ NO {cls.RESET}"

    @classmethod
    def gpa_color(cls, gpa: Optional[float], scale_max: float = 4.0) -> str:
        """Green for strong, yellow for middling, red for weak (relative to the scale)."""
        if gpa is None:
            return cls.DIM
        ratio = gpa / scale_max if scale_max else 0.0
        if ratio >= 0.85:
            return cls.GREEN
        if ratio >= 0.6:
            return cls.YELLOW
        return cls.RED

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}")

    @classmethod
    def print_calculator_list(cls, calculators: list):
        cls.print_header("AVAILABLE CALCULATORS")
        for i, (key, title) in enumerate(calculators, 1):
            print(f"  {i:>2}. {title} {cls.DIM}({key}){cls.RESET}")

    @classmethod
    def print_scheme_list(cls, schemes: list):
        cls.print_header("UK DEGREE SCHEMES")
        for i, (key, name) in enumerate(schemes, 1):
            print(f"  {i:>2}. {name} {cls.DIM}({key}){cls.RESET}")

    @classmethod
    def print_student_info(cls, student: dict, definition: CalculatorDefinition):
        """Print student identification and the calculator in use."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.get('name', 'Unknown')}")
        print(f"  {cls.BOLD}School:{cls.RESET} {student.get('school', 'Unknown')}")
        if student.get("program"):
            print(f"  {cls.BOLD}Program:{cls.RESET} {student['program']}")
        print(f"  {cls.BOLD}Calculator:{cls.RESET} {definition.title}")
        print(f"  {cls.BOLD}Grade Scale:{cls.RESET} {definition.scale.name}")

    @classmethod
    def print_course_table(cls, semesters: list, result: GPAResult, definition: CalculatorDefinition):
        """
        Print every course row with a short status.

        The status column explains why a row does or does not count:
        counted, no grade yet, a mark the scale does not count (W, P, an
        unknown letter), excluded by the student, or invalid credits (the
        rows listed in result.excluded_ids).
        """
        scale = GradeScale(definition.scale)
        invalid = set(result.excluded_ids)
        for semester in semesters:
            cls.print_subheader(semester.label)
            print(f"  {cls.BOLD}{'COURSE':<32} {'GRADE':<7} {'CREDITS':>7}  {'TYPE':<14} {'STATUS'}{cls.RESET}")
            print(f"  {cls.DIM}{'-' * 76}{cls.RESET}")
            for course in semester.courses:
                if course.excluded:
                    status = f"{cls.DIM}excluded{cls.RESET}"
                elif course.id in invalid:
                    status = f"{cls.RED}✗ invalid credits{cls.RESET}"
                elif not course.has_grade:
                    status = f"{cls.DIM}no grade{cls.RESET}"
                elif not scale.is_graded(course.grade):
                    status = f"{cls.YELLOW}not counted{cls.RESET}"
                else:
                    status = f"{cls.GREEN}✓{cls.RESET}"
                grade = "—" if course.grade is None or course.grade == "" else str(course.grade)
                name = course.name or "Unnamed Course"
                print(f"  {name[:32]:<32} {grade:<7} {course.credits:>7.1f}  "
                      f"{course.category.value:<14} {status}")

    @classmethod
    def print_result(cls, result: GPAResult, definition: CalculatorDefinition):
        """Print the cumulative GPA, sub-GPAs, semester GPAs and labels."""
        precision = definition.precision
        scale_max = definition.scale.max_points
        cls.print_header(f"{definition.title.upper()}")

        color = cls.gpa_color(result.overall_gpa, scale_max)
        label = "Weighted GPA" if definition.is_weighted else "GPA"
        print(f"\n  {cls.BOLD}{label}:{cls.RESET} {color}{cls.BOLD}"
              f"{format_gpa(result.overall_gpa, precision)}{cls.RESET}")
        if definition.is_weighted:
            print(f"  {cls.BOLD}Unweighted GPA:{cls.RESET} {format_gpa(result.unweighted_gpa, precision)}")
        print(f"  {cls.BOLD}Total Credits:{cls.RESET} {result.total_credits:.1f}"
              f" {cls.DIM}({result.included_count} course(s) counted){cls.RESET}")
        if result.baseline_applied:
            print(f"  {cls.DIM}Includes previously earned GPA and credits{cls.RESET}")
        if result.excluded_ids:
            print(f"  {cls.YELLOW}⚠ {len(result.excluded_ids)} row(s) skipped for invalid credits "
                  f"(must be above 0 and at most {definition.max_credits:g}){cls.RESET}")

        if result.buckets:
            cls.print_subheader("Category GPAs")
            for bucket in result.buckets.values():
                color = cls.gpa_color(bucket.gpa, scale_max)
                print(f"  {bucket.label:<28} {color}{format_gpa(bucket.gpa, precision):>6}{cls.RESET}"
                      f"  {cls.DIM}{bucket.credits:.1f} credits{cls.RESET}")

        if len(result.semesters) > 1 or any(s.deans_list is not None for s in result.semesters):
            cls.print_subheader("Semester GPAs")
            for term in result.semesters:
                line = f"  {term.label:<28} {format_gpa(term.gpa, precision):>6}  {cls.DIM}{term.credits:.1f} credits{cls.RESET}"
                if term.deans_list:
                    line += f"  {cls.GREEN}★ Dean's List{cls.RESET}"
                print(line)

        titles = {rule.name: rule.title for rule in definition.classifications + definition.conjunctive}
        if result.classifications:
            cls.print_subheader("Standing")
            for name, outcome in result.classifications.items():
                title = titles.get(name) or name.replace("_", " ").title()
                print(f"  {cls.BOLD}{title}:{cls.RESET} {outcome}")

        if result.flags:
            cls.print_subheader("Eligibility")
            flag_titles = {rule.name: rule.title for rule in definition.flags}
            for name, ok in result.flags.items():
                title = flag_titles.get(name) or name.replace("_", " ").title()
                print(f"  {title:<32} {cls.status_badge(ok)}")

    @classmethod
    def print_raise_scenarios(cls, scenarios: list, current_gpa: float, target_gpa: float):
        cls.print_header("GPA RAISE PLANNER")
        if not scenarios:
            cls.print_error("Enter a current and target GPA between 0 and 4.0 and positive planned credits.")
            return
        print(f"  {cls.BOLD}Current GPA:{cls.RESET} {current_gpa:.2f}   {cls.BOLD}Target GPA:{cls.RESET} {target_gpa:.2f}")
        print(f"\n  {cls.BOLD}{'CREDITS':>8} {'TERMS':>6} {'AVG NEEDED':>11}  {'GRADES NEEDED'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for scenario in scenarios:
            color = cls.GREEN if scenario.achievable else cls.RED
            print(f"  {scenario.credits_needed:>8g} {scenario.semesters:>6} "
                  f"{color}{scenario.required_gpa:>11.2f}{cls.RESET}  {scenario.grade_needed}")

    @classmethod
    def print_transfer_result(cls, result: Optional[TransferResult]):
        cls.print_header("TRANSFER GPA")
        if result is None:
            cls.print_error("Previous GPA must be between 0 and 4.0 and credits cannot be negative.")
            return
        rows = [
            ("Fresh Start", result.fresh_start),
            ("Combined", result.combined),
            ("Weighted (transferred only)", result.weighted),
        ]
        for label, policy in rows:
            print(f"  {cls.BOLD}{label:<30}{cls.RESET} {format_gpa(policy.gpa):>6}"
                  f"  {cls.DIM}{policy.credits:.1f} credits{cls.RESET}")
        print(f"\n  {cls.BOLD}Credits transferred:{cls.RESET} {result.effective_transfer_credits:.1f}")
        print(f"  {cls.BOLD}Credits not transferred:{cls.RESET} {result.non_transferred_credits:.1f}")

    @classmethod
    def print_class_rank(cls, result: Optional[ClassRankResult]):
        cls.print_header("CLASS RANK")
        if result is None:
            cls.print_error("Your rank must be between 1 and the total number of students.")
            return
        print(f"  {cls.BOLD}Percentile:{cls.RESET} {result.percentile:.1f}")
        print(f"  {cls.BOLD}Decile:{cls.RESET} {result.decile}   {cls.BOLD}Quartile:{cls.RESET} {result.quartile}")
        print(f"  {cls.BOLD}Standing:{cls.RESET} {result.standing}")
        print(f"  {cls.BOLD}College Level:{cls.RESET} {result.college_level}")
        print(f"  {'Scholarship Eligible':<24} {cls.status_badge(result.scholarship_eligible)}")

    @classmethod
    def print_uk_result(cls, result: Optional[UKDegreeResult], credit_issues: Optional[dict] = None):
        cls.print_header("UK DEGREE CLASSIFICATION")
        for year, total in sorted((credit_issues or {}).items()):
            print(f"  {cls.YELLOW}⚠ Year {year} has {total:g} credits{cls.RESET}")
        if result is None:
            cls.print_error("Every weighted year needs at least one module with a mark.")
            return
        for year, average in sorted(result.year_averages.items()):
            shown = "—" if average is None else f"{average:.1f}%"
            print(f"  {cls.BOLD}Year {year} average:{cls.RESET} {shown}")
        print(f"\n  {cls.BOLD}Weighted mark:{cls.RESET} {result.weighted_percentage:.1f}%")
        print(f"  {cls.BOLD}Classification:{cls.RESET} {result.classification}")
        print(f"  {cls.BOLD}US GPA equivalent:{cls.RESET} {cls.gpa_color(result.us_gpa)}{result.us_gpa:.1f}{cls.RESET}")
