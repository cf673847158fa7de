"""
Command-Line Interface for the GPA Tools.

This module provides the interactive CLI. It handles user input and
hands everything else to GPACalculator and the planning engines.

MODES:
------
1. TRANSCRIPT FILE: Calculate a GPA from a transcript JSON file
2. ENTER COURSES: Type course rows in and calculate
3. RAISE PLANNER: What average is needed to reach a target GPA
4. TRANSFER GPA: Combine GPAs under common transfer policies
5. CLASS RANK: Percentile, decile and quartile from a rank
6. UK DEGREE: Year-weighted honours classification and US GPA
   (Birmingham, Manchester, Leeds)

NOTE: Don't run this file directly. Run from the project root:
    python3 -m gpa_tools
"""

import logging

from .config import DEFAULT_CALCULATOR, DEFAULT_DEGREE_SCHEME, EXAMPLE_TRANSCRIPT, LOG_LEVEL
from .calculator import GPACalculator
from .engines import class_rank, raise_scenarios, transfer_gpa
from .models import BaselineGPA, CourseRecord, Semester, UKModule
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def _ask(prompt: str, default: str = "") -> str:
    try:
        answer = input(prompt).strip()
    except EOFError:
        return default
    return answer or default


def _ask_float(prompt: str, default=None):
    raw = _ask(prompt)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"  → Not a number, using default: {default}")
        return default


def _choose_calculator(calc: GPACalculator) -> str:
    calculators = calc.list_calculators()
    TerminalDisplay.print_calculator_list(calculators)
    choice = _ask(f"\n  Enter number (1-{len(calculators)}) or key [{DEFAULT_CALCULATOR}]: ")
    if not choice:
        return DEFAULT_CALCULATOR
    if choice.isdigit() and 1 <= int(choice) <= len(calculators):
        return calculators[int(choice) - 1][0]
    return choice


def _choose_scheme(calc: GPACalculator) -> str:
    schemes = calc.list_degree_schemes()
    TerminalDisplay.print_scheme_list(schemes)
    choice = _ask(f"\n  Enter number (1-{len(schemes)}) or key [{DEFAULT_DEGREE_SCHEME}]: ")
    if not choice:
        return DEFAULT_DEGREE_SCHEME
    if choice.isdigit() and 1 <= int(choice) <= len(schemes):
        return schemes[int(choice) - 1][0]
    return choice


def _run_transcript_file(calc: GPACalculator):
    path = _ask(f"  Transcript path [{EXAMPLE_TRANSCRIPT.name}]: ", str(EXAMPLE_TRANSCRIPT))
    key = _ask("  Calculator key (Enter = use the file's): ") or None
    outcome = calc.run(path, key)

    save_to = _ask("\n  Save a text report to (Enter to skip): ")
    if save_to:
        calc.save_report(save_to, outcome["calculator"], outcome["result"],
                         outcome["transcript"], outcome["student"])
        print(f"  {TerminalDisplay.GREEN}✓ Report saved to {save_to}{TerminalDisplay.RESET}")


def _run_course_entry(calc: GPACalculator):
    """
    Collect course rows one at a time and calculate.

    A blank course name finishes the list. Grades can be letters ("B+")
    or, on scales with percentage bands, numbers ("91"). Calculators with
    an auto-credit toggle offer to count every course the same, and then
    skip the credits prompt.
    """
    key = _choose_calculator(calc)
    definition = calc.definition(key)

    uniform = None
    if definition.auto_credit is not None:
        answer = _ask(f"  Count every course as {definition.auto_credit:g} credit? [y/N]: ", "n")
        if answer.lower().startswith("y"):
            uniform = definition.auto_credit

    categories = ", ".join(c.value for c in definition.categories)

    rows = []
    print(f"\n  {TerminalDisplay.DIM}Categories: {categories}{TerminalDisplay.RESET}")
    print(f"  {TerminalDisplay.DIM}Leave the course name blank to finish.{TerminalDisplay.RESET}")
    while True:
        name = _ask(f"\n  Course {len(rows) + 1} name: ")
        if not name:
            break
        grade = _ask("    Grade: ")
        credits = uniform if uniform is not None else _ask_float("    Credits [3]: ", 3.0)
        category = _ask("    Category [regular]: ", "regular")
        rows.append(CourseRecord(name=name, grade=grade, credits=credits, category=category))

    # An empty entry still gets the one blank row every semester keeps
    semester = Semester(label="Semester 1", courses=rows)

    baseline = None
    if definition.allow_baseline:
        prior_gpa = _ask_float("\n  Previous cumulative GPA (Enter to skip): ")
        if prior_gpa is not None:
            prior_credits = _ask_float("  Previous credits: ", 0.0)
            baseline = BaselineGPA(prior_gpa, prior_credits)

    extras = {}
    for metric in _extra_metrics(definition):
        value = _ask_float(f"  {metric.replace('_', ' ').title()} (Enter to skip): ")
        if value is not None:
            extras[metric] = value

    result = calc.calculate(key, [semester], baseline, extras, uniform)
    calc.display.print_course_table([semester], result, definition)
    calc.display.print_result(result, definition)


def _extra_metrics(definition) -> list:
    """Metrics a calculator classifies on that do not come from the courses."""
    known = {"overall", "unweighted"} | {c.value for c in definition.buckets}
    metrics = [rule.metric for rule in definition.classifications + definition.flags]
    return [m for m in dict.fromkeys(metrics) if m not in known]


def _run_raise_planner():
    current = _ask_float("  Current GPA: ")
    credits = _ask_float("  Credits completed: ")
    target = _ask_float("  Target GPA: ")
    planned = _ask_float("  Credits per semester [15]: ", 15.0)
    if None in (current, credits, target):
        TerminalDisplay.print_error("Current GPA, credits and target GPA are required.")
        return
    scenarios = raise_scenarios(current, credits, target, planned)
    TerminalDisplay.print_raise_scenarios(scenarios, current, target)


def _run_transfer():
    previous_gpa = _ask_float("  Previous institution GPA: ")
    previous_credits = _ask_float("  Previous institution credits: ")
    transferred = _ask_float("  Credits accepted in transfer: ", previous_credits)
    new_gpa = _ask_float("  New institution GPA (Enter to skip): ")
    new_credits = _ask_float("  New institution credits (Enter to skip): ")
    max_transfer = _ask_float("  Transfer credit limit [90]: ", 90.0)
    result = transfer_gpa(previous_gpa, previous_credits, transferred,
                          new_gpa, new_credits, max_transfer)
    TerminalDisplay.print_transfer_result(result)


def _run_class_rank():
    rank = _ask_float("  Your rank: ")
    total = _ask_float("  Total students in class: ")
    TerminalDisplay.print_class_rank(class_rank(rank, total))


def _run_uk_degree(calc: GPACalculator):
    scheme = _choose_scheme(calc)
    weights = calc.loader.degree_scheme(scheme)["year_weights"]

    modules = []
    for year, weight in sorted(weights.items()):
        note = "blank name to finish the year" if weight > 0 else "not counted, blank name to skip"
        print(f"\n  {TerminalDisplay.BOLD}Year {year} modules{TerminalDisplay.RESET}"
              f" {TerminalDisplay.DIM}({note}){TerminalDisplay.RESET}")
        while True:
            name = _ask("    Module name: ")
            if not name:
                break
            credits = _ask_float("      Credits [20]: ", 20.0)
            mark = _ask_float("      Mark (%): ", 0.0)
            modules.append(UKModule(name=name, credits=credits, percentage=mark, year=year))

    result = calc.uk_degree(modules, scheme)
    issues = calc.uk_credit_issues(modules, scheme)
    TerminalDisplay.print_uk_result(result, issues)


def main():
    """
    Command-line interface for the GPA tools.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1-2. GPA CALCULATORS:
         Any calculator in tables/calculators.json, from a transcript
         file or from rows typed in at the prompt.

    3-6. PLANNING TOOLS:
         Raise planner, transfer GPA, class rank, UK degree.

    ═══════════════════════════════════════════════════════════════════════════
    """
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    calc = GPACalculator()

    # Welcome banner with mode selection
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         GPA TOOLS                                                ║")
    print("║         Weighted, college, CASPA, AMCAS, graduate and more       ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 📄 TRANSCRIPT FILE  - Calculate from a JSON transcript       ║")
    print("║  2. ✏️  ENTER COURSES    - Type your courses in                   ║")
    print("║  3. 📈 RAISE PLANNER    - Grades needed for a target GPA         ║")
    print("║  4. 🔁 TRANSFER GPA     - Combine GPAs across schools            ║")
    print("║  5. 🏆 CLASS RANK       - Percentile from your rank              ║")
    print("║  6. 🇬🇧 UK DEGREE        - UK classification to US GPA            ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    mode = _ask(f"{TerminalDisplay.BOLD}Select mode (1-6): {TerminalDisplay.RESET}", "1")

    try:
        if mode == "2":
            _run_course_entry(calc)
        elif mode == "3":
            _run_raise_planner()
        elif mode == "4":
            _run_transfer()
        elif mode == "5":
            _run_class_rank()
        elif mode == "6":
            _run_uk_degree(calc)
        else:
            _run_transcript_file(calc)
    except KeyError as e:
        # KeyError repr wraps the message in quotes
        TerminalDisplay.print_error(e.args[0] if e.args else str(e))
    except FileNotFoundError as e:
        TerminalDisplay.print_error(str(e))
        logger.debug("Missing file", exc_info=True)
    except ValueError as e:
        # Malformed transcript JSON
        TerminalDisplay.print_error(f"Could not read transcript: {e}")


if __name__ == "__main__":
    main()
