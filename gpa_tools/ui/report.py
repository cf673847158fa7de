"""
Plain-text report export.

Builds the downloadable .txt report the calculator pages offer: the
cumulative GPA, each semester with its courses, the standing labels and a
short note on how the GPA was calculated.
"""

from datetime import datetime
from typing import Optional

from ..config import SITE_URL
from ..engines import GradeScale
from ..models import CalculatorDefinition, GPAResult, format_gpa

RULE_WIDTH = 60


class TextReport:
    """Renders a GPAResult as plain text (no ANSI codes)."""

    def __init__(self, site_url: str = SITE_URL):
        self.site_url = site_url.rstrip("/")

    def render(self, definition: CalculatorDefinition, result: GPAResult,
               semesters: Optional[list] = None, student: Optional[dict] = None,
               generated: Optional[datetime] = None) -> str:
        precision = definition.precision
        generated = generated or datetime.now()
        lines = [
            f"{definition.title.upper()} REPORT",
            f"Generated: {generated:%Y-%m-%d %H:%M}",
            "=" * RULE_WIDTH,
            "",
        ]

        if student:
            if student.get("name"):
                lines.append(f"Student: {student['name']}")
            if student.get("school"):
                lines.append(f"School: {student['school']}")
            lines.append("")

        lines.append(f"CUMULATIVE GPA: {format_gpa(result.overall_gpa, precision)}")
        if definition.is_weighted:
            lines.append(f"Unweighted GPA: {format_gpa(result.unweighted_gpa, precision)}")
        lines.append(f"Grade Scale: {definition.scale.name}")
        lines.append(f"Total Credits: {result.total_credits:g}")
        if result.baseline_applied:
            lines.append("Includes previously earned GPA and credits")
        lines.append("")

        for bucket in result.buckets.values():
            lines.append(f"{bucket.label} GPA: {format_gpa(bucket.gpa, precision)} ({bucket.credits:g} credits)")
        if result.buckets:
            lines.append("")

        scale = GradeScale(definition.scale)
        terms = {term.semester_id: term for term in result.semesters}
        for semester in semesters or []:
            term = terms.get(semester.id)
            term_gpa = format_gpa(term.gpa if term else None, precision)
            lines.append("-" * RULE_WIDTH)
            lines.append(f"{semester.label.upper()} - GPA: {term_gpa}")
            if term is not None and term.deans_list:
                lines.append("Dean's List")
            lines.append("-" * RULE_WIDTH)
            lines.append("")
            number = 0
            for course in semester.courses:
                if not course.has_grade:
                    continue
                number += 1
                counted = (
                    not course.excluded
                    and course.id not in result.excluded_ids
                    and scale.is_graded(course.grade)
                )
                suffix = "" if counted else " (excluded)"
                lines.append(f"{number}. {course.name or 'Unnamed Course'}{suffix}")
                lines.append(f"   Grade: {course.grade} | Credits: {course.credits:g} | "
                             f"Type: {course.category.value}")
                lines.append("")

        if result.classifications or result.flags:
            lines.append("=" * RULE_WIDTH)
            for name, outcome in result.classifications.items():
                lines.append(f"{name.replace('_', ' ').title()}: {outcome}")
            for name, ok in result.flags.items():
                lines.append(f"{name.replace('_', ' ').title()}: {'Yes' if ok else 'No'}")
            lines.append("")

        lines.append("=" * RULE_WIDTH)
        lines.append("CALCULATION METHOD:")
        lines.extend(self._method_lines(definition))
        lines.append("")
        lines.append("Generated by ZuraWebTools")
        lines.append(f"{self.site_url}{definition.path}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _method_lines(definition: CalculatorDefinition) -> list:
        if definition.is_weighted:
            lines = ["Weighted GPA includes course type bonuses:"]
            for category, rule in definition.weights.items():
                lines.append(f"- {category.value.upper()} courses: +{rule.bonus:g} points (max {rule.cap:g})")
            return lines
        return [
            f"GPA uses the {definition.scale.name} scale:",
            "- Credit-weighted average of grade points",
            "- Rows without a grade or with W/P/NP/I marks are not counted",
        ]
