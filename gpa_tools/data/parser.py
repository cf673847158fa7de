"""
Transcript parsing.

This module turns a raw transcript JSON document into Semester/CourseRecord
objects the aggregator can work with.
"""

import logging

from ..models import BaselineGPA, CourseRecord, Semester, Transcript

logger = logging.getLogger(__name__)


def _to_float(value, default=0.0) -> float:
    """Coerce a form value to float; blanks and junk become the default."""
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


class TranscriptParser:
    """
    Parses a transcript document into structured semesters.

    KEY RESPONSIBILITY: Accept what a calculator form can produce and never
    reject it. A credit value that cannot be parsed becomes 0.0 so the row
    is excluded downstream instead of raising here; grades are passed
    through untouched because only the grade scale knows what is valid.

    ACCEPTED SHAPES:
    - {"semesters": [{"label": ..., "courses": [...]}, ...]}
    - {"courses": [...]}  (a single-semester calculator)
    """

    def parse(self, transcript_data: dict) -> dict:
        """
        Parse a transcript and return structured student state.

        Args:
            transcript_data: Raw parsed transcript JSON

        Returns:
            {
                "student": {name, school, ...},
                "calculator": "pa-school" or None,
                "transcript": Transcript,
                "semesters": [Semester, ...],
                "baseline": BaselineGPA or None,
                "extras": {"patient_care_hours": 1250, ...},
                "auto_credit": True when every course should count the same
            }
        """
        semesters_raw = transcript_data.get("semesters")
        if semesters_raw is None:
            semesters_raw = [{"label": "Semester 1", "courses": transcript_data.get("courses", [])}]

        semesters = []
        for index, entry in enumerate(semesters_raw, start=1):
            courses = [self._parse_course(c) for c in entry.get("courses", [])]
            semester = Semester(label=entry.get("label") or f"Semester {index}", courses=courses)
            semesters.append(semester)

        transcript = Transcript(semesters=semesters)
        logger.debug("Parsed %d semester(s), %d course row(s)",
                     len(transcript.semesters), len(transcript.all_courses()))

        return {
            "student": transcript_data.get("student", {}),
            "calculator": transcript_data.get("calculator"),
            "transcript": transcript,
            "semesters": transcript.semesters,
            "baseline": self._parse_baseline(transcript_data.get("baseline")),
            "extras": self._parse_extras(transcript_data.get("extras", {})),
            "auto_credit": transcript_data.get("auto_credit") is True,
        }

    def _parse_course(self, course_data: dict) -> CourseRecord:
        return CourseRecord(
            name=course_data.get("name", ""),
            grade=course_data.get("grade"),
            credits=_to_float(course_data.get("credits")),
            category=course_data.get("category", "regular"),
            excluded=bool(course_data.get("excluded", False)),
            id=str(course_data.get("id") or ""),
        )

    @staticmethod
    def _parse_baseline(baseline_data):
        if not baseline_data:
            return None
        return BaselineGPA(
            prior_gpa=_to_float(baseline_data.get("prior_gpa"), default=None),
            prior_credits=_to_float(baseline_data.get("prior_credits"), default=None),
        )

    @staticmethod
    def _parse_extras(extras_data: dict) -> dict:
        # Extras feed classification metrics, so only numbers survive
        extras = {}
        for key, value in (extras_data or {}).items():
            number = _to_float(value, default=None)
            if number is not None:
                extras[key] = number
        return extras
