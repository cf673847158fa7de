"""
Course data models.

Contains the CourseRecord dataclass, the CourseCategory enum, and the
Semester/Transcript containers that hold a student's course rows.
"""

import logging
import math
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ..config import NO_GRADE_MARKERS

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


class CourseCategory(str, Enum):
    """
    Kinds of course a row can be marked as.

    REGULAR / HONORS / AP: high-school weighting tiers (AP covers IB too)
    SCIENCE_BCPM / NON_SCIENCE / PROFESSIONAL: health-professional buckets
    COURSEWORK / RESEARCH: graduate-school buckets

    Weighting tiers adjust grade points. Bucket categories leave the points
    alone and only decide which sub-GPA a course feeds.
    """
    REGULAR = "regular"
    HONORS = "honors"
    AP = "ap"
    SCIENCE_BCPM = "science-bcpm"
    NON_SCIENCE = "non-science"
    PROFESSIONAL = "professional"
    COURSEWORK = "coursework"
    RESEARCH = "research"

    @classmethod
    def parse(cls, value) -> "CourseCategory":
        """Parse a raw category string, falling back to REGULAR."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower().replace("_", "-")
        # Aliases seen in calculator forms
        aliases = {"ib": "ap", "ap-ib": "ap", "science": "science-bcpm", "bcpm": "science-bcpm"}
        text = aliases.get(text, text)
        if not text:
            return cls.REGULAR
        try:
            return cls(text)
        except ValueError:
            logger.warning("Unknown course category %r, treating as regular", value)
            return cls.REGULAR


@dataclass
class CourseRecord:
    """
    A single course row as entered by the student.

    Only grade, credits, category and excluded feed the GPA math; the name
    is carried along for display and reports.

    Attributes:
        name: Course name (cosmetic)
        grade: Letter grade ("B+"), percentage (91 or "91"), or None/"" when not picked yet
        credits: Credit/unit weight of the course
        category: CourseCategory value
        excluded: Student asked to leave this row out of the GPA
        id: Row identifier (auto-generated if empty)
    """
    name: str = ""
    grade: Optional[Union[str, float]] = None
    credits: float = 0.0
    category: CourseCategory = CourseCategory.REGULAR
    excluded: bool = False
    id: str = ""

    def __post_init__(self):
        if not self.id:
            self.id = _new_id()
        self.category = CourseCategory.parse(self.category)

    @property
    def has_grade(self) -> bool:
        if self.grade is None:
            return False
        if isinstance(self.grade, str):
            return self.grade.strip() not in NO_GRADE_MARKERS
        return True


@dataclass
class Semester:
    """
    An ordered group of course rows.

    A semester always keeps at least one row so the form never ends up
    empty; remove_course refuses to delete the last one.
    """
    label: str = "Semester 1"
    courses: list = field(default_factory=list)
    id: str = ""

    def __post_init__(self):
        if not self.id:
            self.id = _new_id()
        if not self.courses:
            self.courses.append(CourseRecord())

    def add_course(self, name: str = "", grade=None, credits: float = 0.0,
                   category=CourseCategory.REGULAR, excluded: bool = False) -> CourseRecord:
        course = CourseRecord(name=name, grade=grade, credits=credits,
                              category=category, excluded=excluded)
        self.courses.append(course)
        return course

    def find_course(self, course_id: str) -> Optional[CourseRecord]:
        for course in self.courses:
            if course.id == course_id:
                return course
        return None

    def update_course(self, course_id: str, **changes) -> bool:
        """Edit a row in place. Returns False if the row does not exist."""
        course = self.find_course(course_id)
        if course is None:
            return False
        for key, value in changes.items():
            if not hasattr(course, key) or key == "id":
                raise AttributeError(f"CourseRecord has no editable field: {key}")
            if key == "category":
                value = CourseCategory.parse(value)
            setattr(course, key, value)
        return True

    def remove_course(self, course_id: str) -> bool:
        """Remove a row unless it is the only one left."""
        if len(self.courses) <= 1:
            return False
        remaining = [c for c in self.courses if c.id != course_id]
        if len(remaining) == len(self.courses):
            return False
        self.courses = remaining
        return True


@dataclass
class Transcript:
    """
    All semesters of course rows owned by one calculator session.

    Like Semester, it never drops below one semester.
    """
    semesters: list = field(default_factory=list)

    def __post_init__(self):
        if not self.semesters:
            self.semesters.append(Semester(label="Semester 1"))

    def add_semester(self, label: Optional[str] = None) -> Semester:
        semester = Semester(label=label or f"Semester {len(self.semesters) + 1}")
        self.semesters.append(semester)
        return semester

    def remove_semester(self, semester_id: str) -> bool:
        if len(self.semesters) <= 1:
            return False
        remaining = [s for s in self.semesters if s.id != semester_id]
        if len(remaining) == len(self.semesters):
            return False
        self.semesters = remaining
        return True

    def all_courses(self) -> list:
        return [c for s in self.semesters for c in s.courses]

    def reset(self):
        self.semesters = [Semester(label="Semester 1")]


@dataclass
class BaselineGPA:
    """
    Previously earned GPA and credits, merged into a cumulative figure.

    The merge only happens when both numbers are in range; a half-filled
    or out-of-range baseline is ignored rather than partially applied.
    """
    prior_gpa: Optional[float]
    prior_credits: Optional[float]

    def is_valid(self, max_gpa: float) -> bool:
        if self.prior_gpa is None or self.prior_credits is None:
            return False
        return 0.0 <= self.prior_gpa <= max_gpa and 0 < self.prior_credits < math.inf
