"""
Grade Scale Engine.

This module converts the grades students type or pick into grade points
under one named scale.
"""

import math
from typing import Optional

from ..config import NO_GRADE_MARKERS, NON_GRADE_MARKS
from ..models import GradeScaleTable


class GradeScale:
    """
    Converts grades to points under a single GradeScaleTable.

    GRADE FORMS ACCEPTED:
    --------------------
    Letter:      "B+", " b+ " (case and surrounding whitespace ignored)
    Percentage:  91 or "91" (only on scales with percentage bands)

    NOT GRADES:
    ----------
    "", "-", None          Row has no grade picked yet
    W, I, IP, P, NP, CR, NC Transcript marks that never carry points

    points_for() keeps the lenient behavior of the calculator pages:
    anything it does not recognize is worth 0.0. Aggregation never relies
    on that default; it asks is_graded() first so an unknown grade is left
    out instead of being counted as an F.
    """

    def __init__(self, table: GradeScaleTable):
        self.table = table

    @property
    def key(self) -> str:
        return self.table.key

    @property
    def has_percentage_bands(self) -> bool:
        return self.table.percentage_bands is not None

    def points_for(self, grade) -> float:
        """Grade points for a letter (or percentage); unknown grades give 0.0."""
        letter = self.resolve(grade)
        if letter is None:
            return 0.0
        return self.table.points[letter]

    def bandify(self, percentage: float) -> str:
        """
        Map a percentage to a letter grade.

        Lower bounds are inclusive: 90 is an A-, 89.99 is a B+. Values above
        100 land in the top band and anything under the lowest minimum is
        the failing grade.
        """
        if self.table.percentage_bands is None:
            raise ValueError(f"Grade scale {self.key!r} has no percentage bands")
        return self.table.percentage_bands.lookup(percentage).upper()

    def resolve(self, grade) -> Optional[str]:
        """
        Normalize a raw grade into a key of the points table.

        Returns None when the grade is missing, a non-grade mark, or not
        something this scale understands.
        """
        if grade is None or isinstance(grade, bool):
            return None

        if isinstance(grade, (int, float)):
            return self._resolve_percentage(float(grade))

        text = str(grade).strip()
        if text in NO_GRADE_MARKERS:
            return None
        letter = text.upper()
        if letter in NON_GRADE_MARKS:
            return None
        if letter in self.table.points:
            return letter

        try:
            number = float(text)
        except ValueError:
            return None
        return self._resolve_percentage(number)

    def is_graded(self, grade) -> bool:
        return self.resolve(grade) is not None

    def _resolve_percentage(self, number: float) -> Optional[str]:
        if not self.has_percentage_bands or math.isnan(number):
            return None
        return self.bandify(number)
