"""
Course Weighting Policy.

This module applies category rules to a course's base grade points: the
honors and AP/IB bonuses, and the routing of courses into sub-GPA buckets.
"""

from typing import Optional

from ..models import CalculatorDefinition, CourseCategory


class WeightingPolicy:
    """
    Applies one calculator's category rules.

    WEIGHTING (high-school calculators):
        regular  ->  base points unchanged
        honors   ->  min(base + 0.5, 4.5)
        AP / IB  ->  min(base + 1.0, 5.0)

    An F stays at 0.0 whatever the category.

    BUCKETS (health-professional and graduate calculators):
        Categories such as science-bcpm or research do not change points;
        they decide which separate sub-GPA a course also counts toward.
    """

    def __init__(self, weights: Optional[dict] = None, buckets: Optional[dict] = None):
        self.weights = dict(weights or {})
        self.buckets = dict(buckets or {})

    @classmethod
    def from_definition(cls, definition: CalculatorDefinition) -> "WeightingPolicy":
        return cls(weights=definition.weights, buckets=definition.buckets)

    @property
    def is_weighted(self) -> bool:
        return any(rule.bonus for rule in self.weights.values())

    def adjusted_points(self, base_points: float, category=CourseCategory.REGULAR) -> float:
        if base_points <= 0.0:
            return 0.0
        rule = self.weights.get(CourseCategory.parse(category))
        if rule is None:
            return base_points
        return min(base_points + rule.bonus, rule.cap)

    def bucket_for(self, category) -> Optional[str]:
        """Bucket key the category feeds, or None if it only counts overall."""
        category = CourseCategory.parse(category)
        if category in self.buckets:
            return category.value
        return None

    def bucket_label(self, bucket_key: str) -> str:
        return self.buckets.get(CourseCategory.parse(bucket_key), bucket_key)
