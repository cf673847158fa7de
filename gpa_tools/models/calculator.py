"""
Calculator definition models.

A CalculatorDefinition is the configuration object for one calculator
variant (weighted high school, CASPA, AMCAS, graduate school, ...). The
engines are generic; everything that differs between variants is data
held here and loaded from tables/calculators.json.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import BASELINE_MAX_GPA, MAX_CREDITS_PER_COURSE
from .course import CourseCategory
from .scale import BandTable, ConjunctiveTable, GradeScaleTable


@dataclass(frozen=True)
class WeightRule:
    """Bonus added to a category's base points, and the ceiling it can reach."""
    bonus: float
    cap: float


@dataclass(frozen=True)
class ClassificationRule:
    """Maps one metric (e.g., "overall", "science-bcpm") through a BandTable."""
    name: str
    metric: str
    table: BandTable
    title: str = ""


@dataclass(frozen=True)
class ConjunctiveRule:
    """Two-or-more-axis classification; every axis must clear its minimum."""
    name: str
    table: ConjunctiveTable
    title: str = ""


@dataclass(frozen=True)
class FlagRule:
    """A yes/no eligibility check: metric >= minimum."""
    name: str
    metric: str
    minimum: float
    title: str = ""


@dataclass(frozen=True)
class DeansListRule:
    """Semester honor: semester GPA and credit load both at or above the minimums."""
    min_gpa: float
    min_credits: float


@dataclass
class CalculatorDefinition:
    """
    Policy bundle for one calculator variant.

    Attributes:
        key: Calculator key (e.g., "pa-school")
        title: Display title
        path: Page path on the site, used for report footers and IndexNow
        scale: GradeScaleTable used to convert grades
        weights: CourseCategory -> WeightRule for weighted tiers
        buckets: CourseCategory -> label for separate sub-GPAs
        allow_baseline: Whether a prior GPA/credits pair may be merged
        baseline_max_gpa: Upper bound for an acceptable prior GPA
        max_credits: Rows above this credit weight are excluded
        uniform_credit: When set, every included row counts this many credits
        auto_credit: Credit value offered by the "count every course the same"
            toggle; None when the calculator has no such toggle
        display_precision: Decimal places for display
        classifications / conjunctive / flags: Label and eligibility rules
        deans_list: Optional per-semester Dean's List rule
    """
    key: str
    title: str
    scale: GradeScaleTable
    path: str = ""
    weights: dict = field(default_factory=dict)
    buckets: dict = field(default_factory=dict)
    allow_baseline: bool = False
    baseline_max_gpa: float = BASELINE_MAX_GPA
    max_credits: float = MAX_CREDITS_PER_COURSE
    uniform_credit: Optional[float] = None
    auto_credit: Optional[float] = None
    display_precision: Optional[int] = None
    classifications: list = field(default_factory=list)
    conjunctive: list = field(default_factory=list)
    flags: list = field(default_factory=list)
    deans_list: Optional[DeansListRule] = None
    description: str = ""

    @property
    def precision(self) -> int:
        if self.display_precision is not None:
            return self.display_precision
        return self.scale.display_precision

    @property
    def is_weighted(self) -> bool:
        return any(rule.bonus for rule in self.weights.values())

    @property
    def categories(self) -> list:
        """Categories a row may pick in this calculator (regular is always allowed)."""
        cats = [CourseCategory.REGULAR]
        for cat in list(self.weights) + list(self.buckets):
            if cat not in cats:
                cats.append(cat)
        return cats
