"""
Calculation result data models.

Results are derived data: they are rebuilt from the course rows on every
calculation and never stored on their own. GPA values are kept unrounded;
rounding happens only when formatting for display.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import DISPLAY_PRECISION, NO_GPA_DISPLAY


def format_gpa(value: Optional[float], precision: int = DISPLAY_PRECISION) -> str:
    """Format a GPA for display; a missing GPA shows as a dash, never 0 or NaN."""
    if value is None:
        return NO_GPA_DISPLAY
    return f"{value:.{precision}f}"


def round_gpa(value: Optional[float], precision: int = DISPLAY_PRECISION) -> Optional[float]:
    if value is None:
        return None
    return round(value, precision)


@dataclass
class BucketResult:
    """Sub-GPA for one category bucket (e.g., Science BCPM)."""
    key: str
    label: str
    gpa: Optional[float]
    credits: float
    points: float


@dataclass
class SemesterResult:
    """
    GPA for a single semester.

    Semester figures never include the baseline; that only feeds the
    cumulative result. deans_list is None when the calculator has no
    Dean's List rule.
    """
    semester_id: str
    label: str
    gpa: Optional[float]
    unweighted_gpa: Optional[float]
    credits: float
    deans_list: Optional[bool] = None


@dataclass
class GPAResult:
    """
    Complete output of one calculation.

    overall_gpa is the adjusted (weighted) figure. For calculators without
    weighting it equals unweighted_gpa.

    Example for CASPA with two BCPM rows and a baseline:
        overall_gpa: 3.61...
        buckets: {"science-bcpm": BucketResult(gpa=3.5, ...),
                  "non-science": BucketResult(gpa=None, ...)}
        classifications: {"standing": "Competitive (3.5-3.69)", ...}
    """
    overall_gpa: Optional[float]
    unweighted_gpa: Optional[float]
    total_credits: float
    total_points: float
    included_count: int
    excluded_ids: list = field(default_factory=list)
    buckets: dict = field(default_factory=dict)
    semesters: list = field(default_factory=list)
    baseline_applied: bool = False
    classifications: dict = field(default_factory=dict)
    flags: dict = field(default_factory=dict)

    def metrics(self, extras: Optional[dict] = None) -> dict:
        """Numeric axes that classification rules can refer to by name."""
        values = {
            "overall": self.overall_gpa,
            "unweighted": self.unweighted_gpa,
        }
        for key, bucket in self.buckets.items():
            values[key] = bucket.gpa
        for key, value in (extras or {}).items():
            values[key] = value
        return values


@dataclass
class RaiseScenario:
    """One path to a target GPA: how many credits at what average."""
    credits_needed: float
    required_gpa: float
    grade_needed: str
    achievable: bool
    semesters: int


@dataclass
class TransferPolicyResult:
    gpa: Optional[float]
    credits: float


@dataclass
class TransferResult:
    """
    Transfer GPA under the three common institutional policies.

    fresh_start: Only the new institution's grades count
    combined: All previous credits and the new institution's credits
    weighted: Only the credits that actually transferred, plus the new ones
    """
    fresh_start: TransferPolicyResult
    combined: TransferPolicyResult
    weighted: TransferPolicyResult
    effective_transfer_credits: float
    non_transferred_credits: float


@dataclass
class ClassRankResult:
    percentile: float
    decile: int
    quartile: int
    standing: str
    college_level: str
    scholarship_eligible: bool


@dataclass
class UKModule:
    """A UK module mark: credits, percentage and year of study (1-3)."""
    name: str
    credits: float
    percentage: float
    year: int


@dataclass
class UKDegreeResult:
    scheme: str
    year_averages: dict
    weighted_percentage: float
    classification: str
    us_gpa: float
