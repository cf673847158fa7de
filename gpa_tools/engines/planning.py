"""
GPA planning calculators.

What-if tools that share the 4.0 scale with the GPA calculators but work
on summary numbers instead of course rows:

- raise_scenarios: what average is needed to reach a target GPA
- transfer_gpa: how transfer credits combine under common policies
- class_rank: percentile, decile and quartile from a class rank
"""

import logging
import math
from typing import Optional

from ..models import (
    BandTable,
    ClassRankResult,
    RaiseScenario,
    TransferPolicyResult,
    TransferResult,
)

logger = logging.getLogger(__name__)

# Highest average a student can actually earn on the 4.0 scale
MAX_SEMESTER_GPA = 4.0

DEFAULT_MAX_TRANSFER_CREDITS = 90.0

SCHOLARSHIP_PERCENTILE = 90.0

GRADE_NEEDED_BANDS = BandTable.from_pairs([
    ["A+ / A (3.85-4.0)", 3.85],
    ["A- / A (3.5-3.84)", 3.5],
    ["B+ / A- (3.15-3.49)", 3.15],
    ["B / B+ (2.85-3.14)", 2.85],
    ["B- / B (2.5-2.84)", 2.5],
    ["C+ / B- (2.15-2.49)", 2.15],
    ["C / C+ (1.85-2.14)", 1.85],
    ["C- / C (1.5-1.84)", 1.5],
    ["D / C- (1.0-1.49)", 1.0],
    ["D / F (below 1.0)", None],
])
NOT_ACHIEVABLE = "A+ (4.0+) - Not achievable"

RANK_STANDING_BANDS = BandTable.from_pairs([
    ["Exceptional (Top 5%)", 95],
    ["Excellent (Top 10%)", 90],
    ["Very Good (Top 25%)", 75],
    ["Good (Top Half)", 50],
    ["Average (3rd Quartile)", 25],
    ["Below Average (Bottom Quartile)", None],
])

COLLEGE_LEVEL_BANDS = BandTable.from_pairs([
    ["Ivy League / Most Selective (Top 2%)", 98],
    ["Highly Selective (Top 5%)", 95],
    ["Selective / Competitive (Top 10%)", 90],
    ["Moderately Selective (Top 25%)", 75],
    ["Less Selective / State Universities", 50],
    ["Open Admission / Community Colleges", None],
])


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def grade_needed(required_gpa: float) -> str:
    """Describe the letter-grade mix that averages to required_gpa."""
    if required_gpa > MAX_SEMESTER_GPA:
        return NOT_ACHIEVABLE
    return GRADE_NEEDED_BANDS.lookup(required_gpa)


def raise_scenarios(current_gpa: float, current_credits: float, target_gpa: float,
                    planned_credits: float, multiples=(1, 2, 3, 4)) -> list:
    """
    Scenarios for reaching target_gpa over 1..4 terms of planned_credits.

    For each scenario:
        credits  = planned_credits * k
        required = (target * (current_credits + credits)
                    - current_gpa * current_credits) / credits

    A required average above 4.0 is reported, not hidden, but marked as
    not achievable. Invalid inputs return an empty list.
    """
    numbers = (current_gpa, current_credits, target_gpa, planned_credits)
    if not all(_is_number(n) for n in numbers):
        return []
    if not (0.0 <= current_gpa <= MAX_SEMESTER_GPA and 0.0 <= target_gpa <= MAX_SEMESTER_GPA):
        return []
    if current_credits < 0 or planned_credits <= 0:
        return []

    current_points = current_gpa * current_credits
    scenarios = []
    for k in multiples:
        credits = planned_credits * k
        required = (target_gpa * (current_credits + credits) - current_points) / credits
        scenarios.append(RaiseScenario(
            credits_needed=credits,
            required_gpa=required,
            grade_needed=grade_needed(required),
            achievable=required <= MAX_SEMESTER_GPA,
            semesters=math.ceil(credits / planned_credits),
        ))
    return scenarios


def transfer_gpa(previous_gpa: float, previous_credits: float, transferred_credits: float,
                 new_gpa: Optional[float] = None, new_credits: Optional[float] = None,
                 max_transfer: float = DEFAULT_MAX_TRANSFER_CREDITS) -> Optional[TransferResult]:
    """
    Transfer GPA under the three policies colleges commonly use.

    Policies:
        fresh_start  Only grades earned at the new institution count
        combined     Every previous credit counts alongside the new ones
        weighted     Only the previous credits that transferred (capped at
                     max_transfer) count alongside the new ones

    Until a valid new-institution GPA exists (0.0-4.0 over positive
    credits), combined and weighted report the previous GPA and fresh_start
    has no GPA. A policy left with no credits at all has no GPA either.

    Returns:
        TransferResult, or None when the previous GPA/credits are invalid
    """
    if not all(_is_number(n) for n in (previous_gpa, previous_credits, transferred_credits)):
        return None
    if not 0.0 <= previous_gpa <= MAX_SEMESTER_GPA or previous_credits < 0 or transferred_credits < 0:
        return None

    cap = max_transfer if _is_number(max_transfer) and max_transfer >= 0 else DEFAULT_MAX_TRANSFER_CREDITS
    effective = min(transferred_credits, cap, previous_credits)
    has_new = (
        _is_number(new_gpa) and 0.0 <= new_gpa <= MAX_SEMESTER_GPA
        and _is_number(new_credits) and new_credits > 0
    )
    if not has_new and new_gpa is not None:
        logger.debug("Ignoring new-institution figures gpa=%r credits=%r", new_gpa, new_credits)

    def merged(prior_credits: float) -> TransferPolicyResult:
        if not has_new:
            gpa = previous_gpa if prior_credits > 0 else None
            return TransferPolicyResult(gpa=gpa, credits=prior_credits)
        credits = prior_credits + new_credits
        points = previous_gpa * prior_credits + new_gpa * new_credits
        return TransferPolicyResult(gpa=points / credits if credits > 0 else None, credits=credits)

    fresh = TransferPolicyResult(
        gpa=new_gpa if has_new else None,
        credits=new_credits if has_new else 0.0,
    )

    return TransferResult(
        fresh_start=fresh,
        combined=merged(previous_credits),
        weighted=merged(effective),
        effective_transfer_credits=effective,
        non_transferred_credits=previous_credits - effective,
    )


def class_rank(rank, total) -> Optional[ClassRankResult]:
    """
    Percentile standing for rank out of total (rank 1 is the top student).

        percentile = (total - rank + 1) / total * 100
        decile     = ceil(rank / total * 10)     1 = top 10%
        quartile   = ceil(rank / total * 4)      1 = top 25%
    """
    if not (_is_number(rank) and _is_number(total)):
        return None
    if rank <= 0 or total <= 0 or rank > total:
        return None

    percentile = (total - rank + 1) / total * 100
    return ClassRankResult(
        percentile=percentile,
        decile=math.ceil(rank / total * 10),
        quartile=math.ceil(rank / total * 4),
        standing=RANK_STANDING_BANDS.lookup(percentile),
        college_level=COLLEGE_LEVEL_BANDS.lookup(percentile),
        scholarship_eligible=percentile >= SCHOLARSHIP_PERCENTILE,
    )
