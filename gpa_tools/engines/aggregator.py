"""
GPA Aggregation Engine.

This module reduces course rows (optionally grouped into semesters and
merged with a prior baseline) into overall, per-bucket and per-semester
GPA figures.
"""

import logging
import math
from typing import Optional

from ..config import BASELINE_MAX_GPA, MAX_CREDITS_PER_COURSE
from ..models import (
    BaselineGPA,
    BucketResult,
    CalculatorDefinition,
    DeansListRule,
    GPAResult,
    SemesterResult,
)
from .grade_scale import GradeScale
from .weighting import WeightingPolicy

logger = logging.getLogger(__name__)


class _Tally:
    """Running unrounded sums for one GPA figure."""

    def __init__(self):
        self.points = 0.0
        self.unweighted_points = 0.0
        self.credits = 0.0

    def add(self, points: float, base_points: float, credits: float):
        self.points += points * credits
        self.unweighted_points += base_points * credits
        self.credits += credits

    @property
    def gpa(self) -> Optional[float]:
        return self.points / self.credits if self.credits > 0 else None

    @property
    def unweighted_gpa(self) -> Optional[float]:
        return self.unweighted_points / self.credits if self.credits > 0 else None


class GPAAggregator:
    """
    Credit-weighted GPA aggregation for one calculator configuration.

    ALGORITHM:
    ---------
    1. Filter: drop rows that are excluded, have no (or no recognizable)
       grade, or whose credit weight is not in (0, max_credits]
    2. Points: base = scale.points_for(grade);
               adjusted = policy.adjusted_points(base, category)
    3. Accumulate: sum(points * credits) and sum(credits), unrounded.
       Bucketed categories also accumulate into their own tally.
    4. Baseline: a valid prior GPA/credits pair is added to the overall
       sums exactly like one more course. Buckets never see it.
    5. Divide: GPA = points / credits, or None when credits are 0

    Nothing in here raises for bad rows. A half-filled form is the normal
    case, so invalid input degrades to "not counted".
    """

    def __init__(self, scale: GradeScale, policy: Optional[WeightingPolicy] = None,
                 allow_baseline: bool = True, baseline_max_gpa: float = BASELINE_MAX_GPA,
                 max_credits: float = MAX_CREDITS_PER_COURSE,
                 uniform_credit: Optional[float] = None,
                 deans_list: Optional[DeansListRule] = None):
        self.scale = scale
        self.policy = policy or WeightingPolicy()
        self.allow_baseline = allow_baseline
        self.baseline_max_gpa = baseline_max_gpa
        self.max_credits = max_credits
        self.uniform_credit = uniform_credit
        self.deans_list = deans_list

    @classmethod
    def from_definition(cls, definition: CalculatorDefinition) -> "GPAAggregator":
        return cls(
            scale=GradeScale(definition.scale),
            policy=WeightingPolicy.from_definition(definition),
            allow_baseline=definition.allow_baseline,
            baseline_max_gpa=definition.baseline_max_gpa,
            max_credits=definition.max_credits,
            uniform_credit=definition.uniform_credit,
            deans_list=definition.deans_list,
        )

    # -------------------------------------------------------------------------
    # Row filtering
    # -------------------------------------------------------------------------

    def credit_weight(self, course) -> Optional[float]:
        """Credits a row counts for, or None if its credit value is unusable."""
        if self.uniform_credit is not None:
            return self.uniform_credit
        try:
            credits = float(course.credits)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(credits) or credits <= 0 or credits > self.max_credits:
            return None
        return credits

    def excluded_ids(self, courses) -> list:
        """
        Ids of graded rows dropped because of their credit value.

        The UI marks these rows as invalid; rows without a grade are simply
        unfinished and are not reported.
        """
        return [
            c.id for c in courses
            if not c.excluded and self.scale.is_graded(c.grade) and self.credit_weight(c) is None
        ]

    def _included(self, courses):
        for course in courses:
            if course.excluded:
                logger.debug("Row %s excluded by the student", course.id)
                continue
            if not self.scale.is_graded(course.grade):
                logger.debug("Row %s has no countable grade (%r)", course.id, course.grade)
                continue
            credits = self.credit_weight(course)
            if credits is None:
                logger.debug("Row %s has invalid credits (%r)", course.id, course.credits)
                continue
            yield course, credits

    # -------------------------------------------------------------------------
    # Aggregation
    # -------------------------------------------------------------------------

    def aggregate(self, courses, baseline: Optional[BaselineGPA] = None) -> GPAResult:
        """
        Aggregate a flat list of course rows.

        Args:
            courses: Iterable of CourseRecord
            baseline: Optional prior GPA/credits, folded in only when valid

        Returns:
            GPAResult with overall/unweighted GPA and one BucketResult per
            configured bucket (gpa None for an empty bucket)
        """
        courses = list(courses)
        overall = _Tally()
        buckets = {key.value: _Tally() for key in self.policy.buckets}
        included = 0

        for course, credits in self._included(courses):
            base = self.scale.points_for(course.grade)
            points = self.policy.adjusted_points(base, course.category)
            overall.add(points, base, credits)
            bucket = self.policy.bucket_for(course.category)
            if bucket is not None:
                buckets[bucket].add(points, base, credits)
            included += 1

        baseline_applied = self._fold_baseline(overall, baseline)

        return GPAResult(
            overall_gpa=overall.gpa,
            unweighted_gpa=overall.unweighted_gpa,
            total_credits=overall.credits,
            total_points=overall.points,
            included_count=included,
            excluded_ids=self.excluded_ids(courses),
            buckets={
                key: BucketResult(
                    key=key,
                    label=self.policy.bucket_label(key),
                    gpa=tally.gpa,
                    credits=tally.credits,
                    points=tally.points,
                )
                for key, tally in buckets.items()
            },
            baseline_applied=baseline_applied,
        )

    def aggregate_semesters(self, semesters, baseline: Optional[BaselineGPA] = None) -> GPAResult:
        """
        Cumulative result across semesters plus one SemesterResult each.

        The baseline is folded into the cumulative figure once; semester
        figures only ever cover that semester's own rows.
        """
        semesters = list(semesters)
        all_courses = [c for s in semesters for c in s.courses]
        result = self.aggregate(all_courses, baseline)
        result.semesters = [self._semester_result(s) for s in semesters]
        return result

    def _semester_result(self, semester) -> SemesterResult:
        term = self.aggregate(semester.courses)
        deans = None
        if self.deans_list is not None:
            deans = (
                term.overall_gpa is not None
                and term.overall_gpa >= self.deans_list.min_gpa
                and term.total_credits >= self.deans_list.min_credits
            )
        return SemesterResult(
            semester_id=semester.id,
            label=semester.label,
            gpa=term.overall_gpa,
            unweighted_gpa=term.unweighted_gpa,
            credits=term.total_credits,
            deans_list=deans,
        )

    def _fold_baseline(self, tally: _Tally, baseline: Optional[BaselineGPA]) -> bool:
        if baseline is None:
            return False
        if not self.allow_baseline:
            logger.debug("Baseline ignored: calculator does not merge prior GPA")
            return False
        if not baseline.is_valid(self.baseline_max_gpa):
            logger.debug("Baseline ignored: prior_gpa=%r prior_credits=%r",
                         baseline.prior_gpa, baseline.prior_credits)
            return False
        tally.add(float(baseline.prior_gpa), float(baseline.prior_gpa), float(baseline.prior_credits))
        return True
