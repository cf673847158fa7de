"""
UK Degree Classification Engine.

This module computes a year-weighted UK honours classification from module
marks and converts it to a US-style GPA.
"""

import logging
import math
from typing import Optional

from ..models import UKDegreeResult, UKModule

logger = logging.getLogger(__name__)


class UKDegreeEngine:
    """
    Year-weighted honours classification for one degree scheme.

    BIRMINGHAM SCHEME (10 / 30 / 60):
    --------------------------------
    year average   = sum(percentage * credits) / sum(credits), per year
    weighted mark  = 0.10 * Y1 + 0.30 * Y2 + 0.60 * Y3
    classification = band lookup on the weighted mark (70 = First, ...)
    US GPA         = band lookup on the weighted mark (80+ = 4.0, ...)

    Other schemes change the weights and bands. Manchester is 20 / 30 / 50;
    Leeds 2022+ gives year 1 a weight of 0, so it is optional and never
    summed, and adds a 0.5 borderline uplift before the classification
    lookup (the US GPA still uses the unadjusted mark).

    UK modules routinely carry 20-40 credits, so the US per-course credit
    cap does not apply here. A module with non-positive credits or a mark
    outside 0-100 is ignored.
    """

    def __init__(self, scheme: dict):
        self.scheme = scheme
        self.year_weights = scheme["year_weights"]
        self.credits_per_year = scheme.get("credits_per_year")
        self.uplift = scheme.get("classification_uplift", 0.0)

    @staticmethod
    def _valid(module: UKModule) -> bool:
        try:
            credits = float(module.credits)
            percentage = float(module.percentage)
        except (TypeError, ValueError):
            return False
        return (
            math.isfinite(credits) and credits > 0
            and math.isfinite(percentage) and 0.0 <= percentage <= 100.0
        )

    def credit_totals(self, modules) -> dict:
        """Valid credits entered per weighted year."""
        totals = {year: 0.0 for year in self.year_weights}
        for module in modules:
            if module.year in totals and self._valid(module):
                totals[module.year] += float(module.credits)
        return totals

    def credit_issues(self, modules) -> dict:
        """
        Counted years whose credit total differs from the expected load.

        Returns {year: total} for the mismatched years; empty when the scheme
        has no expected load or every counted year matches. Zero-weight
        years (Leeds 2022+ year 1) are never reported.
        """
        if not self.credits_per_year:
            return {}
        return {
            year: total for year, total in self.credit_totals(modules).items()
            if self.year_weights[year] > 0 and total != self.credits_per_year
        }

    def year_averages(self, modules) -> dict:
        """Credit-weighted average per weighted year; None for an empty year."""
        sums = {year: [0.0, 0.0] for year in self.year_weights}
        for module in modules:
            if module.year not in sums or not self._valid(module):
                continue
            credits = float(module.credits)
            sums[module.year][0] += float(module.percentage) * credits
            sums[module.year][1] += credits
        return {
            year: (points / credits if credits > 0 else None)
            for year, (points, credits) in sums.items()
        }

    def calculate(self, modules) -> Optional[UKDegreeResult]:
        modules = list(modules)
        averages = self.year_averages(modules)
        missing = [year for year, avg in averages.items() if avg is None and self.year_weights[year] > 0]
        if missing:
            logger.debug("No valid modules for year(s) %s, no classification", missing)
            return None

        weighted = sum(
            averages[year] * weight for year, weight in self.year_weights.items() if weight > 0
        )
        # Borderline uplift only moves the classification, not the GPA
        uplifted = weighted + self.uplift
        return UKDegreeResult(
            scheme=self.scheme.get("key", ""),
            year_averages=averages,
            weighted_percentage=weighted,
            classification=self.scheme["classification"].lookup(uplifted),
            us_gpa=self.scheme["gpa"].lookup(weighted),
        )
