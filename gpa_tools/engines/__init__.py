"""
GPA computation engines.

This package contains the engines that perform the core GPA math:
grade conversion, weighting, aggregation, classification, and the
planning and UK degree calculators.
"""

from .grade_scale import GradeScale
from .weighting import WeightingPolicy
from .aggregator import GPAAggregator
from .classification import Classifier
from .planning import raise_scenarios, transfer_gpa, class_rank, grade_needed
from .uk_degree import UKDegreeEngine

__all__ = [
    "GradeScale",
    "WeightingPolicy",
    "GPAAggregator",
    "Classifier",
    "raise_scenarios",
    "transfer_gpa",
    "class_rank",
    "grade_needed",
    "UKDegreeEngine",
]
