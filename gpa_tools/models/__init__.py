"""
Data models for the GPA tools.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the engines, the loader and the UI.
"""

from .course import CourseCategory, CourseRecord, Semester, Transcript, BaselineGPA
from .scale import Band, BandTable, ConjunctiveBand, ConjunctiveTable, GradeScaleTable
from .calculator import (
    WeightRule,
    ClassificationRule,
    ConjunctiveRule,
    FlagRule,
    DeansListRule,
    CalculatorDefinition,
)
from .result import (
    format_gpa,
    round_gpa,
    BucketResult,
    SemesterResult,
    GPAResult,
    RaiseScenario,
    TransferPolicyResult,
    TransferResult,
    ClassRankResult,
    UKModule,
    UKDegreeResult,
)

__all__ = [
    # Course models
    "CourseCategory",
    "CourseRecord",
    "Semester",
    "Transcript",
    "BaselineGPA",
    # Scales and bands
    "Band",
    "BandTable",
    "ConjunctiveBand",
    "ConjunctiveTable",
    "GradeScaleTable",
    # Calculator definitions
    "WeightRule",
    "ClassificationRule",
    "ConjunctiveRule",
    "FlagRule",
    "DeansListRule",
    "CalculatorDefinition",
    # Results
    "format_gpa",
    "round_gpa",
    "BucketResult",
    "SemesterResult",
    "GPAResult",
    "RaiseScenario",
    "TransferPolicyResult",
    "TransferResult",
    "ClassRankResult",
    "UKModule",
    "UKDegreeResult",
]
