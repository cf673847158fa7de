"""
GPA Tools Package
=================

A multi-scale GPA computation engine behind a catalog of GPA calculators:
weighted and unweighted high school, college, semester, cumulative, CASPA
(PA school), AMCAS (medical school), dental, pharmacy, nursing, graduate
school and LSAC, plus the planning tools that share the same grade tables.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │TranscriptParser │  │ GradeScale / WeightingPolicy│  │
│  │  (tables)   │  │ (parsing)       │  │ (points per course)         │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │     GPAAggregator       │  │  Classifier / planning / UK degree  │  │
│  │ (credit-weighted sums)  │  │  (threshold labels, what-ifs)       │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │            TerminalDisplay            TextReport                 │   │
│  │  • Formats and prints to console   • Downloadable .txt report   │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                       GPACalculator                                      │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gpa_tools/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── calculator.py        # GPACalculator orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # CourseRecord, CourseCategory, Semester, Transcript
│   ├── scale.py         # Band, BandTable, ConjunctiveTable, GradeScaleTable
│   ├── calculator.py    # CalculatorDefinition and its rules
│   └── result.py        # GPAResult and the planning results
│
├── data/                # Data loading and parsing
│   ├── loader.py        # DataLoader
│   └── parser.py        # TranscriptParser
│
├── engines/             # GPA engines
│   ├── grade_scale.py   # GradeScale
│   ├── weighting.py     # WeightingPolicy
│   ├── aggregator.py    # GPAAggregator
│   ├── classification.py # Classifier
│   ├── planning.py      # raise_scenarios, transfer_gpa, class_rank
│   └── uk_degree.py     # UKDegreeEngine
│
├── tables/              # JSON policy tables (scales, calculators, schemes)
│
└── ui/                  # User interface implementations
    ├── terminal.py      # TerminalDisplay
    └── report.py        # TextReport

USAGE
-----

Basic usage:

    from gpa_tools import GPACalculator, CourseRecord

    calc = GPACalculator()
    courses = [
        CourseRecord("Chemistry", "A", 3, "ap"),
        CourseRecord("English", "B+", 3, "honors"),
    ]
    result = calc.calculate("weighted", courses)
    print(result.overall_gpa)

    # Full run with terminal display
    calc.run("transcript.json")

Running from command line:

    python -m gpa_tools
    gpa-tools

"""

# Version
__version__ = "1.0.0"

# Main exports
from .calculator import GPACalculator
from .cli import main

# Model exports (for programmatic use)
from .models import (
    CourseCategory,
    CourseRecord,
    Semester,
    Transcript,
    BaselineGPA,
    BandTable,
    GradeScaleTable,
    CalculatorDefinition,
    GPAResult,
    BucketResult,
    SemesterResult,
    UKModule,
    format_gpa,
)

# Engine exports (for advanced use)
from .engines import (
    GradeScale,
    WeightingPolicy,
    GPAAggregator,
    Classifier,
    UKDegreeEngine,
    raise_scenarios,
    transfer_gpa,
    class_rank,
)

# Data exports
from .data import DataLoader, TranscriptParser

# UI exports
from .ui import TerminalDisplay, TextReport

# Configuration exports
from .config import (
    TABLES_DIR,
    MAX_CREDITS_PER_COURSE,
    NON_GRADE_MARKS,
    BASELINE_MAX_GPA,
    DEFAULT_CALCULATOR,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GPACalculator",
    "main",
    # Models
    "CourseCategory",
    "CourseRecord",
    "Semester",
    "Transcript",
    "BaselineGPA",
    "BandTable",
    "GradeScaleTable",
    "CalculatorDefinition",
    "GPAResult",
    "BucketResult",
    "SemesterResult",
    "UKModule",
    "format_gpa",
    # Engines
    "GradeScale",
    "WeightingPolicy",
    "GPAAggregator",
    "Classifier",
    "UKDegreeEngine",
    "raise_scenarios",
    "transfer_gpa",
    "class_rank",
    # Data
    "DataLoader",
    "TranscriptParser",
    # UI
    "TerminalDisplay",
    "TextReport",
    # Config
    "TABLES_DIR",
    "MAX_CREDITS_PER_COURSE",
    "NON_GRADE_MARKS",
    "BASELINE_MAX_GPA",
    "DEFAULT_CALCULATOR",
]
