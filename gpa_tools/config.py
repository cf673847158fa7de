"""
Configuration constants for the GPA tools.

This module contains all configuration values and constants used throughout
the calculators. Per-calculator policy (grade scales, weighting bonuses,
classification thresholds) lives in the JSON tables under TABLES_DIR; the
values here are the defaults those tables fall back to.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Tables ship inside the package so an installed copy can find them
BASE_DIR = Path(__file__).parent
TABLES_DIR = BASE_DIR / "tables"
EXAMPLE_TRANSCRIPT = TABLES_DIR / "example_transcript.json"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Placeholder values the course rows start with before a grade is picked
NO_GRADE_MARKERS = {"", "-"}

# Marks that appear on transcripts but carry no grade points.
# AMCAS/CASPA leave these out of every GPA (W = Withdrawn, I = Incomplete,
# IP = In Progress, P/NP = Pass/No Pass, CR/NC = Credit/No Credit,
# S = Satisfactory).
NON_GRADE_MARKS = {"W", "I", "IP", "P", "NP", "CR", "NC", "S"}


# =============================================================================
# CREDIT & BASELINE LIMITS
# =============================================================================

# A single course row above this many credits is treated as a typo
MAX_CREDITS_PER_COURSE = 15.0

# Prior GPA accepted for a cumulative merge: 0.0 <= prior_gpa <= this value
BASELINE_MAX_GPA = 4.0


# =============================================================================
# DISPLAY
# =============================================================================

DISPLAY_PRECISION = 2
NO_GPA_DISPLAY = "—"

DEFAULT_CALCULATOR = "college"
DEFAULT_DEGREE_SCHEME = "birmingham"

SITE_URL = "https://zurawebtools.com"


# =============================================================================
# LOGGING
# =============================================================================

# Console output is the product, so only warnings are shown unless asked
LOG_LEVEL = os.environ.get("GPA_TOOLS_LOG_LEVEL", "WARNING").upper()
