"""
GPA Calculator - Main Orchestrator.

This module contains the GPACalculator class that connects the
algorithm layer to the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m gpa_tools
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CALCULATOR, DEFAULT_DEGREE_SCHEME
from .data import DataLoader, TranscriptParser
from .engines import Classifier, GPAAggregator, UKDegreeEngine
from .models import (
    BaselineGPA,
    CalculatorDefinition,
    CourseRecord,
    GPAResult,
    Semester,
    UKDegreeResult,
)
from .ui import TerminalDisplay, TextReport

logger = logging.getLogger(__name__)


def _as_semesters(semesters) -> list:
    """Accept a Transcript, a list of Semesters, or a flat list of course rows."""
    if hasattr(semesters, "semesters"):
        return list(semesters.semesters)
    semesters = list(semesters)
    if semesters and all(isinstance(s, CourseRecord) for s in semesters):
        return [Semester(label="Semester 1", courses=semesters)]
    return semesters


class GPACalculator:
    """
    Main interface for the GPA tools.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the Algorithm layer to the Presentation layer:

    1. Looks up the CalculatorDefinition for the requested calculator
    2. Runs the engines built from it to get results (pure data)
    3. Passes that data to the Presentation layer for display or export

    Every calculator page (weighted, CASPA, AMCAS, graduate, ...) goes
    through the same engines; only the definition changes.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object:
        calc = GPACalculator(display=WebDisplay())

    Or skip display entirely and use calculate(), which returns data only.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        calc = GPACalculator()

        # Pure calculation, no display
        result = calc.calculate("weighted", transcript)

        # Full run from a transcript file with terminal display
        calc.run("path/to/transcript.json")

        # Query available calculators
        calc.list_calculators()
    """

    def __init__(self, loader: Optional[DataLoader] = None, display=None,
                 report: Optional[TextReport] = None):
        self.loader = loader or DataLoader()
        self.parser = TranscriptParser()
        self.display = display or TerminalDisplay()
        self.report = report or TextReport()

    def list_calculators(self) -> list:
        """List (key, title) for every available calculator."""
        return self.loader.list_calculators()

    def list_degree_schemes(self) -> list:
        return self.loader.list_degree_schemes()

    def definition(self, key: str) -> CalculatorDefinition:
        return self.loader.definition(key)

    def calculate(self, key: str, semesters, baseline: Optional[BaselineGPA] = None,
                  extras: Optional[dict] = None, uniform_credit: Optional[float] = None) -> GPAResult:
        """
        Run aggregation and classification for one calculator.

        Args:
            key: Calculator key (e.g., "pa-school")
            semesters: Transcript, list of Semester, or flat list of CourseRecord
            baseline: Optional prior GPA/credits (ignored by calculators that
                      do not merge a baseline, or when invalid)
            extras: Extra numeric metrics for classification
                    (e.g., {"patient_care_hours": 1250})
            uniform_credit: Count every included row as this many credits,
                            overriding the calculator's own setting

        Returns:
            GPAResult with semester results, classifications and flags filled in

        Raises:
            KeyError: Unknown calculator key
        """
        definition = self.definition(key)
        aggregator = GPAAggregator.from_definition(definition)
        if uniform_credit is not None:
            aggregator.uniform_credit = uniform_credit
        result = aggregator.aggregate_semesters(_as_semesters(semesters), baseline)
        return Classifier(definition).classify(result, extras)

    def run(self, transcript_path, key: Optional[str] = None) -> dict:
        """
        Calculate and display the GPA for a transcript file.

        This is the main entry point for file-based use. It:
        1. Loads and parses the transcript JSON
        2. Picks the calculator (argument, then the file's "calculator"
           field, then the default)
        3. Calculates and prints the results

        Returns:
            Dict with student info, calculator key, transcript and result
        """
        # STEP 1: Load and parse transcript
        with open(transcript_path, "r", encoding="utf-8") as f:
            transcript_data = json.load(f)
        state = self.parser.parse(transcript_data)

        key = key or state["calculator"] or DEFAULT_CALCULATOR
        definition = self.definition(key)

        # STEP 2: Calculate
        uniform = definition.auto_credit if state["auto_credit"] else None
        result = self.calculate(key, state["semesters"], state["baseline"], state["extras"], uniform)

        # STEP 3: Display
        self.display.print_student_info(state["student"], definition)
        self.display.print_course_table(state["semesters"], result, definition)
        self.display.print_result(result, definition)

        return {
            "student": state["student"],
            "calculator": key,
            "transcript": state["transcript"],
            "result": result,
        }

    def export_report(self, key: str, result: GPAResult, semesters=None,
                      student: Optional[dict] = None) -> str:
        """Render the plain-text report for a result."""
        definition = self.definition(key)
        terms = _as_semesters(semesters) if semesters is not None else None
        return self.report.render(definition, result, terms, student)

    def save_report(self, path, key: str, result: GPAResult, semesters=None,
                    student: Optional[dict] = None) -> Path:
        path = Path(path)
        text = self.export_report(key, result, semesters, student)
        path.write_text(text, encoding="utf-8")
        logger.info("Saved %s report to %s", key, path)
        return path

    def uk_degree(self, modules, scheme: str = DEFAULT_DEGREE_SCHEME) -> Optional[UKDegreeResult]:
        """
        UK honours classification and US GPA equivalent.

        Returns None when a weighted year has no valid modules.

        Raises:
            KeyError: Unknown degree scheme
        """
        engine = UKDegreeEngine(self.loader.degree_scheme(scheme))
        return engine.calculate(modules)

    def uk_credit_issues(self, modules, scheme: str = DEFAULT_DEGREE_SCHEME) -> dict:
        """Years whose credit total differs from the scheme's expected load."""
        engine = UKDegreeEngine(self.loader.degree_scheme(scheme))
        return engine.credit_issues(modules)
