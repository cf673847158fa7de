"""
Policy table loading and caching.

This module loads the JSON tables that parameterize the calculators and
turns them into model objects (GradeScaleTable, CalculatorDefinition, ...).
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import TABLES_DIR
from ..models import (
    BandTable,
    CalculatorDefinition,
    ClassificationRule,
    ConjunctiveBand,
    ConjunctiveRule,
    ConjunctiveTable,
    CourseCategory,
    DeansListRule,
    FlagRule,
    GradeScaleTable,
    WeightRule,
)

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the calculator policy tables.

    WHY LAZY LOADING: Properties only read a file when first accessed, so a
    class-rank lookup never touches the grade scales and the UK degree
    engine never touches calculators.json.

    WHY CACHING: Every calculation on a page rebuilds the GPA from scratch.
    The tables themselves never change at runtime, so they are parsed once
    per loader and the built objects are reused.

    DATA SOURCES (all under tables/):
    - grade_scales.json: letter -> points maps and percentage bands
    - calculators.json: one CalculatorDefinition per calculator page
    - degree_schemes.json: UK year weights and classification bands

    Usage:
        loader = DataLoader()
        definition = loader.definition("pa-school")
        scale = loader.scale("lsac")
    """

    def __init__(self, tables_dir: Optional[Path] = None):
        self.tables_dir = Path(tables_dir) if tables_dir else TABLES_DIR
        # Private cache variables - None means "not loaded yet"
        self._grade_scales = None
        self._calculators = None
        self._degree_schemes = None
        self._definitions_cache = {}  # Keyed by calculator key

    def _read_table(self, filename: str) -> dict:
        filepath = self.tables_dir / filename
        if not filepath.exists():
            raise FileNotFoundError(f"Table file not found: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loaded %s (schema %s)", filename, data.get("schema_version", "?"))
        return data

    @property
    def grade_scales(self) -> dict:
        """
        All grade scales, keyed by scale key.

        Built eagerly on first access so a malformed band table fails
        here, at load time, rather than in the middle of a calculation.
        """
        if self._grade_scales is None:
            raw = self._read_table("grade_scales.json").get("scales", {})
            self._grade_scales = {
                key: self._build_scale(key, entry) for key, entry in raw.items()
            }
        return self._grade_scales

    @property
    def calculators(self) -> dict:
        """Raw calculator entries from calculators.json, keyed by calculator key."""
        if self._calculators is None:
            self._calculators = self._read_table("calculators.json").get("calculators", {})
        return self._calculators

    @property
    def degree_schemes(self) -> dict:
        if self._degree_schemes is None:
            raw = self._read_table("degree_schemes.json").get("schemes", {})
            self._degree_schemes = {
                key: self._build_scheme(key, entry) for key, entry in raw.items()
            }
        return self._degree_schemes

    def scale(self, key: str) -> GradeScaleTable:
        try:
            return self.grade_scales[key]
        except KeyError:
            raise KeyError(f"No grade scale found for: {key}") from None

    def definition(self, key: str) -> CalculatorDefinition:
        """
        Build (or fetch from cache) the definition for one calculator.

        Args:
            key: Calculator key (e.g., "weighted", "medical-school")

        Returns:
            CalculatorDefinition with its grade scale and rule tables resolved

        Raises:
            KeyError: No calculator with that key exists
        """
        if key not in self._definitions_cache:
            entry = self.calculators.get(key)
            if entry is None:
                raise KeyError(f"No calculator definition found for: {key}")
            self._definitions_cache[key] = self._build_definition(key, entry)
        return self._definitions_cache[key]

    def list_calculators(self) -> list:
        """Sorted list of (key, title) pairs for every shipped calculator."""
        return sorted((key, entry.get("title", key)) for key, entry in self.calculators.items())

    def list_degree_schemes(self) -> list:
        """(key, name) pairs for every UK degree scheme, in table order."""
        return [(key, scheme["name"]) for key, scheme in self.degree_schemes.items()]

    def degree_scheme(self, key: str) -> dict:
        try:
            return self.degree_schemes[key]
        except KeyError:
            raise KeyError(f"No degree scheme found for: {key}") from None

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    @staticmethod
    def _build_scale(key: str, entry: dict) -> GradeScaleTable:
        bands = entry.get("percentage_bands")
        return GradeScaleTable(
            key=key,
            name=entry.get("name", key),
            points=entry.get("points", {}),
            percentage_bands=BandTable.from_pairs(bands) if bands else None,
            display_precision=entry.get("display_precision", 2),
        )

    @staticmethod
    def _build_scheme(key: str, entry: dict) -> dict:
        return {
            "key": key,
            "name": entry.get("name", key),
            # JSON object keys are strings; years are ints everywhere else
            "year_weights": {int(y): float(w) for y, w in entry.get("year_weights", {}).items()},
            "credits_per_year": entry.get("credits_per_year"),
            "classification_uplift": float(entry.get("classification_uplift", 0.0)),
            "classification": BandTable.from_pairs(entry["classification_bands"]),
            "gpa": BandTable.from_pairs(entry["gpa_bands"]),
        }

    def _build_definition(self, key: str, entry: dict) -> CalculatorDefinition:
        weights = {
            CourseCategory.parse(cat): WeightRule(bonus=float(rule["bonus"]), cap=float(rule["cap"]))
            for cat, rule in entry.get("weights", {}).items()
        }
        buckets = {
            CourseCategory.parse(cat): label
            for cat, label in entry.get("buckets", {}).items()
        }
        classifications = [
            ClassificationRule(
                name=rule["name"],
                metric=rule.get("metric", "overall"),
                table=BandTable.from_pairs(rule["bands"]),
                title=rule.get("title", ""),
            )
            for rule in entry.get("classifications", [])
        ]
        conjunctive = [
            ConjunctiveRule(
                name=rule["name"],
                table=ConjunctiveTable(
                    bands=tuple(
                        ConjunctiveBand(band["label"], dict(band["minimums"]))
                        for band in rule["bands"]
                    ),
                    fallback=rule["fallback"],
                ),
                title=rule.get("title", ""),
            )
            for rule in entry.get("conjunctive", [])
        ]
        flags = [
            FlagRule(
                name=rule["name"],
                metric=rule.get("metric", "overall"),
                minimum=float(rule["minimum"]),
                title=rule.get("title", ""),
            )
            for rule in entry.get("flags", [])
        ]
        deans = entry.get("deans_list")

        optional = {}
        for field_name in ("baseline_max_gpa", "max_credits", "uniform_credit", "auto_credit", "display_precision"):
            if field_name in entry:
                optional[field_name] = entry[field_name]

        definition = CalculatorDefinition(
            key=key,
            title=entry.get("title", key),
            scale=self.scale(entry.get("scale", "standard")),
            path=entry.get("path", ""),
            weights=weights,
            buckets=buckets,
            allow_baseline=bool(entry.get("allow_baseline", False)),
            classifications=classifications,
            conjunctive=conjunctive,
            flags=flags,
            deans_list=DeansListRule(float(deans["min_gpa"]), float(deans["min_credits"])) if deans else None,
            description=entry.get("description", ""),
            **optional,
        )
        logger.debug("Built calculator definition %s on scale %s", key, definition.scale.key)
        return definition
