"""
Grade scale and threshold band models.

Every "if value >= x return ..." ladder in the calculators is expressed
as a BandTable: percentage-to-letter bands, academic standing tiers,
Latin honors, UK classifications, and so on. They all share one contract:
lower bounds are inclusive, bands never overlap, and the last band is a
floor that catches everything below the lowest minimum.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Band:
    """
    One band of a threshold table.

    outcome: What the band maps to (a label, a letter grade, or a number)
    minimum: Inclusive lower bound, or None for the catch-all floor band
    """
    outcome: Any
    minimum: Optional[float]


@dataclass(frozen=True)
class BandTable:
    """
    Ordered, non-overlapping threshold bands with total coverage.

    Bands are listed from the highest minimum down. Construction fails on
    a table that could classify a value two ways or not at all.
    """
    bands: tuple

    def __post_init__(self):
        if not self.bands:
            raise ValueError("A band table needs at least one band")
        *ranked, floor = self.bands
        if floor.minimum is not None:
            raise ValueError(f"Last band {floor.outcome!r} must be the floor (minimum None)")
        previous = None
        for band in ranked:
            if band.minimum is None:
                raise ValueError(f"Only the last band may be the floor, not {band.outcome!r}")
            if previous is not None and band.minimum >= previous:
                raise ValueError(
                    f"Band minimums must strictly descend: {band.minimum} after {previous}"
                )
            previous = band.minimum

    @classmethod
    def from_pairs(cls, pairs) -> "BandTable":
        """Build from [[outcome, minimum], ...] as stored in the JSON tables."""
        return cls(tuple(Band(outcome, minimum) for outcome, minimum in pairs))

    def lookup(self, value: float):
        for band in self.bands:
            if band.minimum is None or value >= band.minimum:
                return band.outcome
        # Unreachable: the floor band always matches
        return self.bands[-1].outcome

    @property
    def outcomes(self) -> list:
        return [b.outcome for b in self.bands]


@dataclass(frozen=True)
class ConjunctiveBand:
    """
    A band that needs several metrics to clear their minimums at once.

    Example: "Top-Tier Programs" needs overall >= 3.6 AND science >= 3.5.
    """
    outcome: str
    minimums: Mapping[str, float]

    def matches(self, values: Mapping[str, Optional[float]]) -> bool:
        for axis, minimum in self.minimums.items():
            value = values.get(axis)
            if value is None or value < minimum:
                return False
        return True


@dataclass(frozen=True)
class ConjunctiveTable:
    """Ordered conjunctive bands with a fallback outcome."""
    bands: tuple
    fallback: str

    @property
    def axes(self) -> set:
        return {axis for band in self.bands for axis in band.minimums}

    def lookup(self, values: Mapping[str, Optional[float]]) -> str:
        for band in self.bands:
            if band.matches(values):
                return band.outcome
        return self.fallback


@dataclass(frozen=True)
class GradeScaleTable:
    """
    Immutable letter-grade to grade-point mapping for one named scale.

    Attributes:
        key: Table key (e.g., "standard", "caspa")
        name: Display name (e.g., "CASPA 4.0 (A+ = 4.0)")
        points: Read-only mapping of upper-case letter grade -> points
        percentage_bands: Optional percentage -> letter BandTable
        display_precision: Decimal places when showing a GPA on this scale
    """
    key: str
    name: str
    points: Mapping[str, float]
    percentage_bands: Optional[BandTable] = None
    display_precision: int = 2
    max_points: float = field(init=False)

    def __post_init__(self):
        frozen = MappingProxyType({k.strip().upper(): float(v) for k, v in self.points.items()})
        object.__setattr__(self, "points", frozen)
        object.__setattr__(self, "max_points", max(frozen.values()) if frozen else 0.0)
        if self.percentage_bands is not None:
            unknown = [o for o in self.percentage_bands.outcomes if o.upper() not in frozen]
            if unknown:
                raise ValueError(f"Percentage bands for {self.key} use unknown grades: {unknown}")

    @property
    def letters(self) -> list:
        """Grade labels ordered from highest to lowest points."""
        return sorted(self.points, key=lambda g: -self.points[g])
