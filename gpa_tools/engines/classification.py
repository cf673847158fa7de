"""
Threshold Classification Engine.

Turns GPA figures into the labels and yes/no flags each calculator shows:
academic standing, Latin honors, competitiveness tiers, eligibility checks.
"""

from typing import Optional

from ..models import CalculatorDefinition, GPAResult


class Classifier:
    """
    Applies a calculator's classification rules to a GPAResult.

    RULE TYPES:
    ----------
    Single axis:  One metric through a BandTable
                  Example: overall 3.62 -> "Competitive (3.5-3.69)"

    Conjunctive:  Several metrics, every one must clear its minimum
                  Example: overall >= 3.6 AND science-bcpm >= 3.5
                           -> "Top-Tier Programs"
                  A strong overall GPA never makes up for a weak science
                  GPA; the first band whose minimums all hold wins.

    Flag:         metric >= minimum -> True/False
                  Example: overall >= 3.0 -> assistantship eligible

    METRICS:
    -------
    "overall", "unweighted", every bucket key ("science-bcpm", ...) and any
    extras passed by the caller ("patient_care_hours"). A metric with no
    value (empty bucket, missing extra) yields no label and a False flag.
    """

    def __init__(self, definition: CalculatorDefinition):
        self.definition = definition

    def classify(self, result: GPAResult, extras: Optional[dict] = None) -> GPAResult:
        metrics = result.metrics(extras)
        classifications = {}
        flags = {}

        for rule in self.definition.classifications:
            value = metrics.get(rule.metric)
            if value is None:
                continue
            classifications[rule.name] = rule.table.lookup(value)

        for rule in self.definition.conjunctive:
            # Nothing to compare until at least one axis has a value
            if all(metrics.get(axis) is None for axis in rule.table.axes):
                continue
            classifications[rule.name] = rule.table.lookup(metrics)

        for rule in self.definition.flags:
            value = metrics.get(rule.metric)
            flags[rule.name] = value is not None and value >= rule.minimum

        result.classifications = classifications
        result.flags = flags
        return result
