"""Tests for the threshold Classifier."""

import pytest

from gpa_tools.engines import Classifier
from gpa_tools.models import BucketResult, GPAResult


def make_result(overall, **buckets):
    """GPAResult with the given overall GPA and bucket GPAs (keys use _ for -)."""
    return GPAResult(
        overall_gpa=overall,
        unweighted_gpa=overall,
        total_credits=30.0 if overall is not None else 0.0,
        total_points=(overall or 0.0) * 30.0,
        included_count=10 if overall is not None else 0,
        buckets={
            key.replace("_", "-"): BucketResult(key=key.replace("_", "-"), label=key, gpa=gpa,
                                                credits=12.0, points=(gpa or 0.0) * 12.0)
            for key, gpa in buckets.items()
        },
    )


@pytest.fixture
def pa_classifier(loader):
    return Classifier(loader.definition("pa-school"))


class TestSingleAxis:

    @pytest.mark.parametrize("gpa,label", [
        (3.8, "Highly Competitive (3.7+)"),
        (3.7, "Highly Competitive (3.7+)"),
        (3.69, "Competitive (3.5-3.69)"),
        (3.3, "Moderately Competitive (3.3-3.49)"),
        (3.0, "Meets Minimum (3.0-3.29)"),
        (2.99, "Below Minimum (<3.0)"),
        (0.0, "Below Minimum (<3.0)"),
    ])
    def test_pa_standing(self, pa_classifier, gpa, label):
        result = pa_classifier.classify(make_result(gpa, science_bcpm=gpa, non_science=gpa))
        assert result.classifications["standing"] == label

    def test_latin_honors(self, loader):
        classifier = Classifier(loader.definition("college"))
        assert classifier.classify(make_result(3.95)).classifications["latin_honors"] == "Summa Cum Laude"
        assert classifier.classify(make_result(3.7)).classifications["latin_honors"] == "Magna Cum Laude"
        assert classifier.classify(make_result(3.2)).classifications["latin_honors"] == "No Latin Honors"

    def test_no_gpa_means_no_label(self, loader):
        classifier = Classifier(loader.definition("college"))
        result = classifier.classify(make_result(None))
        assert result.classifications == {}

    def test_extras_feed_metric_rules(self, pa_classifier):
        result = make_result(3.6, science_bcpm=3.5, non_science=3.7)
        classified = pa_classifier.classify(result, {"patient_care_hours": 1250})
        assert classified.classifications["patient_care"] == "Competitive (1000-1999 hours)"

    def test_missing_extra_is_skipped(self, pa_classifier):
        result = pa_classifier.classify(make_result(3.6, science_bcpm=3.5, non_science=3.7))
        assert "patient_care" not in result.classifications


class TestConjunctive:

    @pytest.mark.parametrize("overall,science,label", [
        (3.7, 3.6, "Top-Tier Programs"),
        (3.6, 3.5, "Top-Tier Programs"),
        (3.55, 3.45, "Highly Competitive Programs"),
        (3.4, 3.3, "Competitive Programs"),
        (3.1, 3.0, "Less Competitive Programs"),
        (2.9, 3.5, "Consider Post-Bacc Coursework"),
    ])
    def test_pa_competitiveness(self, pa_classifier, overall, science, label):
        result = pa_classifier.classify(make_result(overall, science_bcpm=science))
        assert result.classifications["competitiveness"] == label

    def test_strong_overall_does_not_cover_weak_science(self, pa_classifier):
        result = pa_classifier.classify(make_result(3.9, science_bcpm=3.2))
        assert result.classifications["competitiveness"] == "Less Competitive Programs"

    def test_missing_science_gpa_falls_back(self, pa_classifier):
        result = pa_classifier.classify(make_result(3.9, science_bcpm=None))
        assert result.classifications["competitiveness"] == "Consider Post-Bacc Coursework"

    def test_nothing_entered_gives_no_label(self, pa_classifier):
        result = pa_classifier.classify(make_result(None, science_bcpm=None))
        assert "competitiveness" not in result.classifications

    def test_pharmacy_admission(self, loader):
        classifier = Classifier(loader.definition("pharmacy-school"))
        admitted = classifier.classify(make_result(3.4, science_bcpm=3.3))
        below = classifier.classify(make_result(3.4, science_bcpm=3.29))
        assert admitted.classifications["admission"] == "Competitive Applicant"
        assert below.classifications["admission"] == "Below Typical Admit Range"


class TestFlags:

    def test_graduate_flags(self, loader):
        classifier = Classifier(loader.definition("graduate-school"))
        flags = classifier.classify(make_result(3.75)).flags
        assert flags == {
            "cum_laude": True,
            "magna_cum_laude": True,
            "summa_cum_laude": False,
            "assistantship_eligible": True,
        }

    def test_flag_threshold_is_inclusive(self, loader):
        classifier = Classifier(loader.definition("pharmacy-school"))
        assert classifier.classify(make_result(3.0)).flags["naplex_eligible"] is True
        assert classifier.classify(make_result(2.99)).flags["naplex_eligible"] is False

    def test_no_gpa_means_flags_false(self, loader):
        classifier = Classifier(loader.definition("graduate-school"))
        flags = classifier.classify(make_result(None)).flags
        assert not any(flags.values())
