"""Tests for UKDegreeEngine."""

import pytest

from gpa_tools.engines import UKDegreeEngine
from gpa_tools.models import BandTable, UKModule


@pytest.fixture
def engine(loader):
    return UKDegreeEngine(loader.degree_scheme("birmingham"))


def full_year(year, percentage, modules=6):
    return [UKModule(name=f"Y{year} M{i}", credits=20, percentage=percentage, year=year)
            for i in range(modules)]


class TestCalculate:

    def test_upper_second(self, engine):
        modules = full_year(1, 60) + full_year(2, 65) + full_year(3, 72)

        result = engine.calculate(modules)

        assert result.weighted_percentage == pytest.approx(68.7)
        assert result.classification == "Upper Second Class Honours (2:1)"
        assert result.us_gpa == 3.6
        assert result.scheme == "birmingham"

    def test_first_class(self, engine):
        result = engine.calculate(full_year(1, 75) + full_year(2, 75) + full_year(3, 75))
        assert result.classification == "First Class Honours (1st)"
        assert result.us_gpa == 3.9

    def test_fail(self, engine):
        result = engine.calculate(full_year(1, 30) + full_year(2, 30) + full_year(3, 30))
        assert result.classification == "Fail"
        assert result.us_gpa == 0.0

    def test_year_average_is_credit_weighted(self, engine):
        year1 = [
            UKModule("Big", credits=80, percentage=65, year=1),
            UKModule("Small", credits=40, percentage=50, year=1),
        ]
        averages = engine.year_averages(year1)
        assert averages[1] == pytest.approx(60.0)
        assert averages[2] is None

    def test_missing_year_gives_none(self, engine):
        assert engine.calculate(full_year(1, 60) + full_year(2, 65)) is None

    def test_invalid_modules_ignored(self, engine):
        modules = full_year(1, 60) + full_year(2, 65) + full_year(3, 72) + [
            UKModule("Bad credits", credits=0, percentage=100, year=3),
            UKModule("Bad mark", credits=20, percentage=120, year=3),
            UKModule("Not a number", credits="x", percentage=100, year=3),
        ]
        assert engine.calculate(modules).weighted_percentage == pytest.approx(68.7)


class TestCreditIssues:

    def test_full_load_has_no_issues(self, engine):
        modules = full_year(1, 60) + full_year(2, 65) + full_year(3, 72)
        assert engine.credit_issues(modules) == {}

    def test_short_year_is_reported(self, engine):
        modules = full_year(1, 60) + full_year(2, 65, modules=5) + full_year(3, 72)
        assert engine.credit_issues(modules) == {2: 100.0}
        # Still computed; the mismatch is a warning
        assert engine.calculate(modules) is not None


class TestZeroWeightYears:

    @pytest.fixture
    def scheme(self):
        return {
            "key": "two-year",
            "year_weights": {1: 0.0, 2: 0.5, 3: 0.5},
            "credits_per_year": 120,
            "classification": BandTable.from_pairs([["Pass", 40], ["Fail", None]]),
            "gpa": BandTable.from_pairs([[3.0, 40], [0.0, None]]),
        }

    def test_missing_uncounted_year_still_classifies(self, scheme):
        result = UKDegreeEngine(scheme).calculate(full_year(2, 50) + full_year(3, 60))

        assert result.weighted_percentage == pytest.approx(55.0)
        assert result.year_averages[1] is None
        assert result.classification == "Pass"

    def test_uncounted_year_marks_have_no_effect(self, scheme):
        engine = UKDegreeEngine(scheme)
        with_year_one = engine.calculate(full_year(1, 10) + full_year(2, 50) + full_year(3, 60))
        assert with_year_one.weighted_percentage == pytest.approx(55.0)

    def test_uncounted_year_has_no_credit_issue(self, scheme):
        engine = UKDegreeEngine(scheme)
        modules = full_year(2, 50) + full_year(3, 60, modules=5)
        assert engine.credit_issues(modules) == {3: 100.0}


class TestSchemes:

    def test_manchester(self, loader):
        engine = UKDegreeEngine(loader.degree_scheme("manchester"))
        result = engine.calculate(full_year(1, 60) + full_year(2, 65) + full_year(3, 72))

        # 0.2 * 60 + 0.3 * 65 + 0.5 * 72
        assert result.weighted_percentage == pytest.approx(67.5)
        assert result.classification == "Upper Second Class (2:1)"
        assert result.us_gpa == 3.6

    def test_manchester_ordinary_degree(self, loader):
        engine = UKDegreeEngine(loader.degree_scheme("manchester"))
        result = engine.calculate(full_year(1, 37) + full_year(2, 37) + full_year(3, 37))
        assert result.classification == "Ordinary Degree"
        assert result.us_gpa == 1.3

    def test_leeds_pre_2022_has_no_uplift(self, loader):
        engine = UKDegreeEngine(loader.degree_scheme("leeds"))
        result = engine.calculate(full_year(1, 68) + full_year(2, 67) + full_year(3, 68.5))

        assert result.weighted_percentage == pytest.approx(68.0)
        assert result.classification == "Upper Second Class (2:1)"
        assert result.us_gpa == 3.85

    def test_leeds_2022_uplift_reaches_first(self, loader):
        engine = UKDegreeEngine(loader.degree_scheme("leeds-2022"))
        result = engine.calculate(full_year(2, 67) + full_year(3, 68.5))

        # 0.3333 * 67 + 0.6667 * 68.5, plus 0.5 for the classification only
        assert result.weighted_percentage == pytest.approx(68.0, abs=1e-3)
        assert result.classification == "First Class Honours"
        assert result.us_gpa == 3.85

    def test_leeds_2022_ignores_year_one(self, loader):
        engine = UKDegreeEngine(loader.degree_scheme("leeds-2022"))
        without = engine.calculate(full_year(2, 55) + full_year(3, 55))
        with_year_one = engine.calculate(full_year(1, 90) + full_year(2, 55) + full_year(3, 55))

        assert with_year_one.weighted_percentage == pytest.approx(without.weighted_percentage)
        assert engine.credit_issues(full_year(2, 55) + full_year(3, 55)) == {}

    def test_leeds_2022_still_needs_years_two_and_three(self, loader):
        engine = UKDegreeEngine(loader.degree_scheme("leeds-2022"))
        assert engine.calculate(full_year(1, 70) + full_year(3, 70)) is None

    def test_leeds_below_third_fails(self, loader):
        engine = UKDegreeEngine(loader.degree_scheme("leeds"))
        result = engine.calculate(full_year(1, 39) + full_year(2, 39) + full_year(3, 39))
        assert result.classification == "Fail"
        assert result.us_gpa == 0.0
