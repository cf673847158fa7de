"""Tests for GradeScale and the grade scale tables."""

import pytest

from gpa_tools.engines import GradeScale
from gpa_tools.models import Band, BandTable, GradeScaleTable


class TestPointsFor:

    def test_standard_letters(self, standard_scale):
        assert standard_scale.points_for("A") == 4.0
        assert standard_scale.points_for("A+") == 4.0
        assert standard_scale.points_for("B+") == pytest.approx(3.3)
        assert standard_scale.points_for("D-") == pytest.approx(0.7)
        assert standard_scale.points_for("F") == 0.0

    def test_case_and_whitespace_ignored(self, standard_scale):
        assert standard_scale.points_for(" b+ ") == pytest.approx(3.3)

    def test_unknown_grade_is_zero(self, standard_scale):
        assert standard_scale.points_for("Z") == 0.0
        assert standard_scale.points_for(None) == 0.0
        assert standard_scale.points_for("-") == 0.0

    def test_percentage_is_bandified_first(self, standard_scale):
        assert standard_scale.points_for(91) == pytest.approx(3.7)
        assert standard_scale.points_for("91") == pytest.approx(3.7)

    def test_lsac_scale(self, loader):
        lsac = GradeScale(loader.scale("lsac"))
        assert lsac.points_for("A+") == pytest.approx(4.33)
        assert lsac.points_for("A-") == pytest.approx(3.67)
        assert lsac.points_for("C-") == pytest.approx(1.67)

    def test_caspa_has_no_d_minus(self, loader):
        caspa = GradeScale(loader.scale("caspa"))
        assert caspa.points_for("A+") == 4.0
        assert not caspa.is_graded("D-")

    def test_hundred_point_scale(self, loader):
        hundred = GradeScale(loader.scale("hundred-point"))
        assert hundred.points_for("A+") == 95
        assert hundred.points_for("F") == 35


class TestBandify:

    @pytest.mark.parametrize("percentage,letter", [
        (100, "A+"), (97, "A+"), (96.99, "A"), (93, "A"), (90, "A-"),
        (89.99, "B+"), (80, "B-"), (73, "C"), (60, "D-"), (59.99, "F"), (0, "F"),
    ])
    def test_inclusive_lower_bounds(self, standard_scale, percentage, letter):
        assert standard_scale.bandify(percentage) == letter

    def test_out_of_range_values(self, standard_scale):
        assert standard_scale.bandify(105) == "A+"
        assert standard_scale.bandify(-5) == "F"

    def test_scale_without_bands_rejects_bandify(self, loader):
        caspa = GradeScale(loader.scale("caspa"))
        with pytest.raises(ValueError):
            caspa.bandify(91)


class TestResolve:

    def test_non_grade_marks_are_not_graded(self, standard_scale):
        for mark in ("W", "I", "IP", "P", "NP", "CR", "NC", "w", " p "):
            assert standard_scale.resolve(mark) is None

    def test_placeholders_are_not_graded(self, standard_scale):
        assert standard_scale.resolve("") is None
        assert standard_scale.resolve("-") is None
        assert standard_scale.resolve(None) is None

    def test_numbers_only_on_banded_scales(self, loader, standard_scale):
        caspa = GradeScale(loader.scale("caspa"))
        assert standard_scale.resolve(85) == "B"
        assert caspa.resolve(85) is None

    def test_nan_and_bool_are_not_grades(self, standard_scale):
        assert standard_scale.resolve(float("nan")) is None
        assert standard_scale.resolve(True) is None

    def test_is_graded(self, standard_scale):
        assert standard_scale.is_graded("C+")
        assert not standard_scale.is_graded("Q")


class TestGradeScaleTable:

    def test_points_are_read_only(self, loader):
        table = loader.scale("standard")
        with pytest.raises(TypeError):
            table.points["A"] = 5.0

    def test_letters_sorted_by_points(self, loader):
        letters = loader.scale("standard").letters
        assert letters[-1] == "F"
        assert letters.index("A-") < letters.index("B+")

    def test_max_points(self, loader):
        assert loader.scale("lsac").max_points == pytest.approx(4.33)

    def test_bands_must_use_known_grades(self):
        bands = BandTable.from_pairs([["A", 90], ["Z", None]])
        with pytest.raises(ValueError):
            GradeScaleTable(key="bad", name="Bad", points={"A": 4.0, "F": 0.0}, percentage_bands=bands)


class TestBandTable:

    def test_lookup(self):
        table = BandTable.from_pairs([["High", 3.5], ["Mid", 3.0], ["Low", None]])
        assert table.lookup(3.5) == "High"
        assert table.lookup(3.49) == "Mid"
        assert table.lookup(-1) == "Low"

    def test_rejects_empty_table(self):
        with pytest.raises(ValueError):
            BandTable(())

    def test_rejects_missing_floor(self):
        with pytest.raises(ValueError):
            BandTable.from_pairs([["High", 3.5], ["Low", 2.0]])

    def test_rejects_floor_in_the_middle(self):
        with pytest.raises(ValueError):
            BandTable((Band("High", 3.5), Band("Floor", None), Band("Low", None)))

    def test_rejects_non_descending_minimums(self):
        with pytest.raises(ValueError):
            BandTable.from_pairs([["A", 3.0], ["B", 3.5], ["F", None]])

    def test_rejects_overlapping_minimums(self):
        with pytest.raises(ValueError):
            BandTable.from_pairs([["A", 3.0], ["B", 3.0], ["F", None]])

    def test_single_floor_band(self):
        assert BandTable.from_pairs([["Only", None]]).lookup(123) == "Only"
