"""Tests for TerminalDisplay output."""

import pytest

from gpa_tools.engines import GPAAggregator
from gpa_tools.models import CourseRecord, Semester, UKDegreeResult
from gpa_tools.ui import TerminalDisplay


def row_for(output, name):
    return next(line for line in output.splitlines() if name in line)


class TestCourseTable:

    @pytest.fixture
    def college(self, loader):
        return loader.definition("college")

    def test_statuses(self, college, capsys):
        semester = Semester(label="Fall", courses=[
            CourseRecord("Counted", "A", 3),
            CourseRecord("Withdrawn", "W", 3),
            CourseRecord("Pass Fail", "P", 3),
            CourseRecord("Typo", "Q", 3),
            CourseRecord("Blank", "", 3),
            CourseRecord("Dropped", "B", 3, excluded=True),
            CourseRecord("Huge", "B", 40),
        ])
        result = GPAAggregator.from_definition(college).aggregate_semesters([semester])

        TerminalDisplay.print_course_table([semester], result, college)
        out = capsys.readouterr().out

        assert "✓" in row_for(out, "Counted")
        for name in ("Withdrawn", "Pass Fail", "Typo"):
            assert "not counted" in row_for(out, name)
            assert "✓" not in row_for(out, name)
        assert "no grade" in row_for(out, "Blank")
        assert "excluded" in row_for(out, "Dropped")
        assert "invalid credits" in row_for(out, "Huge")
        assert result.total_credits == 3

    def test_percentage_grade_counts_on_banded_scale(self, college, capsys):
        semester = Semester(courses=[CourseRecord("Numeric", 91, 3)])
        result = GPAAggregator.from_definition(college).aggregate_semesters([semester])

        TerminalDisplay.print_course_table([semester], result, college)
        assert "✓" in row_for(capsys.readouterr().out, "Numeric")


class TestUKResult:

    def test_uncounted_year_shows_dash(self, capsys):
        result = UKDegreeResult(
            scheme="leeds-2022",
            year_averages={1: None, 2: 67.0, 3: 68.5},
            weighted_percentage=68.0,
            classification="First Class Honours",
            us_gpa=3.85,
        )
        TerminalDisplay.print_uk_result(result)
        out = capsys.readouterr().out
        assert "—" in row_for(out, "Year 1 average")
        assert "67.0%" in row_for(out, "Year 2 average")
        assert "First Class Honours" in out
