"""Tests for the interactive CLI, driven through a scripted input()."""

import pytest

from gpa_tools import cli


@pytest.fixture
def answers(monkeypatch):
    """Feed prompts from a list; running out behaves like Ctrl-D."""
    def _script(*replies):
        pending = iter(replies)

        def fake_input(prompt=""):
            try:
                return next(pending)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
    return _script


class TestMain:

    def test_class_rank_mode(self, answers, capsys):
        answers("5", "5", "100")
        cli.main()
        out = capsys.readouterr().out
        assert "96.0" in out
        assert "Exceptional (Top 5%)" in out

    def test_default_mode_runs_example_transcript(self, answers, capsys):
        answers()
        cli.main()
        out = capsys.readouterr().out
        assert "Jordan Rivera" in out
        assert "Highly Competitive Programs" in out

    def test_unknown_calculator_key(self, answers, capsys):
        answers("1", "", "nope", "")
        cli.main()
        assert "No calculator definition found for: nope" in capsys.readouterr().out

    def test_missing_transcript(self, answers, capsys, tmp_path):
        answers("1", str(tmp_path / "missing.json"))
        cli.main()
        assert "Error:" in capsys.readouterr().out

    def test_course_entry(self, answers, capsys):
        answers(
            "2", "weighted",
            "Chemistry", "A", "3", "ap",
            "English", "B+", "3", "honors",
            "",
        )
        cli.main()
        out = capsys.readouterr().out
        assert "4.40" in out
        assert "Unweighted GPA" in out

    def test_raise_planner(self, answers, capsys):
        answers("3", "3.0", "30", "3.5", "15")
        cli.main()
        out = capsys.readouterr().out
        assert "Not achievable" in out
        assert "3.75" in out

    def test_transfer(self, answers, capsys):
        answers("4", "3.2", "60", "45", "3.6", "30", "")
        cli.main()
        out = capsys.readouterr().out
        assert "3.36" in out
        assert "3.33" in out

    def test_uk_degree(self, answers, capsys):
        answers(
            "6", "",
            "Year one", "120", "60", "",
            "Year two", "120", "65", "",
            "Year three", "120", "72", "",
        )
        cli.main()
        out = capsys.readouterr().out
        assert "Upper Second Class Honours (2:1)" in out
        assert "68.7%" in out

    def test_uk_degree_scheme_choice(self, answers, capsys):
        answers(
            "6", "4",
            "",
            "Year two", "120", "67", "",
            "Year three", "120", "68.5", "",
        )
        cli.main()
        out = capsys.readouterr().out
        assert "University of Leeds, 2022+ entry" in out
        assert "First Class Honours" in out
        assert "68.0%" in out
        assert "Year 1 has" not in out

    def test_uk_degree_scheme_by_key(self, answers, capsys):
        answers(
            "6", "manchester",
            "Year one", "120", "60", "",
            "Year two", "120", "65", "",
            "Year three", "120", "72", "",
        )
        cli.main()
        out = capsys.readouterr().out
        assert "67.5%" in out
        assert "Upper Second Class (2:1)" in out

    def test_course_entry_auto_credit(self, answers, capsys):
        answers(
            "2", "high-school", "y",
            "Algebra", "A", "regular",
            "Art", "C", "regular",
            "",
        )
        cli.main()
        out = capsys.readouterr().out
        assert "3.00" in out
        algebra = next(line for line in out.splitlines() if "Algebra" in line)
        assert "1.0" in algebra

    def test_course_entry_without_auto_credit(self, answers, capsys):
        answers(
            "2", "high-school", "",
            "Algebra", "A", "5", "regular",
            "Art", "C", "1", "regular",
            "",
        )
        cli.main()
        assert "3.67" in capsys.readouterr().out


class TestHelpers:

    def test_ask_float_rejects_text(self, answers, capsys):
        answers("abc")
        assert cli._ask_float("x: ", 2.5) == 2.5

    def test_extra_metrics(self, loader):
        assert cli._extra_metrics(loader.definition("pa-school")) == ["patient_care_hours"]
        assert cli._extra_metrics(loader.definition("college")) == []
