"""Tests for the ``flask catalog`` command group."""

from __future__ import annotations

from tests.helpers.exports import HEVY_CSV, STRONG_CSV


def test_check(app):
    result = app.test_cli_runner().invoke(args=["catalog", "check"])
    assert result.exit_code == 0
    assert "58 canonical exercises OK" in result.output


def test_search(app):
    result = app.test_cli_runner().invoke(args=["catalog", "search", "incline bench", "--limit", "2"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 2
    assert "Incline Bench Press" in lines[0]


def test_search_without_matches(app):
    result = app.test_cli_runner().invoke(args=["catalog", "search", "zzz-nonexistent-xyz"])
    assert result.exit_code == 0
    assert "(no matches)" in result.output


def test_automatch(app, tmp_path):
    path = tmp_path / "hevy.csv"
    path.write_text(HEVY_CSV, encoding="utf-8")
    result = app.test_cli_runner().invoke(args=["catalog", "automatch", str(path)])
    assert result.exit_code == 0
    assert "2 workouts, 4 sets, 1 unmapped exercise names" in result.output
    assert "Lateral raise Domar (x1) -> Lateral Raise [1.00]" in result.output


def test_automatch_rejects_other_formats(app, tmp_path):
    path = tmp_path / "strong.csv"
    path.write_text(STRONG_CSV, encoding="utf-8")
    result = app.test_cli_runner().invoke(args=["catalog", "automatch", str(path)])
    assert result.exit_code != 0
    assert "Unsupported CSV format" in result.output
