"""Tests for the clovergen summary command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from clovergen.cli.main import cli

runner = CliRunner()


class TestSummaryCommand:
    """Tests for `clovergen summary`."""

    def test_text_output(self, workdir: Path) -> None:
        result = runner.invoke(cli, ["summary", "--workdir", str(workdir)])

        assert result.exit_code == 0, result.output
        assert "Statements: 1/2" in result.output
        assert "Methods: 1/2" in result.output
        assert "Coverage: 50.00%" in result.output
        assert not (workdir / "coverage.xml").exists()

    def test_json_output(self, workdir: Path) -> None:
        result = runner.invoke(cli, ["summary", "--workdir", str(workdir), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout.strip().splitlines()[-1])
        assert data == {
            "project": str(workdir / "src"),
            "packages": 1,
            "files": 1,
            "statements": 2,
            "covered_statements": 1,
            "methods": 2,
            "covered_methods": 1,
            "coverage_percent": 50.0,
        }

    def test_missing_hits_log_is_zero(self, workdir: Path) -> None:
        (workdir / "coverage-hits.txt").unlink()

        result = runner.invoke(cli, ["summary", "--workdir", str(workdir), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout.strip().splitlines()[-1])
        assert data["covered_statements"] == 0
        assert data["coverage_percent"] == 0.0
