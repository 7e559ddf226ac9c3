"""Tests for the errkit CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from errkit import __version__
from errkit.cli.app import app
from errkit.core.exit_codes import ExitCode

runner = CliRunner()

CATALOG = """
[errors]
disk_full = "disk is full"

[kinds]
missing_file = "file not found: %s"
retry = "%s failed after %d tries"
quota = "quota 100%% used"
"""


@pytest.fixture
def catalog(tmp_path: Path) -> Path:
    path = tmp_path / "errors.toml"
    path.write_text(CATALOG, encoding="utf-8")
    return path


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCheckCmd:
    """errkit check"""

    def test_valid_catalog(self, catalog: Path) -> None:
        result = runner.invoke(app, ["check", str(catalog)])
        assert result.exit_code == 0
        assert "plain errors: 1, kinds: 3" in result.output

    def test_invalid_entries_are_all_reported(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('[errors]\nn = 1\n\n[kinds]\nbad = "100%"\n', encoding="utf-8")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == int(ExitCode.CATALOG_ERROR)
        assert "Invalid catalog entries" in result.output
        assert "Problems: 2 errors" in result.output
        assert "errors.n: expected a non-empty string, got int" in result.output
        assert "kinds.bad: invalid pattern '100%'" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", str(tmp_path / "nope.toml")])
        assert result.exit_code == int(ExitCode.IO_ERROR)
        assert "not found" in result.output

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("[errors\n", encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == int(ExitCode.IO_ERROR)
        assert "Invalid TOML syntax" in result.output


class TestShowCmd:
    """errkit show"""

    def test_plain_error(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "disk_full"])
        assert result.exit_code == 0
        assert "disk is full" in result.output

    def test_plain_error_ignores_values(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "disk_full", "extra"])
        assert result.exit_code == 0
        assert "ignoring values" in result.output
        assert "disk is full" in result.output

    def test_kind_with_values(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "missing_file", "a.txt"])
        assert result.exit_code == 0
        assert "file not found: a.txt" in result.output
        assert "kind: file not found: %s" in result.output

    def test_kind_with_numeric_placeholder(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "retry", "fetch", "3"])
        assert result.exit_code == 0
        assert "fetch failed after 3 tries" in result.output

    def test_non_numeric_value_for_numeric_placeholder(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "retry", "fetch", "many"])
        assert result.exit_code == 0
        assert "%s failed after %d tries [fetch, many]" in result.output

    def test_text_values_are_kept_verbatim(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "missing_file", "007"])
        assert result.exit_code == 0
        assert "file not found: 007" in result.output

    def test_escaped_percent_without_values(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "quota"])
        assert result.exit_code == 0
        assert "quota 100% used" in result.output
        assert "100%%" not in result.output.splitlines()[0]

    def test_kind_without_values(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "missing_file"])
        assert result.exit_code == 0
        assert "file not found: %s" in result.output

    def test_unknown_name(self, catalog: Path) -> None:
        result = runner.invoke(app, ["show", str(catalog), "nope"])
        assert result.exit_code == int(ExitCode.USER_ERROR)
        assert "unknown error name: nope" in result.output
        assert "Available: disk_full, missing_file, quota, retry" in result.output
