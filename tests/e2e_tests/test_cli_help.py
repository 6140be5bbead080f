"""End-to-end smoke test for the installed CLI entrypoint."""

from __future__ import annotations

import subprocess
from pathlib import Path

import yosys_fixtures


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert yosys_fixtures.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["regen-fixtures", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Regenerate Yosys JSON netlist fixtures" in result.stdout


def test_cli_list_empty_directory(tmp_path: Path) -> None:
    result = subprocess.run(
        ["regen-fixtures", "list", str(tmp_path)],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "No inputs matching" in result.stdout


def test_cli_missing_directory_fails_cleanly() -> None:
    result = subprocess.run(
        ["regen-fixtures", "run", "/tmp/definitely-missing-fixture-dir"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode != 0
    assert "does not exist" in result.stderr.lower()
