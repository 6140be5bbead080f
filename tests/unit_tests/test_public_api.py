"""Unit tests for the top-level package API."""

from __future__ import annotations

import os
from pathlib import Path

import yosys_fixtures


def test_regenerate_fixtures_accepts_string_directory(
    verilog_dir: Path, fake_synthesizer: object
) -> None:
    report = yosys_fixtures.regenerate_fixtures(
        str(verilog_dir), synthesizer=fake_synthesizer
    )

    assert report.ok
    assert report.directory == verilog_dir
    assert {"a.json", "b.json"} <= set(os.listdir(verilog_dir))


def test_regenerate_fixtures_forwards_dry_run(
    verilog_dir: Path, fake_synthesizer: object
) -> None:
    report = yosys_fixtures.regenerate_fixtures(
        verilog_dir, dry_run=True, synthesizer=fake_synthesizer
    )

    assert report.dry_run
    assert fake_synthesizer.calls == []


def test_version_is_exposed() -> None:
    assert yosys_fixtures.__version__
