"""Unit tests for repository maintenance scripts."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parents[2] / "scripts"


def _load_script(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_requirements_in_sync_with_pyproject(capsys: pytest.CaptureFixture[str]) -> None:
    _load_script("check_dependencies_sync").main()

    assert "Dependency sync check passed." in capsys.readouterr().out


def test_generated_requirements_match_checked_in_file() -> None:
    generate = _load_script("generate_requirements")
    check = _load_script("check_dependencies_sync")

    assert set(generate._collect_requirements()) == check._actual_requirements()


def test_sync_check_reports_drift(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    check = _load_script("check_dependencies_sync")
    (tmp_path / "pyproject.toml").write_text(
        '[project]\ndependencies = ["pydantic>=2.6"]\n'
        '[project.optional-dependencies]\ncli = ["typer>=0.12"]\n',
        encoding="utf-8",
    )
    (tmp_path / "requirements.txt").write_text("pydantic>=2.6\nrich\n", encoding="utf-8")
    monkeypatch.setattr(check, "ROOT", tmp_path)

    with pytest.raises(SystemExit, match="out of sync") as excinfo:
        check.main()

    message = str(excinfo.value)
    assert "- typer>=0.12" in message
    assert "- rich" in message


def test_architecture_boundaries_hold(capsys: pytest.CaptureFixture[str]) -> None:
    _load_script("check_architecture").main()

    assert "Architecture checks passed." in capsys.readouterr().out
