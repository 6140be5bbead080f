#!/usr/bin/env python3
"""Ensure requirements.txt matches generated dependencies from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SYNC_EXTRAS = ("cli",)


def _normalize(req: str) -> str:
    return req.split("#", 1)[0].strip()


def _expected_requirements() -> set[str]:
    pyproject = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    deps = set(pyproject["project"].get("dependencies", []))
    optional = pyproject["project"].get("optional-dependencies", {})
    for extra in SYNC_EXTRAS:
        deps.update(optional.get(extra, []))
    return {dep.strip() for dep in deps if dep.strip()}


def _actual_requirements() -> set[str]:
    reqs: set[str] = set()
    for line in (ROOT / "requirements.txt").read_text(encoding="utf-8").splitlines():
        norm = _normalize(line)
        if norm:
            reqs.add(norm)
    return reqs


def main() -> None:
    """Compare generated requirements against current requirements.txt."""
    expected = _expected_requirements()
    actual = _actual_requirements()

    missing = sorted(expected - actual)
    unknown = sorted(actual - expected)
    if missing or unknown:
        parts: list[str] = [
            "requirements.txt is out of sync with pyproject.toml.",
            "Run: uv run python scripts/generate_requirements.py",
        ]
        if missing:
            parts.append("Missing from requirements.txt:")
            parts.extend(f"- {entry}" for entry in missing)
        if unknown:
            parts.append("Unexpected in requirements.txt:")
            parts.extend(f"- {entry}" for entry in unknown)
        raise SystemExit("\n".join(parts))
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
