"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from yosys_fixtures.application.options import RegenerationOptions
from yosys_fixtures.application.ports import Synthesizer
from yosys_fixtures.application.results import (
    FixturePaths,
    FixtureResult,
    RegenerationReport,
    SynthesisOutcome,
)


def plan_fixtures(
    directory: Path, options: RegenerationOptions | None = None
) -> list[FixturePaths]:
    """List planned fixtures via lazy use-case import."""
    from yosys_fixtures.application.use_cases import plan_fixtures as _impl

    return _impl(directory, options)


def regenerate_fixtures(
    directory: Path,
    *,
    options: RegenerationOptions | None = None,
    synthesizer: Synthesizer | None = None,
    on_result: Callable[[FixtureResult], None] | None = None,
) -> RegenerationReport:
    """Regenerate fixtures via lazy use-case import."""
    from yosys_fixtures.application.use_cases import regenerate_fixtures as _impl

    return _impl(
        directory,
        options=options,
        synthesizer=synthesizer,
        on_result=on_result,
    )


__all__ = [
    "FixturePaths",
    "FixtureResult",
    "RegenerationOptions",
    "RegenerationReport",
    "SynthesisOutcome",
    "Synthesizer",
    "plan_fixtures",
    "regenerate_fixtures",
]
