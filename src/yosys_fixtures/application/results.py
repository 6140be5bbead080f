"""Application-layer result objects."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SynthesisOutcome:
    """What a synthesizer reports for a single input.

    ``returncode`` is ``None`` when the process never started; ``json_path``
    is ``None`` when no netlist was written.
    """

    log_text: str
    json_path: Path | None
    returncode: int | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None


@dataclass(frozen=True)
class FixturePaths:
    """An input file and the fixture files derived from it.

    ``name`` is the base name the input and both fixtures share.
    """

    input_path: Path
    log_path: Path
    json_path: Path
    name: str


@dataclass(frozen=True)
class FixtureResult:
    """Structured outcome for one fixture; ``outcome`` is unset on dry runs."""

    paths: FixturePaths
    outcome: SynthesisOutcome | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is not None and self.outcome.ok


@dataclass(frozen=True)
class RegenerationReport:
    """Aggregate result of a regeneration run."""

    directory: Path
    results: Sequence[FixtureResult] = ()
    dry_run: bool = False
    aborted: bool = False

    @property
    def succeeded(self) -> list[FixtureResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> list[FixtureResult]:
        if self.dry_run:
            return []
        return [result for result in self.results if not result.ok]

    @property
    def ok(self) -> bool:
        """Whether every processed fixture succeeded."""
        return not self.failed and not self.aborted
