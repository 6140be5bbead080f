"""Application use-cases orchestrating fixture regeneration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict, replace
from pathlib import Path

from pydantic import ValidationError

from yosys_fixtures.adapters.synthesizers import YosysSynthesizer
from yosys_fixtures.application.options import RegenerationOptions
from yosys_fixtures.application.ports import Synthesizer
from yosys_fixtures.application.results import (
    FixturePaths,
    FixtureResult,
    RegenerationReport,
    SynthesisOutcome,
)
from yosys_fixtures.errors import ConfigurationError, InputDiscoveryError
from yosys_fixtures.schemas import RegenerationConfig

logger = logging.getLogger(__name__)


def discover_inputs(directory: Path, suffix: str = ".v") -> list[Path]:
    """List regular files directly in ``directory`` ending with ``suffix``.

    Hidden files are skipped, as a shell glob would skip them. Results are
    sorted by file name.
    """
    if not directory.exists():
        raise InputDiscoveryError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise InputDiscoveryError(f"Not a directory: {directory}")
    inputs = [
        path
        for path in directory.iterdir()
        if path.name.endswith(suffix)
        and not path.name.startswith(".")
        and path.is_file()
    ]
    return sorted(inputs, key=lambda path: path.name)


def derive_fixture_paths(
    input_path: Path,
    suffix: str = ".v",
    log_suffix: str = ".log",
    json_suffix: str = ".json",
) -> FixturePaths:
    """Derive the log and JSON paths that sit beside ``input_path``."""
    if not input_path.name.endswith(suffix):
        raise ValueError(f"{input_path.name} does not end with {suffix}")
    base = input_path.name[: -len(suffix)]
    return FixturePaths(
        input_path=input_path,
        log_path=input_path.with_name(base + log_suffix),
        json_path=input_path.with_name(base + json_suffix),
        name=base,
    )


def _synthesize_into_log(
    synthesizer: Synthesizer, paths: FixturePaths
) -> SynthesisOutcome:
    """Open the log, run the synthesizer, then write its output.

    The log is opened first; when that fails the input is skipped and
    reported as failed.
    """
    try:
        handle = paths.log_path.open("w", encoding="utf-8", errors="replace")
    except OSError as exc:
        return SynthesisOutcome(
            log_text="",
            json_path=None,
            returncode=None,
            error=f"Cannot open log {paths.log_path}: {exc}",
        )

    outcome: SynthesisOutcome | None = None
    try:
        with handle:
            outcome = synthesizer.synthesize(paths.input_path, paths.json_path)
            handle.write(outcome.log_text)
    except OSError as exc:
        if outcome is None:
            raise
        return replace(outcome, error=f"Cannot write log {paths.log_path}: {exc}")
    return outcome


def _validate(directory: Path, options: RegenerationOptions) -> RegenerationConfig:
    try:
        return RegenerationConfig(directory=directory, **asdict(options))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid regeneration options: {exc}") from exc


def _plan(config: RegenerationConfig) -> list[FixturePaths]:
    return [
        derive_fixture_paths(
            path, config.input_suffix, config.log_suffix, config.json_suffix
        )
        for path in discover_inputs(config.directory, config.input_suffix)
    ]


def plan_fixtures(
    directory: Path, options: RegenerationOptions | None = None
) -> list[FixturePaths]:
    """Return the fixtures a run over ``directory`` would produce."""
    return _plan(_validate(directory, options or RegenerationOptions()))


def regenerate_fixtures(
    directory: Path,
    *,
    options: RegenerationOptions | None = None,
    synthesizer: Synthesizer | None = None,
    on_result: Callable[[FixtureResult], None] | None = None,
) -> RegenerationReport:
    """Use-case: regenerate the log/JSON fixture pair for every input.

    Inputs are processed one at a time in name order. A failing input does
    not stop the run unless ``options.fail_fast`` is set.

    Parameters
    ----------
    directory : Path
        Directory holding the inputs; fixtures are written beside them.
    options : RegenerationOptions | None, default=None
        Run options; defaults reproduce the plain batch behaviour.
    synthesizer : Synthesizer | None, default=None
        Port implementation; a ``YosysSynthesizer`` is built when omitted.
    on_result : Callable[[FixtureResult], None] | None, default=None
        Called after each fixture is processed.

    Returns
    -------
    RegenerationReport
        Per-fixture results in processing order.
    """
    options = options or RegenerationOptions()
    config = _validate(directory, options)
    fixtures = _plan(config)
    logger.info("found %d input(s) in %s", len(fixtures), config.directory)

    if config.dry_run:
        planned = [FixtureResult(paths=paths) for paths in fixtures]
        if on_result is not None:
            for result in planned:
                on_result(result)
        return RegenerationReport(
            directory=config.directory, results=tuple(planned), dry_run=True
        )

    synthesizer = synthesizer or YosysSynthesizer(
        config.yosys_bin,
        synth_command=config.synth_command,
        timeout=config.timeout,
    )

    results: list[FixtureResult] = []
    aborted = False
    for paths in fixtures:
        outcome = _synthesize_into_log(synthesizer, paths)
        result = FixtureResult(paths=paths, outcome=outcome)
        results.append(result)
        if on_result is not None:
            on_result(result)

        if result.ok:
            logger.info("regenerated %s", paths.name)
        else:
            logger.warning(
                "synthesis failed for %s: %s", paths.name, outcome.error
            )
            if config.fail_fast:
                aborted = len(results) < len(fixtures)
                break

    return RegenerationReport(
        directory=config.directory, results=tuple(results), aborted=aborted
    )
