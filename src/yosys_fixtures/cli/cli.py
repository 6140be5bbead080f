#!/usr/bin/env python3
"""
yosys_fixtures.cli.cli

Typer-based CLI for regenerating Yosys netlist fixtures.

Each ``<name>.v`` in the target directory is synthesized with

    yosys -p "read_verilog <name>.v; synth; write_json <name>.json"

and the tool's output is captured in ``<name>.log``.

Examples
--------
Regenerate fixtures in the current directory:

    regen-fixtures run

Preview what would be regenerated:

    regen-fixtures list testdata/
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer

from yosys_fixtures.application.results import FixtureResult
from yosys_fixtures.errors import FixtureError

app = typer.Typer(
    name="regen-fixtures",
    help="Regenerate Yosys JSON netlist fixtures from Verilog sources.",
    no_args_is_help=True,
)

DIRECTORY_HELP = "Directory holding the inputs; fixtures are written beside them."
SUFFIX_HELP = "Suffix identifying input files."
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code."""
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _echo_result(result: FixtureResult) -> None:
    paths = result.paths
    outcome = result.outcome
    if outcome is None:
        typer.echo(
            f"- {paths.input_path.name} -> {paths.log_path.name}, {paths.json_path.name}"
        )
    elif result.ok:
        typer.secho(
            f"✓ {paths.input_path.name} -> {paths.json_path.name}",
            fg=typer.colors.GREEN,
        )
    else:
        reason = outcome.error or f"exit status {outcome.returncode}"
        typer.secho(
            f"✗ {paths.input_path.name}: {reason} (see {paths.log_path.name})",
            fg=typer.colors.RED,
        )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state and logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("run")
def run_cmd(
    ctx: typer.Context,
    directory: Path = typer.Argument(
        Path("."),
        exists=True,
        file_okay=False,
        dir_okay=True,
        help=DIRECTORY_HELP,
    ),
    suffix: str = typer.Option(".v", "--suffix", help=SUFFIX_HELP),
    yosys_bin: str = typer.Option(
        "yosys", "--yosys", envvar="YOSYS_BIN", help="Yosys executable name or path."
    ),
    synth_command: str = typer.Option(
        "synth", "--synth-command", help="Synthesis pass run between read and write."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Per-input time limit in seconds."
    ),
    fail_fast: bool = typer.Option(
        False, "--fail-fast", help="Stop after the first failing input."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="List planned fixtures without running Yosys."
    ),
) -> None:
    """Synthesize every input and capture a log/JSON fixture pair for each.

    Failing inputs do not stop the run unless ``--fail-fast`` is given. The
    exit code is non-zero when any fixture failed.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from yosys_fixtures.application import RegenerationOptions, regenerate_fixtures

        report = regenerate_fixtures(
            directory,
            options=RegenerationOptions(
                input_suffix=suffix,
                yosys_bin=yosys_bin,
                synth_command=synth_command,
                timeout=timeout,
                fail_fast=fail_fast,
                dry_run=dry_run,
            ),
            on_result=_echo_result,
        )
    except FixtureError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    total = len(report.results)
    if total == 0:
        typer.echo(f"No inputs matching *{suffix} in {directory}")
        return
    if report.dry_run:
        typer.echo(f"{total} fixture(s) planned.")
        return

    failed = len(report.failed)
    typer.echo(f"Regenerated {total - failed}/{total} fixture(s).")
    if report.aborted:
        typer.echo("Stopped early after a failure (--fail-fast).")
    if not report.ok:
        raise typer.Exit(code=1)


@app.command("list")
def list_cmd(
    ctx: typer.Context,
    directory: Path = typer.Argument(
        Path("."),
        exists=True,
        file_okay=False,
        dir_okay=True,
        help=DIRECTORY_HELP,
    ),
    suffix: str = typer.Option(".v", "--suffix", help=SUFFIX_HELP),
) -> None:
    """List inputs and the fixture files derived from them."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from yosys_fixtures.application import RegenerationOptions, plan_fixtures

        fixtures = plan_fixtures(directory, RegenerationOptions(input_suffix=suffix))
    except FixtureError as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    if not fixtures:
        typer.echo(f"No inputs matching *{suffix} in {directory}")
        return
    for paths in fixtures:
        typer.echo(
            f"{paths.input_path.name} -> {paths.log_path.name}, {paths.json_path.name}"
        )


@app.command("doctor")
def doctor_cmd(
    yosys_bin: str = typer.Option(
        "yosys", "--yosys", envvar="YOSYS_BIN", help="Yosys executable name or path."
    ),
) -> None:
    """Print toolchain locations and versions."""
    from yosys_fixtures import __version__
    from yosys_fixtures.adapters.synthesizers import YosysSynthesizer

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"yosys-fixtures: {__version__}")

    resolved = shutil.which(yosys_bin)
    typer.echo(f"yosys path: {resolved or '<not found>'}")
    try:
        version = YosysSynthesizer(yosys_bin).version()
        typer.echo(f"yosys: {version}")
    except FixtureError:
        typer.echo("yosys: <not installed>")


if __name__ == "__main__":
    app()
