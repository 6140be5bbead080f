"""Top-level API for regenerating Yosys netlist fixtures."""

from __future__ import annotations

from pathlib import Path

from yosys_fixtures.application.options import RegenerationOptions
from yosys_fixtures.application.ports import Synthesizer
from yosys_fixtures.application.results import RegenerationReport

__version__ = "0.1.0"


def regenerate_fixtures(
    directory: str | Path = ".",
    *,
    input_suffix: str = ".v",
    yosys_bin: str = "yosys",
    synth_command: str = "synth",
    timeout: float | None = None,
    fail_fast: bool = False,
    dry_run: bool = False,
    synthesizer: Synthesizer | None = None,
) -> RegenerationReport:
    """Synthesize every input in a directory into a log/JSON fixture pair.

    Parameters
    ----------
    directory : str | Path, default="."
        Directory holding the Verilog inputs; fixtures are written beside them.
    input_suffix : str, default=".v"
        Suffix identifying input files.
    yosys_bin : str, default="yosys"
        Yosys executable name or path.
    synth_command : str, default="synth"
        Synthesis pass placed between ``read_verilog`` and ``write_json``.
    timeout : float | None, default=None
        Per-input time limit in seconds; unlimited when ``None``.
    fail_fast : bool, default=False
        Stop after the first failing input.
    dry_run : bool, default=False
        Report planned fixtures without running anything.
    synthesizer : Synthesizer | None, default=None
        Custom synthesizer; overrides ``yosys_bin``, ``synth_command`` and
        ``timeout``.

    Returns
    -------
    RegenerationReport
        Per-fixture results in processing order.
    """
    from yosys_fixtures.application.use_cases import regenerate_fixtures as _impl

    options = RegenerationOptions(
        input_suffix=input_suffix,
        yosys_bin=yosys_bin,
        synth_command=synth_command,
        timeout=timeout,
        fail_fast=fail_fast,
        dry_run=dry_run,
    )
    return _impl(Path(directory), options=options, synthesizer=synthesizer)


__all__ = ["regenerate_fixtures", "RegenerationOptions", "RegenerationReport"]
