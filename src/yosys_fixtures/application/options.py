"""Typed option objects shared across regeneration use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegenerationOptions:
    """Options for one fixture regeneration run.

    The defaults reproduce the plain ``read_verilog; synth; write_json``
    batch over ``*.v`` files, continuing past failing inputs.
    """

    input_suffix: str = ".v"
    log_suffix: str = ".log"
    json_suffix: str = ".json"
    yosys_bin: str = "yosys"
    synth_command: str = "synth"
    timeout: float | None = None
    fail_fast: bool = False
    dry_run: bool = False
