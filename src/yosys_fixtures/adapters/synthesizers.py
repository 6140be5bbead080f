"""Synthesizer adapters backed by external synthesis tools."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from yosys_fixtures.application.results import SynthesisOutcome
from yosys_fixtures.errors import DependencyError

logger = logging.getLogger(__name__)


def build_synthesis_script(
    input_name: str, json_name: str, synth_command: str = "synth"
) -> str:
    """Compose the Yosys directive string for one input.

    Parameters
    ----------
    input_name : str
        Verilog file name, relative to the tool's working directory.
    json_name : str
        JSON netlist file name to write.
    synth_command : str, default="synth"
        Synthesis pass run between reading and writing.

    Returns
    -------
    str
        ``read_verilog <input>; <synth_command>; write_json <json>``.
    """
    return f"read_verilog {input_name}; {synth_command}; write_json {json_name}"


def _decode(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def _mtime_ns(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


class YosysSynthesizer:
    """Run Yosys as a child process, one input at a time."""

    def __init__(
        self,
        yosys_bin: str = "yosys",
        *,
        synth_command: str = "synth",
        timeout: float | None = None,
        extra_args: Sequence[str] = (),
    ) -> None:
        self.yosys_bin = yosys_bin
        self.synth_command = synth_command
        self.timeout = timeout
        self.extra_args = tuple(extra_args)

    def command(self, input_path: Path, json_path: Path) -> list[str]:
        """Build the argument vector for one input."""
        script = build_synthesis_script(
            input_path.name, json_path.name, self.synth_command
        )
        return [self.yosys_bin, *self.extra_args, "-p", script]

    def synthesize(self, input_path: Path, json_path: Path) -> SynthesisOutcome:
        """Run Yosys on ``input_path`` and capture its combined output.

        Parameters
        ----------
        input_path : Path
            Verilog source file.
        json_path : Path
            Netlist destination; must share the input's directory.

        Returns
        -------
        SynthesisOutcome
            Captured output, exit status and the written netlist path, if any.
        """
        cmd = self.command(input_path, json_path)
        cwd = input_path.parent
        logger.debug("running %s in %s", shlex.join(cmd), cwd)
        before = _mtime_ns(json_path)

        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except (FileNotFoundError, PermissionError) as exc:
            message = f"Cannot start synthesis tool '{self.yosys_bin}': {exc}"
            logger.debug("%s: %s", input_path.name, message)
            return SynthesisOutcome(
                log_text=message + "\n",
                json_path=None,
                returncode=None,
                error=message,
            )
        except subprocess.TimeoutExpired as exc:
            message = f"Synthesis timed out after {self.timeout} seconds."
            logger.debug("%s: %s", input_path.name, message)
            return SynthesisOutcome(
                log_text=_decode(exc.output) + message + "\n",
                json_path=None,
                returncode=None,
                error=message,
            )

        after = _mtime_ns(json_path)
        written = after is not None and after != before
        error = None
        if completed.returncode != 0:
            error = f"{self.yosys_bin} exited with status {completed.returncode}"
            logger.debug("%s: %s", input_path.name, error)
        return SynthesisOutcome(
            log_text=completed.stdout or "",
            json_path=json_path if written else None,
            returncode=completed.returncode,
            error=error,
        )

    def version(self) -> str:
        """Return the tool's version banner.

        Raises
        ------
        DependencyError
            If the tool cannot be started or reports failure.
        """
        try:
            completed = subprocess.run(
                [self.yosys_bin, "-V"],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise DependencyError(
                f"Synthesis tool '{self.yosys_bin}' is not available: {exc}"
            ) from exc
        if completed.returncode != 0:
            raise DependencyError(
                f"'{self.yosys_bin} -V' exited with status {completed.returncode}"
            )
        lines = completed.stdout.strip().splitlines()
        return lines[0] if lines else ""
