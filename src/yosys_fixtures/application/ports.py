"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from yosys_fixtures.application.results import SynthesisOutcome


class Synthesizer(Protocol):
    """Run synthesis for one input and report what happened."""

    def synthesize(self, input_path: Path, json_path: Path) -> SynthesisOutcome:
        """Synthesize ``input_path`` and write the netlist to ``json_path``.

        Per-input failures are reported through the returned outcome, not
        raised.
        """
