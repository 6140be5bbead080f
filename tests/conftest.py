"""Shared pytest configuration, marker assignment and fixture helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from yosys_fixtures.application.results import SynthesisOutcome

COUNTER_V = """\
module counter(input clk, output reg [3:0] q);
  always @(posedge clk) q <= q + 1;
endmodule
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeSynthesizer:
    """In-process synthesizer recording calls; names in ``failing`` fail."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.calls: list[str] = []

    def synthesize(self, input_path: Path, json_path: Path) -> SynthesisOutcome:
        self.calls.append(input_path.name)
        if input_path.name in self.failing:
            return SynthesisOutcome(
                log_text=f"ERROR: cannot parse {input_path.name}\n",
                json_path=None,
                returncode=1,
                error="yosys exited with status 1",
            )
        json_path.write_text('{"creator": "fake", "modules": {}}', encoding="utf-8")
        return SynthesisOutcome(
            log_text=f"-- Running synth on {input_path.name} --\n",
            json_path=json_path,
            returncode=0,
        )


@pytest.fixture
def fake_synthesizer() -> FakeSynthesizer:
    """Return a synthesizer that always succeeds."""
    return FakeSynthesizer()


@pytest.fixture
def verilog_dir(tmp_path: Path) -> Path:
    """Directory holding ``a.v`` and ``b.v``."""
    for name in ("a", "b"):
        (tmp_path / f"{name}.v").write_text(
            COUNTER_V.replace("counter", name), encoding="utf-8"
        )
    return tmp_path


@pytest.fixture
def make_synthesizer() -> type[FakeSynthesizer]:
    """Return the fake synthesizer class for tests needing custom failures."""
    return FakeSynthesizer
