"""Pydantic schemas for runtime validation of regeneration inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _check_suffix(value: str) -> str:
    if not value.startswith(".") or len(value) < 2:
        raise ValueError("suffix must start with '.' and name an extension.")
    if any(ch in value for ch in "/\\*?"):
        raise ValueError("suffix cannot contain path separators or wildcards.")
    return value


class RegenerationConfig(BaseModel):
    """Validated input for a fixture regeneration run."""

    model_config = ConfigDict(extra="forbid")

    directory: Path
    input_suffix: str = ".v"
    log_suffix: str = ".log"
    json_suffix: str = ".json"
    yosys_bin: str = "yosys"
    synth_command: str = "synth"
    timeout: float | None = Field(default=None, gt=0.0)
    fail_fast: bool = False
    dry_run: bool = False

    @field_validator("input_suffix", "log_suffix", "json_suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        return _check_suffix(value)

    @field_validator("yosys_bin", "synth_command")
    @classmethod
    def _validate_non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("value cannot be empty.")
        return value

    @field_validator("synth_command")
    @classmethod
    def _validate_single_command(cls, value: str) -> str:
        if ";" in value:
            raise ValueError("synth_command must be a single Yosys command.")
        return value

    @model_validator(mode="after")
    def _validate_distinct_suffixes(self) -> RegenerationConfig:
        if self.input_suffix in {self.log_suffix, self.json_suffix}:
            raise ValueError("input suffix must differ from log and JSON suffixes.")
        if self.log_suffix == self.json_suffix:
            raise ValueError("log and JSON suffixes must differ.")
        return self
