"""Exception hierarchy for fixture regeneration."""

from __future__ import annotations


class FixtureError(Exception):
    """Base error for fixture regeneration failures."""

    exit_code = 1


class ConfigurationError(FixtureError):
    """Raised when run options fail validation."""

    exit_code = 2


class InputDiscoveryError(FixtureError):
    """Raised when the working directory cannot be scanned for inputs."""

    exit_code = 3


class DependencyError(FixtureError):
    """Raised when the synthesis tool cannot be started."""

    exit_code = 4
