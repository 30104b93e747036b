"""Configuration-related exceptions."""

from __future__ import annotations

from buildskip.exceptions.base import BuildSkipError


class ConfigError(BuildSkipError, ValueError):
    """Raised when buildskip configuration is invalid."""


class UnknownPlatformError(BuildSkipError, ValueError):
    """Raised when a platform name is not one of the supported platforms."""
