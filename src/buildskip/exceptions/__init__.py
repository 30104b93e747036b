"""Shared exception hierarchy for Buildskip."""

from __future__ import annotations

from .base import BuildSkipError
from .config import ConfigError, UnknownPlatformError
from .version_file import (
    DecodeError,
    IOFailure,
    MissingArtifactError,
    VersionFileSchemaError,
    VersionFileSyntaxError,
    VersionFileWriteError,
)

__all__ = [
    "BuildSkipError",
    "ConfigError",
    "DecodeError",
    "IOFailure",
    "MissingArtifactError",
    "UnknownPlatformError",
    "VersionFileSchemaError",
    "VersionFileSyntaxError",
    "VersionFileWriteError",
]
