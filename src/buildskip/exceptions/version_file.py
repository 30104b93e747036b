"""Version-file decoding, hashing and persistence exceptions."""

from __future__ import annotations

from pathlib import Path

from buildskip.exceptions.base import BuildSkipError


class DecodeError(BuildSkipError, ValueError):
    """Raised when a persisted version file cannot be turned into a cache record."""


class VersionFileSyntaxError(DecodeError):
    """Raised when version-file text is not valid JSON."""


class VersionFileSchemaError(DecodeError):
    """Raised when version-file JSON does not have the expected shape."""

    def __init__(self, location: str, message: str) -> None:
        super().__init__(f"{location}: {message}")
        self.location = location


class MissingArtifactError(BuildSkipError):
    """Raised when a built artifact is absent or cannot be hashed."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Artifact binary missing or unreadable: {path}")
        self.path = path


class IOFailure(BuildSkipError, OSError):
    """Raised when a version file cannot be read or persisted."""


class VersionFileWriteError(IOFailure):
    """Raised when the atomic replacement of a version file fails."""
