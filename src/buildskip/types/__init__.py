"""Shared type aliases for Buildskip."""

from .version_file import CachedFrameworkPayload, CachedPlatformPayload, VersionFilePayload

__all__ = [
    "CachedFrameworkPayload",
    "CachedPlatformPayload",
    "VersionFilePayload",
]
