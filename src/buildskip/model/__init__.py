"""Core data models for Buildskip."""

from .entities import ArtifactRecord, CacheRecord, Dependency, PlatformCache, pinned_commitish
from .platform import Platform, parse_platform, supported_platforms

__all__ = [
    "ArtifactRecord",
    "CacheRecord",
    "Dependency",
    "Platform",
    "PlatformCache",
    "parse_platform",
    "pinned_commitish",
    "supported_platforms",
]
