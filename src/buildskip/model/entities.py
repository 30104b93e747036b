"""Core data models for version-file caching."""

from __future__ import annotations

from dataclasses import dataclass, field

from buildskip.model.platform import Platform, supported_platforms


@dataclass(frozen=True)
class Dependency:
    """A dependency pinned to a resolved revision."""

    project_name: str
    commitish: str


def pinned_commitish(dependency: Dependency) -> str:
    """Return the revision the dependency is pinned to."""
    return dependency.commitish


@dataclass(frozen=True)
class ArtifactRecord:
    """Digest of one built framework binary at the time it was cached."""

    name: str
    digest: str


@dataclass(frozen=True)
class PlatformCache:
    """Cached build state for one platform."""

    commitish: str
    artifacts: tuple[ArtifactRecord, ...] = ()


@dataclass(frozen=True)
class CacheRecord:
    """Full cache state for one dependency.

    A platform missing from ``platforms`` has no cache, which is distinct from a
    platform cached with zero artifacts.
    """

    platforms: dict[Platform, PlatformCache] = field(default_factory=dict)

    def cache_for(self, platform: Platform) -> PlatformCache | None:
        """Return the cached state for ``platform``, if any."""
        return self.platforms.get(platform)

    def cached_platforms(self) -> tuple[Platform, ...]:
        """Return platforms with a cache entry, in supported order."""
        return tuple(platform for platform in supported_platforms() if platform in self.platforms)

    def merged_with(self, prior: CacheRecord | None) -> CacheRecord:
        """Return this record with prior entries carried forward for platforms it lacks."""
        merged: dict[Platform, PlatformCache] = {}
        for platform in supported_platforms():
            entry = self.platforms.get(platform)
            if entry is None and prior is not None:
                entry = prior.cache_for(platform)
            if entry is not None:
                merged[platform] = entry
        return CacheRecord(platforms=merged)
