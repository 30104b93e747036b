"""Typed version-file payload structures."""

from __future__ import annotations

from typing import TypeAlias, TypedDict

CachedFrameworkPayload = TypedDict("CachedFrameworkPayload", {"name": str, "sha1": str})

CachedPlatformPayload = TypedDict(
    "CachedPlatformPayload",
    {"commitish": str, "cachedFrameworks": list[CachedFrameworkPayload]},
)

# Keyed by persisted platform name, e.g. ``"iOS"``.
VersionFilePayload: TypeAlias = dict[str, CachedPlatformPayload]
