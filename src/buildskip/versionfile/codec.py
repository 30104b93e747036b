"""Conversion between cache records and their persisted JSON form."""

from __future__ import annotations

import json

from buildskip.constants.cache import (
    CACHED_FRAMEWORKS_KEY,
    COMMITISH_KEY,
    FRAMEWORK_NAME_KEY,
    FRAMEWORK_SHA1_KEY,
)
from buildskip.exceptions import VersionFileSchemaError, VersionFileSyntaxError
from buildskip.model import ArtifactRecord, CacheRecord, Platform, PlatformCache, supported_platforms
from buildskip.types import CachedPlatformPayload, VersionFilePayload


def encode(record: CacheRecord) -> VersionFilePayload:
    """Return the persisted payload for ``record``; uncached platforms are omitted."""
    payload: VersionFilePayload = {}
    for platform in record.cached_platforms():
        cache = record.platforms[platform]
        payload[platform.value] = _encode_platform(cache)
    return payload


def encode_text(record: CacheRecord) -> str:
    """Return pretty-printed JSON text for ``record``."""
    return json.dumps(encode(record), indent=2) + "\n"


def decode(payload: object) -> CacheRecord:
    """Build a cache record from decoded JSON.

    Unknown keys are ignored. A supported platform key that is present but
    malformed raises ``VersionFileSchemaError``.
    """
    if not isinstance(payload, dict):
        raise VersionFileSchemaError("$", "version file must be a JSON object")

    platforms: dict[Platform, PlatformCache] = {}
    for platform in supported_platforms():
        if platform.value not in payload:
            continue
        platforms[platform] = _decode_platform(payload[platform.value], location=platform.value)
    return CacheRecord(platforms=platforms)


def decode_text(text: str) -> CacheRecord:
    """Parse and decode version-file text."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise VersionFileSyntaxError(f"Invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    except (ValueError, RecursionError) as exc:
        raise VersionFileSyntaxError(f"Invalid JSON: {exc}") from exc
    return decode(payload)


def _encode_platform(cache: PlatformCache) -> CachedPlatformPayload:
    return {
        COMMITISH_KEY: cache.commitish,
        CACHED_FRAMEWORKS_KEY: [
            {FRAMEWORK_NAME_KEY: artifact.name, FRAMEWORK_SHA1_KEY: artifact.digest} for artifact in cache.artifacts
        ],
    }


def _decode_platform(value: object, *, location: str) -> PlatformCache:
    if not isinstance(value, dict):
        raise VersionFileSchemaError(location, "platform entry must be an object")

    commitish = value.get(COMMITISH_KEY)
    if not isinstance(commitish, str):
        raise VersionFileSchemaError(f"{location}.{COMMITISH_KEY}", "must be a string")

    raw_frameworks = value.get(CACHED_FRAMEWORKS_KEY)
    if not isinstance(raw_frameworks, list):
        raise VersionFileSchemaError(f"{location}.{CACHED_FRAMEWORKS_KEY}", "must be a list")

    artifacts = tuple(
        _decode_framework(item, location=f"{location}.{CACHED_FRAMEWORKS_KEY}[{index}]")
        for index, item in enumerate(raw_frameworks)
    )
    return PlatformCache(commitish=commitish, artifacts=artifacts)


def _decode_framework(value: object, *, location: str) -> ArtifactRecord:
    if not isinstance(value, dict):
        raise VersionFileSchemaError(location, "framework entry must be an object")

    name = value.get(FRAMEWORK_NAME_KEY)
    sha1 = value.get(FRAMEWORK_SHA1_KEY)
    if not isinstance(name, str):
        raise VersionFileSchemaError(f"{location}.{FRAMEWORK_NAME_KEY}", "must be a string")
    if not isinstance(sha1, str):
        raise VersionFileSchemaError(f"{location}.{FRAMEWORK_SHA1_KEY}", "must be a string")
    return ArtifactRecord(name=name, digest=sha1)
