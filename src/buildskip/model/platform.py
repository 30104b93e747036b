"""Supported build platforms."""

from __future__ import annotations

from enum import StrEnum

from buildskip.constants.platforms import PLATFORM_ALIASES
from buildskip.exceptions import UnknownPlatformError


class Platform(StrEnum):
    """A build target. Values double as version-file keys and build subdirectories."""

    MACOS = "Mac"
    IOS = "iOS"
    WATCHOS = "watchOS"
    TVOS = "tvOS"


def supported_platforms() -> tuple[Platform, ...]:
    """Return every supported platform in canonical order."""
    return tuple(Platform)


def parse_platform(name: str) -> Platform:
    """Resolve a persisted key or alias to a platform."""
    try:
        return Platform(name)
    except ValueError:
        pass
    key = PLATFORM_ALIASES.get(name.strip().lower())
    if key is None:
        valid = ", ".join(platform.value for platform in Platform)
        raise UnknownPlatformError(f"Unknown platform {name!r}; expected one of: {valid}")
    return Platform(key)
