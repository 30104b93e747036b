"""Platform aliases accepted on the command line and in config files."""

from __future__ import annotations

# Lowercased alias -> persisted platform key.
PLATFORM_ALIASES: dict[str, str] = {
    "mac": "Mac",
    "macos": "Mac",
    "osx": "Mac",
    "ios": "iOS",
    "watchos": "watchOS",
    "tvos": "tvOS",
}
