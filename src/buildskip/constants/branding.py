"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "BUILDSKIP"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ BUILDSKIP",
    "     // reuse prebuilt frameworks when nothing changed",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} version-file cache"))
