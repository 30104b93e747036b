"""Root of the Buildskip exception hierarchy."""

from __future__ import annotations


class BuildSkipError(Exception):
    """Base class for all errors raised by Buildskip."""
