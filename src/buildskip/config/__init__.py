"""Configuration loading and validation for Buildskip."""

from __future__ import annotations

from buildskip.config.loader import load_config
from buildskip.config.model import BuildSkipConfig

__all__ = ["BuildSkipConfig", "load_config"]
