"""Config loading and normalization for Buildskip."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from buildskip.config.model import BuildSkipConfig
from buildskip.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME, DEFAULT_BINARIES_FOLDER
from buildskip.exceptions import ConfigError, UnknownPlatformError
from buildskip.model import Platform, parse_platform


def load_config(root: Path, config_path: Path | None = None) -> BuildSkipConfig:
    """Load and validate config from ``buildskip.yaml`` or an explicit path."""
    path = config_path if config_path is not None else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return BuildSkipConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    binaries_folder = raw.get("binaries_folder", DEFAULT_BINARIES_FOLDER)
    if not isinstance(binaries_folder, str) or not binaries_folder.strip():
        raise ConfigError("binaries_folder must be a non-empty string")
    if PurePosixPath(binaries_folder).is_absolute():
        raise ConfigError("binaries_folder must be relative to the project root")

    return BuildSkipConfig(
        binaries_folder=binaries_folder.strip(),
        platforms=_parse_platforms(raw.get("platforms", []), "platforms"),
    )


def _parse_platforms(value: Any, key_name: str) -> tuple[Platform, ...]:
    """Resolve a YAML list of platform names, preserving order and dropping duplicates."""
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    try:
        return tuple(dict.fromkeys(parse_platform(item) for item in value))
    except UnknownPlatformError as exc:
        raise ConfigError(f"{key_name}: {exc}") from exc
