"""Configuration defaults and filenames."""

from __future__ import annotations

from buildskip.constants.cache import BINARIES_FOLDER

CONFIG_FILENAME: str = "buildskip.yaml"
DEFAULT_BINARIES_FOLDER: str = BINARIES_FOLDER

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"binaries_folder", "platforms"})
