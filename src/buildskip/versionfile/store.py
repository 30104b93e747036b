"""Location, loading and merge-on-write persistence of version files."""

from __future__ import annotations

import logging
from pathlib import Path

from buildskip.constants.cache import (
    BINARIES_FOLDER,
    FRAMEWORK_EXTENSION,
    VERSION_FILE_PREFIX,
    VERSION_FILE_SUFFIX,
    VERSION_FILE_TEMP_PREFIX,
    VERSION_FILE_TEMP_SUFFIX,
)
from buildskip.exceptions import DecodeError, VersionFileWriteError
from buildskip.io import write_text_atomic
from buildskip.model import CacheRecord, Platform, PlatformCache
from buildskip.versionfile.codec import decode_text, encode_text

logger = logging.getLogger(__name__)


def locate(root: Path, project_name: str, binaries_folder: str = BINARIES_FOLDER) -> Path:
    """Return the version-file path for ``project_name`` under ``root``."""
    return root / binaries_folder / f"{VERSION_FILE_PREFIX}{project_name}{VERSION_FILE_SUFFIX}"


def platform_directory(root: Path, platform: Platform, binaries_folder: str = BINARIES_FOLDER) -> Path:
    """Return the directory holding built frameworks for ``platform``."""
    return root / binaries_folder / platform.value


def artifact_binary_path(
    root: Path,
    platform: Platform,
    name: str,
    binaries_folder: str = BINARIES_FOLDER,
) -> Path:
    """Return ``<platform dir>/<name>.framework/<name>``."""
    return platform_directory(root, platform, binaries_folder) / f"{name}{FRAMEWORK_EXTENSION}" / name


def read(path: Path) -> CacheRecord | None:
    """Load the cache record at ``path``.

    Missing, unreadable and malformed files all yield ``None`` so callers
    rebuild instead of trusting a damaged cache.
    """
    try:
        if not path.is_file():
            logger.debug("No version file at %s", path)
            return None
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable version file %s (%s)", path, exc)
        return None

    try:
        return decode_text(text)
    except DecodeError as exc:
        logger.warning("Ignoring malformed version file %s (%s)", path, exc)
        return None


def write(
    path: Path,
    new_results: dict[Platform, PlatformCache],
    prior: CacheRecord | None,
) -> CacheRecord:
    """Merge ``new_results`` over ``prior`` and persist the result atomically.

    Platforms absent from ``new_results`` keep their prior entry. Returns the
    record that was written.
    """
    record = CacheRecord(platforms=dict(new_results)).merged_with(prior)
    try:
        write_text_atomic(
            path=path,
            text=encode_text(record),
            temp_prefix=VERSION_FILE_TEMP_PREFIX,
            temp_suffix=VERSION_FILE_TEMP_SUFFIX,
        )
    except OSError as exc:
        raise VersionFileWriteError(f"Failed to write version file {path}: {exc}") from exc

    logger.debug("Wrote version file %s for %s", path, ", ".join(p.value for p in record.cached_platforms()))
    return record
