"""Decide whether a dependency's cached frameworks can stand in for a build."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from buildskip.constants.cache import BINARIES_FOLDER
from buildskip.io import digest_for_file
from buildskip.model import CacheRecord, Dependency, Platform, pinned_commitish
from buildskip.versionfile.store import artifact_binary_path, locate, read

logger = logging.getLogger(__name__)


def check_platform(
    platform: Platform,
    record: CacheRecord,
    commitish: str,
    root: Path,
    binaries_folder: str = BINARIES_FOLDER,
) -> bool:
    """Return True when every cached framework for ``platform`` is still on disk unchanged."""
    cache = record.cache_for(platform)
    if cache is None:
        logger.debug("%s: no cache entry", platform.value)
        return False
    if cache.commitish != commitish:
        logger.debug("%s: cached commitish %r != %r", platform.value, cache.commitish, commitish)
        return False

    for artifact in cache.artifacts:
        binary_path = artifact_binary_path(root, platform, artifact.name, binaries_folder)
        digest = digest_for_file(binary_path)
        if digest is None:
            logger.debug("%s: %s is missing", platform.value, binary_path)
            return False
        if digest != artifact.digest:
            logger.debug("%s: %s digest changed", platform.value, binary_path)
            return False
    return True


def can_skip_build(
    dependency: Dependency,
    platforms: Iterable[Platform],
    root: Path,
    binaries_folder: str = BINARIES_FOLDER,
) -> bool:
    """Return True when the build of ``dependency`` for ``platforms`` can be skipped.

    An empty ``platforms`` checks whichever platforms the version file caches.
    Every checked platform must be valid; one stale platform means rebuild.
    """
    record = read(locate(root, dependency.project_name, binaries_folder))
    if record is None:
        return False

    requested = tuple(dict.fromkeys(platforms))
    platforms_to_check = requested or record.cached_platforms()
    commitish = pinned_commitish(dependency)

    for platform in platforms_to_check:
        if not check_platform(platform, record, commitish, root, binaries_folder):
            logger.info("%s must be rebuilt for %s", dependency.project_name, platform.value)
            return False
    return True
