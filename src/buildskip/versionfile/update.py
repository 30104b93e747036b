"""Record freshly built frameworks in a dependency's version file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from buildskip.constants.cache import BINARIES_FOLDER
from buildskip.exceptions import BuildSkipError, MissingArtifactError
from buildskip.io import digest_for_file
from buildskip.model import ArtifactRecord, Dependency, Platform, PlatformCache, parse_platform, pinned_commitish
from buildskip.versionfile.store import locate, read, write

logger = logging.getLogger(__name__)


def platform_artifacts_from_products(product_paths: Iterable[Path]) -> list[tuple[Platform, Path]]:
    """Pair each ``<platform>/<Name>.framework`` product with its platform."""
    return [(parse_platform(path.parent.name), path) for path in product_paths]


def collect_platform_results(
    dependency: Dependency,
    platform_artifacts: Iterable[tuple[Platform, Path]],
) -> dict[Platform, PlatformCache]:
    """Hash every framework binary and group the records per platform.

    Raises ``MissingArtifactError`` as soon as one binary cannot be hashed.
    """
    grouped: dict[Platform, list[ArtifactRecord]] = {}
    for platform, framework_path in platform_artifacts:
        name = framework_path.stem
        binary_path = framework_path / name
        digest = digest_for_file(binary_path)
        if digest is None:
            raise MissingArtifactError(binary_path)
        grouped.setdefault(platform, []).append(ArtifactRecord(name=name, digest=digest))

    commitish = pinned_commitish(dependency)
    return {
        platform: PlatformCache(commitish=commitish, artifacts=tuple(artifacts))
        for platform, artifacts in grouped.items()
    }


def record_build_result(
    dependency: Dependency,
    platform_artifacts: Iterable[tuple[Platform, Path]],
    root: Path,
    binaries_folder: str = BINARIES_FOLDER,
) -> bool:
    """Persist digests of a completed build, keeping entries for platforms not rebuilt.

    Returns False, leaving any existing version file untouched, when an artifact
    cannot be hashed or the file cannot be written.
    """
    path = locate(root, dependency.project_name, binaries_folder)
    try:
        new_results = collect_platform_results(dependency, platform_artifacts)
        write(path, new_results, read(path))
    except BuildSkipError as exc:
        logger.warning("Failed to record build of %s: %s", dependency.project_name, exc)
        return False
    return True
