"""Config data model for Buildskip."""

from __future__ import annotations

from dataclasses import dataclass

from buildskip.constants.config import DEFAULT_BINARIES_FOLDER
from buildskip.model import Platform


@dataclass(frozen=True)
class BuildSkipConfig:
    """Resolved buildskip config."""

    binaries_folder: str = DEFAULT_BINARIES_FOLDER
    platforms: tuple[Platform, ...] = ()
