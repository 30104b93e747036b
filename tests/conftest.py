"""Shared pytest fixtures for building fake framework products."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from buildskip.constants.cache import BINARIES_FOLDER
from buildskip.model import Platform


@pytest.fixture
def make_framework(tmp_path: Path) -> Callable[..., Path]:
    """Create ``<root>/Carthage/Build/<platform>/<name>.framework/<name>`` and return the container."""

    def _make(platform: Platform, name: str, content: bytes = b"binary") -> Path:
        framework = tmp_path / BINARIES_FOLDER / platform.value / f"{name}.framework"
        framework.mkdir(parents=True, exist_ok=True)
        (framework / name).write_bytes(content)
        return framework

    return _make
