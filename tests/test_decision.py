"""Tests for the build skip decision."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from buildskip.model import ArtifactRecord, CacheRecord, Dependency, Platform, PlatformCache
from buildskip.versionfile import can_skip_build, check_platform, locate, write

FOO = Dependency(project_name="Foo", commitish="abc123")


def _cache(platform: Platform, framework: Path, commitish: str = "abc123") -> dict[Platform, PlatformCache]:
    name = framework.stem
    digest = hashlib.sha1((framework / name).read_bytes()).hexdigest()
    return {platform: PlatformCache(commitish, (ArtifactRecord(name, digest),))}


def test_no_version_file_requires_build(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    make_framework(Platform.IOS, "Foo")

    assert can_skip_build(FOO, [Platform.IOS], tmp_path) is False
    assert can_skip_build(FOO, [], tmp_path) is False


def test_matching_version_file_skips_build(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    framework = make_framework(Platform.IOS, "Foo")
    write(locate(tmp_path, "Foo"), _cache(Platform.IOS, framework), None)

    assert can_skip_build(FOO, [Platform.IOS], tmp_path) is True


def test_deleted_artifact_requires_build(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    framework = make_framework(Platform.IOS, "Foo")
    write(locate(tmp_path, "Foo"), _cache(Platform.IOS, framework), None)

    (framework / "Foo").unlink()

    assert can_skip_build(FOO, [Platform.IOS], tmp_path) is False


def test_changed_artifact_requires_build(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    framework = make_framework(Platform.IOS, "Foo", b"first")
    write(locate(tmp_path, "Foo"), _cache(Platform.IOS, framework), None)

    make_framework(Platform.IOS, "Foo", b"second")

    assert can_skip_build(FOO, [Platform.IOS], tmp_path) is False


def test_changed_commitish_invalidates_every_platform(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    ios = make_framework(Platform.IOS, "Foo")
    mac = make_framework(Platform.MACOS, "Foo")
    path = locate(tmp_path, "Foo")
    write(path, {**_cache(Platform.IOS, ios), **_cache(Platform.MACOS, mac)}, None)
    moved = Dependency(project_name="Foo", commitish="def456")

    assert can_skip_build(FOO, [], tmp_path) is True
    assert can_skip_build(moved, [Platform.IOS], tmp_path) is False
    assert can_skip_build(moved, [Platform.MACOS], tmp_path) is False
    assert can_skip_build(moved, [], tmp_path) is False


def test_commitish_comparison_is_exact(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    framework = make_framework(Platform.IOS, "Foo")
    write(locate(tmp_path, "Foo"), _cache(Platform.IOS, framework, commitish="v1.0"), None)

    assert can_skip_build(Dependency("Foo", "1.0"), [Platform.IOS], tmp_path) is False
    assert can_skip_build(Dependency("Foo", "v1.0"), [Platform.IOS], tmp_path) is True


def test_empty_platform_set_checks_cached_platforms_only(
    tmp_path: Path, make_framework: Callable[..., Path]
) -> None:
    framework = make_framework(Platform.TVOS, "Foo")
    write(locate(tmp_path, "Foo"), _cache(Platform.TVOS, framework), None)

    assert can_skip_build(FOO, [], tmp_path) is True
    assert can_skip_build(FOO, [Platform.TVOS, Platform.IOS], tmp_path) is False


def test_any_invalid_platform_requires_build(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    ios = make_framework(Platform.IOS, "Foo")
    mac = make_framework(Platform.MACOS, "Foo", b"mac")
    write(locate(tmp_path, "Foo"), {**_cache(Platform.IOS, ios), **_cache(Platform.MACOS, mac)}, None)

    make_framework(Platform.MACOS, "Foo", b"rebuilt")

    assert can_skip_build(FOO, [Platform.IOS], tmp_path) is True
    assert can_skip_build(FOO, [Platform.IOS, Platform.MACOS], tmp_path) is False
    assert can_skip_build(FOO, [], tmp_path) is False


@pytest.mark.parametrize(
    "content",
    [
        "{ this is not json",
        "[" * 100_000,
        '{"iOS": ' + "1" * 5000 + "}",
    ],
)
def test_corrupt_version_file_behaves_like_missing(
    tmp_path: Path, make_framework: Callable[..., Path], content: str
) -> None:
    make_framework(Platform.IOS, "Foo")
    path = locate(tmp_path, "Foo")
    path.write_text(content, encoding="utf-8")

    assert can_skip_build(FOO, [Platform.IOS], tmp_path) is False
    assert can_skip_build(FOO, [], tmp_path) is False


def test_platform_with_no_frameworks_is_valid(tmp_path: Path) -> None:
    record = CacheRecord(platforms={Platform.WATCHOS: PlatformCache("abc123", ())})

    assert check_platform(Platform.WATCHOS, record, "abc123", tmp_path) is True
    assert check_platform(Platform.IOS, record, "abc123", tmp_path) is False


def test_decision_does_not_modify_version_file(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    framework = make_framework(Platform.IOS, "Foo")
    path = locate(tmp_path, "Foo")
    write(path, _cache(Platform.IOS, framework), None)
    before = path.read_bytes()
    (framework / "Foo").unlink()

    can_skip_build(FOO, [Platform.IOS], tmp_path)

    assert path.read_bytes() == before


def test_unreadable_artifact_requires_build(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    framework = make_framework(Platform.IOS, "Foo")
    write(locate(tmp_path, "Foo"), _cache(Platform.IOS, framework), None)

    with patch.object(Path, "open", side_effect=PermissionError("denied")):
        assert can_skip_build(FOO, [Platform.IOS], tmp_path) is False


def test_unreadable_version_file_requires_build(tmp_path: Path, make_framework: Callable[..., Path]) -> None:
    framework = make_framework(Platform.IOS, "Foo")
    write(locate(tmp_path, "Foo"), _cache(Platform.IOS, framework), None)

    with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
        assert can_skip_build(FOO, [Platform.IOS], tmp_path) is False


def test_version_file_stat_failure_requires_build(tmp_path: Path) -> None:
    with patch.object(Path, "is_file", side_effect=PermissionError("denied")):
        assert can_skip_build(FOO, [Platform.IOS], tmp_path) is False
