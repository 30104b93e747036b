"""Version-file cache: codec, storage, skip decision and build recording."""

from __future__ import annotations

from buildskip.versionfile.codec import decode, decode_text, encode, encode_text
from buildskip.versionfile.decision import can_skip_build, check_platform
from buildskip.versionfile.store import artifact_binary_path, locate, platform_directory, read, write
from buildskip.versionfile.update import (
    collect_platform_results,
    platform_artifacts_from_products,
    record_build_result,
)

__all__ = [
    "artifact_binary_path",
    "can_skip_build",
    "check_platform",
    "collect_platform_results",
    "decode",
    "decode_text",
    "encode",
    "encode_text",
    "locate",
    "platform_artifacts_from_products",
    "platform_directory",
    "read",
    "record_build_result",
    "write",
]
