"""Constants used by version files and artifact hashing."""

from __future__ import annotations

BINARIES_FOLDER: str = "Carthage/Build"
VERSION_FILE_PREFIX: str = "."
VERSION_FILE_SUFFIX: str = ".version"
VERSION_FILE_TEMP_PREFIX: str = ".version-"
VERSION_FILE_TEMP_SUFFIX: str = ".tmp"
FRAMEWORK_EXTENSION: str = ".framework"
FILE_HASH_CHUNK_SIZE: int = 65536

COMMITISH_KEY: str = "commitish"
CACHED_FRAMEWORKS_KEY: str = "cachedFrameworks"
FRAMEWORK_NAME_KEY: str = "name"
FRAMEWORK_SHA1_KEY: str = "sha1"
