"""File-level helpers for hashing build artifacts."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from buildskip.constants.cache import FILE_HASH_CHUNK_SIZE

logger = logging.getLogger(__name__)


def file_sha1(path: Path) -> str:
    """Return SHA-1 hex digest for a file."""
    digest = hashlib.sha1()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def digest_for_file(path: Path) -> str | None:
    """Return the content digest of ``path``, or ``None`` when it cannot be hashed."""
    try:
        if not path.is_file():
            return None
        return file_sha1(path)
    except OSError as exc:
        logger.debug("Failed to hash %s: %s", path, exc)
        return None
