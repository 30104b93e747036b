"""Shared file I/O helpers."""

from .atomic import write_text_atomic
from .files import digest_for_file, file_sha1

__all__ = ["digest_for_file", "file_sha1", "write_text_atomic"]
