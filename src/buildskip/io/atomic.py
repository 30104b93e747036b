"""Atomic text persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path


def write_text_atomic(
    *,
    path: Path,
    text: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist text atomically by writing to a temp file then renaming.

    Readers observe either the previous file or the complete new one. On any
    failure the temp file is removed and the destination is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
        os.replace(temp_name, path)
    except BaseException:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise
