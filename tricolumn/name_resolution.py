"""Choosing a free destination name when a file already exists."""

from __future__ import annotations

import itertools
import os
from pathlib import Path


def rename_filename_conflict(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` or, if it exists, ``path`` with ``_0``, ``_1``, ... appended."""
    candidate = Path(path)
    file_name = candidate.name
    if not file_name:
        raise ValueError(f"path has no file name: {path}")
    parent = candidate.parent
    for i in itertools.count():
        if not candidate.exists():
            return candidate
        candidate = parent / f"{file_name}_{i}"
    raise AssertionError("unreachable")