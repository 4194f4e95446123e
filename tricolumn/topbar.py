"""The title line: user, host and current directory."""

from __future__ import annotations

import os
from pathlib import PurePath


def topbar_text(
    path: str | os.PathLike[str],
    width: int,
    username: str,
    hostname: str,
    home: str | os.PathLike[str] | None,
    tilde: bool,
) -> str:
    """``user@host path``, shortened to the last component when wider than ``width``."""
    pure = PurePath(path)
    shown = str(pure)
    ellipsis = ""
    if len(shown.encode("utf-8", "surrogateescape")) > width:
        name = pure.name
        if name and name != "..":
            shown = name
            ellipsis = "…"
    if tilde and home is not None:
        shown = shown.replace(str(home), "~")
    return f"{username}@{hostname} {ellipsis}{shown}"