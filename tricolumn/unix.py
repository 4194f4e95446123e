"""Unix permission helpers."""

from __future__ import annotations

import os
import stat

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

_FILE_TYPE_CHARS = (
    (stat.S_IFREG >> 9, "-"),
    (stat.S_IFDIR >> 9, "d"),
    (stat.S_IFLNK >> 9, "l"),
    (stat.S_IFSOCK >> 9, "s"),
    (stat.S_IFBLK >> 9, "b"),
    (stat.S_IFCHR >> 9, "c"),
    (stat.S_IFIFO >> 9, "f"),
)

_PERMISSION_CHARS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def is_executable(mode: int) -> bool:
    """True if any of the user, group or other execute bits is set."""
    return bool(mode & _EXEC_BITS)


def mode_to_string(mode: int) -> str:
    """Render a mode as an ``ls``-style string such as ``-rw-r--r--``."""
    shifted = mode >> 9
    type_char = next((ch for val, ch in _FILE_TYPE_CHARS if val == shifted), "")
    perms = "".join(ch if mode & val else "-" for val, ch in _PERMISSION_CHARS)
    return type_char + perms


def set_mode(path: str | os.PathLike[str], mode: int) -> bool:
    """Change the permissions of ``path``; return whether it succeeded."""
    try:
        os.chmod(path, mode)
    except OSError:
        return False
    return True