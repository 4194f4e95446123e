"""The status line describing the entry under the cursor."""

from __future__ import annotations

from tricolumn.dirlist import EntryKind, ListView
from tricolumn.format import file_size_to_string, mtime_to_string
from tricolumn.unix import mode_to_string


def footer_text(listing: ListView) -> str | None:
    """Mode, position, mtime and size of the current entry, or None without one."""
    index = listing.index
    if index is None or not 0 <= index < len(listing):
        return None
    entry = listing.contents[index]
    parts = [
        mode_to_string(entry.mode),
        "  ",
        f"{index + 1}/{len(listing)}",
        "  ",
        mtime_to_string(entry.modified),
        " UTC ",
        file_size_to_string(entry.size),
    ]
    if entry.kind is EntryKind.SYMLINK:
        parts.extend([" -> ", entry.link_target or ""])
    return "".join(parts)