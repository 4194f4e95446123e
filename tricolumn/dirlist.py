"""Directory listings and the compact column that shows one."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from wcwidth import wcwidth

from tricolumn.canvas import DEFAULT_STYLE, Canvas, Rect

_ELLIPSIS = "…"
_EMPTY_STYLE = frozenset({"fg:white", "bg:red"})
_REVERSED = "reversed"


class EntryKind(enum.Enum):
    """What a listed entry is."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


@dataclass
class ListEntry:
    """One entry of a listing, with what the views need to show it."""

    label: str
    kind: EntryKind = EntryKind.FILE
    size: int = 0
    mode: int = 0
    modified: float = 0.0
    link_target: str | None = None
    style: frozenset[str] = DEFAULT_STYLE


@dataclass
class ListView:
    """The entries of a directory and the cursor position among them."""

    contents: list[ListEntry] = field(default_factory=list)
    index: int | None = None

    def __len__(self) -> int:
        return len(self.contents)

    def __iter__(self) -> Iterator[ListEntry]:
        return iter(self.contents)

    def current(self) -> ListEntry | None:
        """The entry under the cursor, if any."""
        if self.index is None or not 0 <= self.index < len(self.contents):
            return None
        return self.contents[self.index]


def _text_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


def _split_name(name: str) -> tuple[str, str]:
    dot = name.rfind(".")
    if dot < 0:
        return name, ""
    return name[:dot], name[dot:]


def _print_entry(
    canvas: Canvas, entry: ListEntry, style: frozenset[str], x: int, y: int, width: int
) -> None:
    name = entry.label
    if entry.kind is EntryKind.DIRECTORY:
        canvas.set_stringn(x, y, name, width, style)
        if _text_width(name) > width:
            canvas.set_string(x + width - 1, y, _ELLIPSIS, style)
        return

    stem, extension = _split_name(name)
    if not stem:
        canvas.set_stringn(x, y, extension, width, style)
        if _text_width(extension) > width:
            canvas.set_string(x + width - 1, y, _ELLIPSIS, style)
    elif not extension:
        canvas.set_stringn(x, y, stem, width, style)
        if _text_width(stem) > width:
            canvas.set_string(x + width - 1, y, _ELLIPSIS, style)
    else:
        stem_width = _text_width(stem)
        ext_width = _text_width(extension)
        canvas.set_stringn(x, y, stem, width, style)
        if stem_width + ext_width > width:
            ext_start = 0 if width < ext_width else width - ext_width
            canvas.set_string(x + ext_start, y, extension, style)
            canvas.set_string(x + max(ext_start - 1, 0), y, _ELLIPSIS, style)
        else:
            canvas.set_string(x + stem_width, y, extension, style)


def render_dirlist(canvas: Canvas, area: Rect, listing: ListView) -> None:
    """Draw the page of ``listing`` holding the cursor, highlighting the cursor row."""
    if area.width < 4 or area.height < 1:
        return
    x, y = area.left, area.top
    if not listing.contents:
        canvas.set_stringn(x, y, "empty", area.width, _EMPTY_STYLE)
        return
    entry = listing.current()
    if entry is None:
        raise ValueError(f"listing cursor {listing.index} does not point at an entry")
    curr_index = listing.index or 0
    skip = curr_index // area.height * area.height
    width = area.width

    for i, item in enumerate(listing.contents[skip : skip + area.height]):
        _print_entry(canvas, item, item.style, x + 1, y + i, width - 1)

    screen_index = curr_index % area.height
    style = entry.style | {_REVERSED}
    canvas.set_string(x, y + screen_index, " " * width, style)
    _print_entry(canvas, entry, style, x + 1, y + screen_index, width - 1)