"""The current-directory column, which also shows file sizes and link markers."""

from __future__ import annotations

from wcwidth import wcwidth

from tricolumn.canvas import Canvas, Rect
from tricolumn.dirlist import EntryKind, ListEntry, ListView
from tricolumn.format import file_size_to_string

_FILE_SIZE_WIDTH = 8
_ELLIPSIS = "…"
_EMPTY_STYLE = frozenset({"fg:white", "bg:red"})
_REVERSED = "reversed"


def _text_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


def _split_name(name: str) -> tuple[str, str]:
    dot = name.rfind(".")
    if dot < 0:
        return name, ""
    return name[:dot], name[dot:]


def _print_file(
    canvas: Canvas, entry: ListEntry, style: frozenset[str], x: int, y: int, width: int
) -> None:
    if width < _FILE_SIZE_WIDTH:
        return
    name_width = width - _FILE_SIZE_WIDTH
    stem, extension = _split_name(entry.label)
    if not stem:
        canvas.set_stringn(x, y, extension, name_width, style)
        if _text_width(extension) > width:
            canvas.set_string(x + width - 1, y, _ELLIPSIS, style)
    elif not extension:
        canvas.set_stringn(x, y, stem, name_width, style)
        if _text_width(stem) > name_width:
            canvas.set_string(x + width - 1, y, _ELLIPSIS, style)
    else:
        stem_width = _text_width(stem)
        ext_width = _text_width(extension)
        canvas.set_stringn(x, y, stem, name_width, style)
        if stem_width + ext_width > name_width:
            ext_start = 0 if name_width < ext_width else name_width - ext_width
            canvas.set_string(x + ext_start, y, extension, style)
            canvas.set_string(x + max(ext_start - 1, 0), y, _ELLIPSIS, style)
        else:
            canvas.set_string(x + stem_width, y, extension, style)
    canvas.set_string(x + name_width, y, " ", style)
    canvas.set_string(x + name_width + 1, y, file_size_to_string(entry.size), style)


def _print_entry(
    canvas: Canvas, entry: ListEntry, style: frozenset[str], x: int, y: int, width: int
) -> None:
    name = entry.label
    name_width = _text_width(name)
    if entry.kind is EntryKind.DIRECTORY:
        canvas.set_stringn(x, y, name, width, style)
        if name_width > width:
            canvas.set_string(x + width - 1, y, _ELLIPSIS, style)
    elif entry.kind is EntryKind.SYMLINK:
        canvas.set_stringn(x, y, name, width, style)
        canvas.set_string(x + width - 4, y, "->", style)
        if name_width >= width - 4:
            canvas.set_string(x + width - 1, y, _ELLIPSIS, style)
    else:
        _print_file(canvas, entry, style, x, y, width)


def render_dirlist_detailed(canvas: Canvas, area: Rect, listing: ListView) -> None:
    """Draw the page of ``listing`` holding the cursor, with sizes for regular files."""
    if area.width < 4 or area.height < 1:
        return
    x, y = area.left, area.top
    if listing.index is None:
        canvas.set_stringn(x, y, "empty", area.width, _EMPTY_STYLE)
        return
    entry = listing.current()
    if entry is None:
        raise ValueError(f"listing cursor {listing.index} does not point at an entry")
    curr_index = listing.index
    width = area.width
    skip = curr_index // area.height * area.height

    for i, item in enumerate(listing.contents[skip : skip + area.height]):
        _print_entry(canvas, item, item.style, x + 1, y + i, width - 1)

    screen_index = curr_index % area.height
    style = entry.style | {_REVERSED}
    canvas.set_string(x, y + screen_index, " " * width, style)
    _print_entry(canvas, entry, style, x + 1, y + screen_index, width - 1)