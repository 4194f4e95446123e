"""Display settings for the three-column view."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field

from tricolumn.sort import SortOption


@dataclass(frozen=True)
class Ratio:
    """A column's share of the available width."""

    numerator: int
    denominator: int

    def __float__(self) -> float:
        return self.numerator / self.denominator if self.denominator else 0.0


def default_column_ratio() -> tuple[int, int, int]:
    """The default widths of the parent, current and preview columns."""
    return (1, 3, 4)


def no_filter(entry: object) -> bool:
    """Accept every entry, failed reads included."""
    return isinstance(entry, object)


def filter_hidden(entry: object) -> bool:
    """Reject hidden entries, failed reads and names that are not valid text."""
    if isinstance(entry, BaseException):
        return False
    name = os.fsdecode(getattr(entry, "name"))
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return not name.startswith(".")


@dataclass
class DisplayOption:
    """User-facing display settings."""

    collapse_preview: bool = True
    column_ratio: tuple[int, int, int] = field(default_factory=default_column_ratio)
    show_borders: bool = True
    show_hidden: bool = False
    show_icons: bool = False
    show_preview: bool = True
    sort_options: SortOption = field(default_factory=SortOption)
    tilde_in_titlebar: bool = True

    @property
    def default_layout(self) -> tuple[Ratio, Ratio, Ratio]:
        """Column widths when a preview is shown."""
        total = sum(self.column_ratio)
        parent, current, preview = self.column_ratio
        return (Ratio(parent, total), Ratio(current, total), Ratio(preview, total))

    @property
    def no_preview_layout(self) -> tuple[Ratio, Ratio, Ratio]:
        """Column widths when the preview column is collapsed into the current one."""
        total = sum(self.column_ratio)
        parent, current, preview = self.column_ratio
        return (Ratio(parent, total), Ratio(current + preview, total), Ratio(0, total))

    def filter_func(self) -> Callable[[object], bool]:
        """The entry filter matching the hidden-file setting."""
        return no_filter if self.show_hidden else filter_hidden