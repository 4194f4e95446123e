"""Ordering of directory entries."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class _SortableEntry(Protocol):
    @property
    def path(self) -> Path: ...

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...


class SortType(enum.Enum):
    """The key used to order a listing."""

    LEXICAL = "lexical"
    MTIME = "mtime"
    NATURAL = "natural"
    SIZE = "size"

    @staticmethod
    def parse(s: str) -> SortType | None:
        """Return the sort type named ``s``, or None if there is no such type."""
        try:
            return SortType(s)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _digit_run_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and _is_digit(text[end]):
        end += 1
    return end


def natural_compare(a: str, b: str) -> int:
    """Compare strings treating runs of digits as numbers: ``file2`` < ``file10``."""
    i = j = 0
    while i < len(a) and j < len(b):
        ca, cb = a[i], b[j]
        if _is_digit(ca) and _is_digit(cb):
            a_end = _digit_run_end(a, i)
            b_end = _digit_run_end(b, j)
            by_value = _cmp(int(a[i:a_end]), int(b[j:b_end]))
            if by_value:
                return by_value
            by_length = _cmp(a_end - i, b_end - j)
            if by_length:
                return by_length
            i, j = a_end, b_end
        else:
            if ca != cb:
                return _cmp(ca, cb)
            i += 1
            j += 1
    return _cmp(len(a) - i, len(b) - j)


def _mtime_compare(f1: _SortableEntry, f2: _SortableEntry) -> int:
    try:
        m1 = os.stat(f1.path).st_mtime_ns
        m2 = os.stat(f2.path).st_mtime_ns
    except OSError:
        return -1
    return -1 if m1 >= m2 else 1


@dataclass
class SortOption:
    """How entries in a listing are ordered."""

    directories_first: bool = True
    case_sensitive: bool = False
    reverse: bool = False
    sort_method: SortType = SortType.NATURAL

    def compare(self, f1: _SortableEntry, f2: _SortableEntry) -> int:
        """Return a negative, zero or positive number as ``f1`` sorts before, with or after ``f2``."""
        if self.directories_first:
            f1_dir = Path(f1.path).is_dir()
            f2_dir = Path(f2.path).is_dir()
            if f1_dir and not f2_dir:
                return -1
            if f2_dir and not f1_dir:
                return 1

        method = self.sort_method
        if method in (SortType.LEXICAL, SortType.NATURAL):
            n1, n2 = f1.name, f2.name
            if not self.case_sensitive:
                n1, n2 = n1.lower(), n2.lower()
            res = _cmp(n1, n2) if method is SortType.LEXICAL else natural_compare(n1, n2)
        elif method is SortType.MTIME:
            res = _mtime_compare(f1, f2)
        else:
            res = _cmp(f1.size, f2.size)

        return -res if self.reverse else res