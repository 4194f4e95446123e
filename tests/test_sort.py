import functools
import os
from dataclasses import dataclass
from pathlib import Path

import pytest

from tricolumn.sort import SortOption, SortType, natural_compare


@dataclass
class _Entry:
    path: Path
    name: str
    size: int = 0


def _entry(base: Path, name: str, size: int = 0) -> _Entry:
    return _Entry(base / name, name, size)


def _names(option, entries):
    ordered = sorted(entries, key=functools.cmp_to_key(option.compare))
    return [e.name for e in ordered]


@pytest.mark.parametrize("kind", list(SortType))
def test_parse_round_trips_str(kind):
    assert SortType.parse(str(kind)) is kind


def test_parse_unknown_is_none():
    assert SortType.parse("bogus") is None


def test_natural_orders_numbers_by_value():
    assert natural_compare("file2", "file10") < 0
    assert natural_compare("file10", "file2") > 0
    assert natural_compare("same", "same") == 0


def test_natural_prefix_sorts_first():
    assert natural_compare("abc", "abcd") < 0


def test_default_option_sorts_naturally(tmp_path):
    entries = [_entry(tmp_path, n) for n in ["file10", "file2", "file1"]]
    assert _names(SortOption(), entries) == ["file1", "file2", "file10"]


def test_lexical_differs_from_natural(tmp_path):
    entries = [_entry(tmp_path, n) for n in ["file2", "file10"]]
    option = SortOption(sort_method=SortType.LEXICAL)
    assert _names(option, entries) == ["file10", "file2"]


def test_case_sensitivity(tmp_path):
    entries = [_entry(tmp_path, "a"), _entry(tmp_path, "B")]
    insensitive = SortOption(sort_method=SortType.LEXICAL)
    sensitive = SortOption(sort_method=SortType.LEXICAL, case_sensitive=True)
    assert _names(insensitive, entries) == ["a", "B"]
    assert _names(sensitive, entries) == ["B", "a"]


def test_directories_first(tmp_path):
    (tmp_path / "zdir").mkdir()
    (tmp_path / "afile").write_text("x")
    entries = [_entry(tmp_path, "afile"), _entry(tmp_path, "zdir")]
    assert _names(SortOption(), entries) == ["zdir", "afile"]
    assert _names(SortOption(directories_first=False), entries) == ["afile", "zdir"]


def test_reverse_keeps_directories_first(tmp_path):
    (tmp_path / "dir").mkdir()
    entries = [_entry(tmp_path, n) for n in ["a", "b", "dir"]]
    assert _names(SortOption(reverse=True), entries) == ["dir", "b", "a"]


def test_reverse_negates_comparison(tmp_path):
    a, b = _entry(tmp_path, "a"), _entry(tmp_path, "b")
    forward = SortOption().compare(a, b)
    backward = SortOption(reverse=True).compare(a, b)
    assert forward < 0 < backward


def test_size_sort(tmp_path):
    entries = [_entry(tmp_path, "big", 500), _entry(tmp_path, "small", 5)]
    option = SortOption(sort_method=SortType.SIZE)
    assert _names(option, entries) == ["small", "big"]


def test_mtime_newest_first(tmp_path):
    old = tmp_path / "old"
    new = tmp_path / "new"
    old.write_text("x")
    new.write_text("y")
    os.utime(old, (1_000_000, 1_000_000))
    os.utime(new, (2_000_000, 2_000_000))
    option = SortOption(sort_method=SortType.MTIME)
    entries = [_entry(tmp_path, "old"), _entry(tmp_path, "new")]
    assert _names(option, entries) == ["new", "old"]


def test_mtime_missing_file_compares_less(tmp_path):
    option = SortOption(sort_method=SortType.MTIME)
    a, b = _entry(tmp_path, "missing1"), _entry(tmp_path, "missing2")
    assert option.compare(a, b) < 0
    assert option.compare(b, a) < 0