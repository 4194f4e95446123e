import os

import pytest

from tricolumn.line_editor import (
    CompletionTracker,
    LineBuffer,
    complete_path,
    cursor_position,
)


def test_insert_and_cursor():
    buf = LineBuffer()
    for ch in "abc":
        assert buf.insert(ch) is True
    assert str(buf) == "abc"
    assert buf.pos == 3


def test_insert_in_middle():
    buf = LineBuffer("ac", 1)
    buf.insert("b")
    assert (buf.text, buf.pos) == ("abc", 2)


def test_prefix_and_suffix_setup():
    prefix, suffix = "rename ", ".txt"
    buf = LineBuffer(prefix + suffix, len(prefix))
    buf.insert("x")
    assert buf.text == prefix + "x" + suffix


def test_backspace():
    buf = LineBuffer("ab", 2)
    assert buf.backspace() is True
    assert (buf.text, buf.pos) == ("a", 1)
    buf.move_home()
    assert buf.backspace() is False
    assert buf.text == "a"


def test_delete():
    buf = LineBuffer("ab", 0)
    assert buf.delete() == "a"
    assert buf.text == "b"
    buf.move_end()
    assert buf.delete() is None


def test_movement_bounds():
    buf = LineBuffer("ab", 0)
    assert buf.move_backward() is False
    assert buf.move_forward() is True
    assert buf.move_forward() is True
    assert buf.move_forward() is False
    assert buf.move_home() is True
    assert buf.pos == 0
    assert buf.move_end() is True
    assert buf.pos == len(buf.text)


def test_invalid_cursor_rejected():
    with pytest.raises(ValueError):
        LineBuffer("ab", 5)


def _make_tree(tmp_path):
    (tmp_path / "alpha.txt").write_text("x")
    (tmp_path / "alps").mkdir()
    (tmp_path / "beta").write_text("y")


def test_complete_path_lists_matches(tmp_path):
    _make_tree(tmp_path)
    line = str(tmp_path) + os.sep + "al"
    start, candidates = complete_path(line, len(line))
    assert start == 0
    displays = sorted(display for display, _ in candidates)
    assert displays == ["alpha.txt", "alps" + os.sep]
    replacements = {display: repl for display, repl in candidates}
    assert replacements["alps" + os.sep] == str(tmp_path) + os.sep + "alps" + os.sep


def test_complete_path_word_start_after_space(tmp_path):
    _make_tree(tmp_path)
    word = str(tmp_path) + os.sep + "be"
    line = "open " + word
    start, candidates = complete_path(line, len(line))
    assert start == len("open ")
    assert [display for display, _ in candidates] == ["beta"]


def test_complete_path_escaped_space(tmp_path):
    (tmp_path / "my file").write_text("z")
    line = str(tmp_path) + os.sep + "my\\ f"
    start, candidates = complete_path(line, len(line))
    assert start == 0
    assert candidates == [("my file", str(tmp_path) + os.sep + "my\\ file")]


def test_complete_path_missing_directory(tmp_path):
    line = str(tmp_path / "nope") + os.sep + "x"
    start, candidates = complete_path(line, len(line))
    assert candidates == []
    assert start == 0


def test_complete_path_bad_cursor():
    with pytest.raises(ValueError):
        complete_path("abc", 10)


def test_tracker_cycles_candidates(tmp_path):
    _make_tree(tmp_path)
    line = "cmd " + str(tmp_path) + os.sep + "al"
    buf = LineBuffer(line, len(line))
    tracker = CompletionTracker.start(buf)
    assert tracker.original == line
    assert tracker.advance(buf) is True
    assert buf.text == "cmd alpha.txt"
    assert buf.pos == len(buf.text)
    assert tracker.advance(buf) is True
    assert buf.text == "cmd alps" + os.sep
    assert tracker.advance(buf) is False
    assert buf.text == "cmd alps" + os.sep


def test_cursor_position_single_line():
    prompt, text = ":", "abc"
    x, y = cursor_position(prompt, text, len(text), 80, 24)
    assert y == 24 - 1
    assert x == len(prompt) + len(text)


def test_cursor_moves_with_pos():
    x_end, y_end = cursor_position(":", "abcd", 4, 80, 24)
    x_start, y_start = cursor_position(":", "abcd", 0, 80, 24)
    assert y_end == y_start
    assert x_end - x_start == 4


def test_cursor_position_zero_width():
    with pytest.raises(ValueError):
        cursor_position(":", "abc", 1, 0, 24)