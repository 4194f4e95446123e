import pytest

from tricolumn.search import SearchPattern


def test_star_glob():
    pattern = SearchPattern.glob("*.txt")
    assert pattern.matches("notes.txt")
    assert not pattern.matches("notes.rs")
    assert not pattern.matches("notes.txt.bak")


def test_question_mark_matches_one_char():
    pattern = SearchPattern.glob("file?")
    assert pattern.matches("file1")
    assert not pattern.matches("file10")


def test_character_classes():
    assert SearchPattern.glob("[abc]x").matches("bx")
    assert not SearchPattern.glob("[abc]x").matches("dx")
    assert SearchPattern.glob("[!abc]x").matches("dx")
    assert not SearchPattern.glob("[!abc]x").matches("ax")


def test_alternation():
    pattern = SearchPattern.glob("*.{jpg,png}")
    assert pattern.matches("a.jpg")
    assert pattern.matches("b.png")
    assert not pattern.matches("c.gif")


def test_escaped_star_is_literal():
    pattern = SearchPattern.glob(r"a\*b")
    assert pattern.matches("a*b")
    assert not pattern.matches("axb")


def test_regex_metacharacters_are_literal():
    assert SearchPattern.glob("a+b.(c)").matches("a+b.(c)")
    assert not SearchPattern.glob("a+b.(c)").matches("aab.(c)")


@pytest.mark.parametrize("bad", ["[abc", "{a,b", "abc\\"])
def test_malformed_globs_raise(bad):
    with pytest.raises(ValueError):
        SearchPattern.glob(bad)


def test_string_pattern_is_substring():
    pattern = SearchPattern("port")
    assert pattern.matches("report.txt")
    assert not pattern.matches("README")
    assert not pattern.is_glob