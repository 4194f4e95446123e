from pathlib import Path

from tricolumn.topbar import topbar_text


def test_short_path_shown_in_full():
    assert topbar_text(Path("/tmp/x"), 80, "user", "host", None, False) == "user@host /tmp/x"


def test_long_path_shows_last_component():
    assert topbar_text(Path("/tmp/x"), 5, "user", "host", None, False) == "user@host …x"


def test_home_replaced_with_tilde():
    text = topbar_text("/home/user/docs", 80, "user", "host", "/home/user", True)
    assert text == "user@host ~/docs"


def test_tilde_disabled_keeps_home():
    text = topbar_text("/home/user/docs", 80, "user", "host", "/home/user", False)
    assert text == "user@host /home/user/docs"


def test_root_has_no_component_to_shorten_to():
    assert topbar_text("/", 0, "user", "host", None, False) == "user@host /"