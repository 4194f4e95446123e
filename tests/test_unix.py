import stat

import pytest

from tricolumn.unix import is_executable, mode_to_string, set_mode


@pytest.mark.parametrize("mode", [0o100, 0o010, 0o001, 0o755])
def test_executable_bits(mode):
    assert is_executable(mode) is True


@pytest.mark.parametrize("mode", [0o644, 0o600, 0o000])
def test_not_executable(mode):
    assert is_executable(mode) is False


def test_regular_file_string():
    assert mode_to_string(stat.S_IFREG | 0o644) == "-rw-r--r--"


def test_directory_string():
    assert mode_to_string(stat.S_IFDIR | 0o755) == "drwxr-xr-x"


@pytest.mark.parametrize(
    "kind,char",
    [(stat.S_IFLNK, "l"), (stat.S_IFSOCK, "s"), (stat.S_IFBLK, "b"), (stat.S_IFCHR, "c"), (stat.S_IFIFO, "f")],
)
def test_type_characters(kind, char):
    result = mode_to_string(kind | 0o777)
    assert result[0] == char
    assert result[1:] == "rwxrwxrwx"


def test_unknown_type_has_only_permissions():
    assert len(mode_to_string(0o644)) == 9


def test_set_mode(tmp_path):
    target = tmp_path / "f"
    target.write_text("x")
    assert set_mode(target, 0o600) is True
    assert stat.S_IMODE(target.stat().st_mode) == 0o600
    assert set_mode(target, 0o640) is True
    assert stat.S_IMODE(target.stat().st_mode) == 0o640


def test_set_mode_missing(tmp_path):
    assert set_mode(tmp_path / "missing", 0o600) is False