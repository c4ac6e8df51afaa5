import os

import pytest

from ustarx import FeatureFlags
from ustarx.errors import TarPathOutsideRootError, TarUnsafePathError
from ustarx.paths import check_containment, is_absolute, validate_path

ALLOW_ABSOLUTE = FeatureFlags(allow_absolute_paths=True)


@pytest.mark.parametrize(
    "path",
    ["f.txt", "d/", "d/f.txt", "a/./b", "a//b", "..foo/bar", "a/..b", "a/b../c", "./x"],
)
def test_validate_path_ok(path):
    validate_path(path)


def test_validate_path_empty():
    with pytest.raises(TarUnsafePathError, match="empty"):
        validate_path("")


def test_validate_path_nul():
    with pytest.raises(TarUnsafePathError):
        validate_path("a\0b")


@pytest.mark.parametrize("path", ["/etc/passwd", "/", "//server/share"])
def test_validate_path_absolute(path):
    with pytest.raises(TarUnsafePathError, match="absolute"):
        validate_path(path)
    validate_path(path, ALLOW_ABSOLUTE)


@pytest.mark.parametrize(
    "path",
    ["..", "../x", "a/../../etc/passwd", "a/..", "a/../", "a/..//b", "a/b/../c"],
)
@pytest.mark.parametrize("flags", [FeatureFlags(), ALLOW_ABSOLUTE])
def test_validate_path_parent(path, flags):
    with pytest.raises(TarPathOutsideRootError):
        validate_path(path, flags)


def test_is_absolute():
    assert is_absolute("/x")
    assert not is_absolute("x/y")
    assert not is_absolute("")


def test_check_containment(tmp_path):
    root = str(tmp_path)
    assert check_containment(tmp_path, "d/f.txt") == os.path.join(root, "d", "f.txt")
    assert check_containment(tmp_path, "d/") == os.path.join(root, "d")
    assert check_containment(tmp_path, "a/./b//c") == os.path.join(root, "a", "b", "c")


def test_check_containment_root_itself(tmp_path):
    assert check_containment(tmp_path, ".") == str(tmp_path)
    assert check_containment(tmp_path, "a/..") == str(tmp_path)


@pytest.mark.parametrize("path", ["../x", "a/../../x", "/etc/passwd", "../out2/x"])
def test_check_containment_escape(tmp_path, path):
    dest = tmp_path / "out"
    with pytest.raises(TarPathOutsideRootError):
        check_containment(dest, path)


def test_check_containment_absolute_inside(tmp_path):
    inside = str(tmp_path / "x" / "y")
    assert check_containment(tmp_path, inside) == inside


def test_check_containment_relative_root(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()
    assert check_containment(".", "d/f.txt") == os.path.join(cwd, "d", "f.txt")
    assert check_containment("out", "f") == os.path.join(cwd, "out", "f")
    with pytest.raises(TarPathOutsideRootError):
        check_containment("out", "../f")
