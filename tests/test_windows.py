"""Tests for the Windows path style."""

import pytest
from pathstyle import derelative


class TestRootDetection:
    """Drive-letter roots and absolute-path detection."""

    @pytest.mark.parametrize("path,expected", [
        ("C:\\foo", True),
        ("c:", True),
        ("z:relative", True),
        ("foo\\bar", False),
        ("\\\\server\\share", False),
        ("\\foo", False),
        ("1:\\foo", False),
        ("", False),
    ])
    def test_is_absolute(self, nt_style, path, expected):
        assert nt_style.is_absolute(path) is expected

    def test_is_absolute_without_path(self, nt_style):
        assert nt_style.is_absolute(None) is False

    def test_get_root_from_path(self, nt_style):
        assert nt_style.get_root("C:\\foo") == "C:"
        assert nt_style.get_root("d:") == "d:"

    def test_get_root_without_drive(self, nt_style):
        assert nt_style.get_root("foo\\bar") == ""
        assert nt_style.get_root("\\\\server\\share") == ""

    def test_get_root_default(self, nt_style):
        """Without a path the configured placeholder root is returned."""
        assert nt_style.get_root() == "c:"

    def test_get_sep(self, nt_style):
        assert nt_style.get_sep() == "\\"


class TestPathOperations:
    """The shared algorithm with backslash separators."""

    @pytest.mark.parametrize("path,expected", [
        ("C:\\a\\..\\b", "C:\\b"),
        ("\\a\\.\\b\\", "\\a\\b\\"),
        ("a\\..\\..\\b", "b"),
        ("", "."),
        ("\\", "\\"),
        ("a/b", "a/b"),
    ])
    def test_normalize(self, nt_style, path, expected):
        assert nt_style.normalize(path) == expected

    def test_join(self, nt_style):
        assert nt_style.join("C:\\", "\\a\\", "b") == "C:\\a\\b"

    def test_resolve_absolute(self, nt_style):
        assert nt_style.resolve("C:\\x", "D:\\y\\..\\z") == "D:\\z"

    def test_resolve_relative(self, nt_style):
        assert nt_style.resolve("C:\\x", "y") == "C:\\x\\y"

    def test_resolve_rooted_without_drive_is_joined(self, nt_style):
        assert nt_style.resolve("C:\\x", "\\y") == "C:\\x\\y"

    def test_split_path(self, nt_style):
        assert nt_style._split_path("C:\\a\\b") == ("C:", "\\a\\", "b")
        assert nt_style._split_path("a\\b") == ("", "a\\", "b")

    @pytest.mark.parametrize("path,expected", [
        ("C:\\a\\b", "C:\\a"),
        ("C:\\a", "C:"),
        ("C:", "C:"),
        ("a\\b", "a"),
        ("\\\\server\\share", "\\\\server"),
        ("file.txt", "."),
    ])
    def test_dirname(self, nt_style, path, expected):
        assert nt_style.dirname(path) == expected

    def test_basename(self, nt_style):
        assert nt_style.basename("C:\\a\\b.txt") == "b.txt"
        assert nt_style.basename("C:\\a\\b.txt", ".txt") == "b"
        assert nt_style.basename("C:\\a\\") == ""

    def test_extname(self, nt_style):
        assert nt_style.extname("C:\\a\\b.tar.gz") == ".gz"


class TestDerelative:
    """Syntactic removal of relative segments."""

    @pytest.mark.parametrize("path,expected", [
        ("C:\\a\\.\\b", "C:\\a\\b"),
        ("C:\\a\\.\\.\\b", "C:\\a\\b"),
        ("C:\\a\\..\\b", "C:\\b"),
        ("C:\\a\\b\\..\\..\\c", "C:\\c"),
        ("C:\\..\\a", "C:\\a"),
        ("C:\\a\\.", "C:\\a"),
        ("C:\\a\\b\\..", "C:\\a"),
        ("C:\\..", "C:\\"),
        ("C:\\a\\b", "C:\\a\\b"),
    ])
    def test_derelative(self, path, expected):
        assert derelative(path) == expected

    def test_leading_parent_is_left_alone(self, caplog):
        """Segments with no backslash before them are out of reach."""
        with caplog.at_level("DEBUG", logger="pathstyle.core.windows"):
            assert derelative("..\\a") == "..\\a"
        assert "Relative segments remain" in caplog.text


class TestMakeLong:
    """Conversion to the \\\\?\\ long-path form."""

    def test_drive_path(self, nt_style):
        assert nt_style.make_long("C:\\a\\..\\b") == "\\\\?\\C:\\b"

    def test_drive_path_with_current_dir(self, nt_style):
        assert nt_style.make_long("C:\\a\\.\\b") == "\\\\?\\C:\\a\\b"

    def test_unc_path(self, nt_style):
        result = nt_style.make_long("\\\\server\\share\\x\\..\\y")
        assert result == "\\\\?\\UNC\\" + "\\\\server\\share\\y"

    def test_already_long_path_is_unchanged(self, nt_style):
        assert nt_style.make_long("\\\\?\\C:\\a") == "\\\\?\\C:\\a"

    def test_relative_path_is_unchanged(self, nt_style):
        assert nt_style.make_long("a\\..\\b") == "a\\..\\b"

    def test_posix_make_long_is_identity(self, posix_style):
        assert posix_style.make_long("/a/../b") == "/a/../b"
