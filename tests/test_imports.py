"""Test that all modules can be imported successfully."""


def test_core_imports():
    """Test core module imports."""
    from pathstyle.core import PathStyle, PosixStyle, WindowsStyle, Config, get_style

    assert issubclass(PosixStyle, PathStyle)
    assert issubclass(WindowsStyle, PathStyle)
    assert Config().path_style() is get_style(Config().style)


def test_package_instances():
    """The package exposes ready-made style instances."""
    import pathstyle

    assert pathstyle.posix.get_sep() == "/"
    assert pathstyle.nt.get_sep() == "\\"
    assert pathstyle.windows is pathstyle.nt


def test_utils_imports():
    """Test utils module imports."""
    from pathstyle.utils import ConsoleManager, THEMES

    assert "manhattan" in THEMES
    assert hasattr(ConsoleManager, "print_result")
