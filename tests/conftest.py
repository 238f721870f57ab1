import pytest
from click.testing import CliRunner

from pathstyle import PosixStyle, WindowsStyle


@pytest.fixture
def posix_style():
    """A fresh POSIX style instance."""
    return PosixStyle()


@pytest.fixture
def nt_style():
    """A fresh Windows style instance."""
    return WindowsStyle()


@pytest.fixture
def runner():
    """CLI runner with plain output and a known default style."""
    return CliRunner(env={"NO_COLOR": "1", "FORCE_COLOR": None, "PATHSTYLE_STYLE": "posix"})
