"""
Shared style instances and lookup by name.

Styles are immutable, so one instance of each is enough for the whole
process.
"""

from typing import Dict, List

from .base import PathStyle
from .posix import PosixStyle
from .windows import WindowsStyle

posix = PosixStyle()
nt = WindowsStyle()
windows = nt

_STYLES: Dict[str, PathStyle] = {
    "posix": posix,
    "nt": nt,
    "windows": nt,
    "win32": nt,
}


def available_styles() -> List[str]:
    """Get the names accepted by get_style."""
    return list(_STYLES)


def get_style(name: str) -> PathStyle:
    """
    Get a path style by name.

    Args:
        name: Style name, case-insensitive ('posix', 'nt', 'windows' or 'win32')

    Returns:
        The shared PathStyle instance

    Raises:
        ValueError: If the name is not a known style
    """
    style = _STYLES.get(name.strip().lower())
    if style is None:
        raise ValueError(
            f"Unknown path style: {name}\n"
            f"Expected one of: {', '.join(available_styles())}"
        )
    return style
