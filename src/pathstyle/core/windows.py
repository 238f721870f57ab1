"""
Windows path style.

Drive-letter roots (``C:``), backslash separators, and conversion to the
``\\\\?\\`` long-path form used to get past the MAX_PATH limit.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .base import PathStyle

# Set up module logger
logger = logging.getLogger(__name__)

DRIVE_PATTERN = re.compile(r"[A-Za-z]:")
LONG_PATH_PREFIX = "\\\\?\\"
UNC_LONG_PATH_PREFIX = "\\\\?\\UNC\\"

_CURRENT_DIR = "\\.\\"
_PARENT_PAIR = re.compile(r"\\[^\\]+\\\.\.\\")
_DRIVE_PARENT = re.compile(r"^([A-Za-z]:\\)\.\.\\")
_TRAILING_CURRENT = re.compile(r"\\\.\Z")
_TRAILING_PARENT_PAIR = re.compile(r"\\[^\\]+\\\.\.\Z")
_TRAILING_DRIVE_PARENT = re.compile(r"^([A-Za-z]:\\)\.\.\Z")
_UNC_START = re.compile(r"\\\\[^?]")
_RELATIVE_SEGMENT = re.compile(r"(?:^|\\)\.\.?(?:\\|\Z)")


def derelative(path: str) -> str:
    """
    Strip '.' and '..' segments from a Windows path, syntactically.

    Long paths cannot contain relative segments. This is a best-effort
    cleanup for the common cases, not a full normalizer: unusual inputs
    may keep some '..' segments.

    Args:
        path: Backslash-separated path

    Returns:
        Path with '\\.\\' and '\\<segment>\\..\\' pairs removed
    """
    original = path

    while _CURRENT_DIR in path:
        path = path.replace(_CURRENT_DIR, "\\", 1)
    # A '..' segment can itself be eaten as the left half of a pair
    while _PARENT_PAIR.search(path):
        path = _PARENT_PAIR.sub(r"\\", path, count=1)
    path = _DRIVE_PARENT.sub(r"\1", path, count=1)

    # Trailing forms
    path = _TRAILING_CURRENT.sub("", path, count=1)
    path = _TRAILING_PARENT_PAIR.sub("", path, count=1)
    path = _TRAILING_DRIVE_PARENT.sub(r"\1", path, count=1)

    if _RELATIVE_SEGMENT.search(path):
        logger.debug(f"Relative segments remain after derelative: {original!r} -> {path!r}")
    return path


@dataclass(frozen=True)
class WindowsStyle(PathStyle):
    """Backslash paths with drive-letter roots."""

    root: str = "c:"
    sep: str = "\\"

    def get_root(self, path: Optional[str] = None) -> str:
        """
        Get the drive prefix of a path.

        Args:
            path: Path to inspect; without one the configured root is returned

        Returns:
            '<letter>:' when the path starts with a drive, otherwise ''
        """
        if path is None:
            return super().get_root(path)
        match = DRIVE_PATTERN.match(path)
        return match.group(0) if match else ""

    def is_absolute(self, path: str) -> bool:
        """A path is absolute when it starts with a drive letter."""
        return bool(path) and self.get_root(path) != ""

    def make_long(self, path: str) -> str:
        """
        Convert a path to its long-path form.

        Drive paths get the '\\\\?\\' prefix and UNC paths ('\\\\server...')
        get '\\\\?\\UNC\\'. Both have their relative segments removed first.
        Anything else, including paths already in long form, is returned as is.
        """
        if self.is_absolute(path):
            return LONG_PATH_PREFIX + derelative(path)
        if _UNC_START.match(path):
            return UNC_LONG_PATH_PREFIX + derelative(path)
        return path
