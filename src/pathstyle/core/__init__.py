"""Core components for pathstyle."""

from .base import PathStyle
from .posix import PosixStyle
from .windows import WindowsStyle, derelative
from .factory import posix, nt, windows, get_style, available_styles
from .models import Config

__all__ = [
    "PathStyle",
    "PosixStyle",
    "WindowsStyle",
    "derelative",
    "posix",
    "nt",
    "windows",
    "get_style",
    "available_styles",
    "Config",
]
