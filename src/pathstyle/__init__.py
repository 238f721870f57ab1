"""Syntactic path manipulation for POSIX and Windows path strings."""

from .core import (
    PathStyle,
    PosixStyle,
    WindowsStyle,
    derelative,
    posix,
    nt,
    windows,
    get_style,
    available_styles,
    Config,
)

__version__ = "0.1.0"

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
