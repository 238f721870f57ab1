"""Utility modules for pathstyle."""

from .console import ConsoleManager
from .console_base import THEMES

__all__ = ["ConsoleManager", "THEMES"]
