"""Base console functionality: themes and Rich/plain output selection.

Rich is used when writing to a colour-capable terminal; otherwise output
is plain text so results can be piped into other tools unchanged.
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Optional

from rich.console import Console
from rich.theme import Theme


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    header: str
    path: str
    accent: str


THEMES = {
    'manhattan': ThemeColors(
        header='bold bright_cyan',
        path='white',
        accent='cyan',
    ),
    'green': ThemeColors(
        header='bold green',
        path='bright_green',
        accent='bright_green',
    ),
    'matrix': ThemeColors(
        header='bold bright_green',
        path='green',
        accent='bright_green',
    ),
    'sunset': ThemeColors(
        header='bold orange1',
        path='wheat1',
        accent='dark_orange3',
    ),
}


class ConsoleBase:
    """Base class for console management with theme support and plain fallback."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """Initialize console base.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Force plain output even on a colour terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout

        self.use_rich = not force_plain and self._should_use_rich_terminal()
        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            force_terminal=self.use_rich,
            no_color=not self.use_rich,
            highlight=False,
        )

    def _should_use_rich_terminal(self) -> bool:
        """Decide whether styled output makes sense for this stream."""
        if os.environ.get('NO_COLOR'):
            return False
        if os.environ.get('FORCE_COLOR'):
            return True
        return hasattr(self.file, 'isatty') and self.file.isatty()

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'header': colors.header,
            'path': colors.path,
            'accent': colors.accent,
        })
