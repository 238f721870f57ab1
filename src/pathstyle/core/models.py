"""
Configuration for pathstyle.

Settings come from the environment, with a .env file loaded first so a
project can pin its defaults.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .base import PathStyle
from .factory import get_style

# Load environment variables from .env file
load_dotenv()


@dataclass
class Config:
    """Configuration settings for pathstyle."""

    style: str = field(default_factory=lambda: os.getenv('PATHSTYLE_STYLE', 'posix'))
    theme: str = field(default_factory=lambda: os.getenv('PATHSTYLE_THEME', 'manhattan'))
    debug: bool = False  # Verbose logging on stderr

    def path_style(self) -> PathStyle:
        """Resolve the configured style name to a PathStyle instance."""
        return get_style(self.style)
