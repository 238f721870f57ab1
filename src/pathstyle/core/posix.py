"""POSIX path style: forward slashes, a single '/' root."""

from dataclasses import dataclass

from .base import PathStyle


@dataclass(frozen=True)
class PosixStyle(PathStyle):
    """Forward-slash paths rooted at '/'."""

    root: str = "/"
    sep: str = "/"

    def is_absolute(self, path: str) -> bool:
        """A path is absolute when it starts with the root."""
        return path.startswith(self.root)

    def make_long(self, path: str) -> str:
        """POSIX has no long-path form; the path is returned unchanged."""
        return path
