"""
Shared path-syntax algorithm for all path styles.

A style is nothing more than a ``root``/``sep`` pair plus a couple of
capabilities (absolute-path detection and long-path mangling) that each
concrete style supplies. Every operation here is a pure string function:
nothing touches the filesystem.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Set up module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathStyle(ABC):
    """
    Base class for a path syntax.

    Instances are immutable and safe to share between threads.
    """

    root: str
    sep: str

    def __post_init__(self):
        """Validate the root/separator pair."""
        if not isinstance(self.sep, str) or len(self.sep) != 1:
            raise ValueError(f"Separator must be a single character, got {self.sep!r}")
        if self.root != self.sep and self.sep in self.root:
            raise ValueError(
                f"Root {self.root!r} must not contain separator {self.sep!r}"
            )

    @abstractmethod
    def is_absolute(self, path: str) -> bool:
        """Check whether a path is absolute in this style."""
        pass

    @abstractmethod
    def make_long(self, path: str) -> str:
        """Convert a path to the style's long-path form, if it has one."""
        pass

    def get_root(self, path: Optional[str] = None) -> str:
        """Get the root of a path (the configured root by default)."""
        return self.root

    def get_sep(self) -> str:
        """Get the segment separator."""
        return self.sep

    @property
    def _escaped_sep(self) -> str:
        return re.escape(self.sep)

    def _split_path(self, path: str) -> Tuple[str, str, str]:
        """
        Split a path into root, directory and basename.

        No normalization is performed. The directory keeps its trailing
        separator, and the basename is empty when the path ends in one.

        Args:
            path: Path to split

        Returns:
            Tuple of (root, dir, basename); root is empty for relative paths
        """
        start = re.search(f"[^{self._escaped_sep}]*\\Z", path).start()
        if self.is_absolute(path):
            root = self.get_root(path)
            directory = path[len(root):start]
        else:
            root = ""
            directory = path[:start]
        return root, directory, path[start:]

    def _normalize_parts(self, parts: List[str]) -> List[str]:
        """
        Resolve '.' and '..' segments.

        A '..' cancels the closest preceding segment that is still kept.
        When nothing is left to cancel it is dropped, so the result never
        starts with '..'.
        """
        kept: List[str] = []
        dropped = 0
        for part in parts:
            if part == ".":
                continue
            if part == "..":
                if kept:
                    kept.pop()
                else:
                    dropped += 1
                continue
            kept.append(part)
        if dropped:
            logger.debug(f"Dropped {dropped} '..' segment(s) with no parent to cancel")
        return kept

    def normalize(self, path: str) -> str:
        """
        Normalize a path by collapsing separators, '.' and '..' segments.

        Absoluteness is decided by a leading separator rather than by
        ``is_absolute``, so a drive-letter root is kept as an ordinary
        first segment. A trailing separator survives normalization.

        Args:
            path: Path to normalize

        Returns:
            Normalized path; '.' for an empty relative result and the
            separator alone for an empty absolute one
        """
        is_absolute_path = path[:1] == self.sep
        trailing_sep = path[-1:] == self.sep

        parts = [part for part in path.split(self.sep) if part]
        normalized = self.sep.join(self._normalize_parts(parts))

        if not normalized:
            return self.sep if is_absolute_path else "."
        if trailing_sep:
            normalized += self.sep
        if is_absolute_path:
            normalized = self.sep + normalized
        return normalized

    def join(self, *parts: str) -> str:
        """
        Join path parts with exactly one separator between neighbours.

        Leading separators are stripped from all but the first part and
        trailing separators from all but the last. Empty parts still take
        their slot, and the result is not normalized.
        """
        last = len(parts) - 1
        stripped = []
        for i, part in enumerate(parts):
            if i > 0:
                part = part.lstrip(self.sep)
            if i < last:
                part = part.rstrip(self.sep)
            stripped.append(part)
        return self.sep.join(stripped)

    def resolve(self, root: str, path: str) -> str:
        """Normalize an absolute path, or join a relative one onto root."""
        if self.is_absolute(path):
            return self.normalize(path)
        return self.join(root, path)

    def dirname(self, path: str) -> str:
        """
        Get the directory portion of a path.

        Args:
            path: Path to inspect

        Returns:
            Directory without its trailing separator, the root alone for a
            top-level entry, or '.' when there is no directory
        """
        if path[-1:] == self.sep:
            path = path[:-1]

        root, directory, _ = self._split_path(path)

        if directory:
            return root + directory[:-1]
        if root:
            return root
        return "."

    def basename(self, path: str, expected_ext: Optional[str] = None) -> str:
        """
        Get the final segment of a path.

        Args:
            path: Path to inspect
            expected_ext: Extension to strip when the basename ends with it
                (matched literally)

        Returns:
            Last run of non-separator characters, or '' if there is none
        """
        match = re.search(f"[^{self._escaped_sep}]+\\Z", path)
        base = match.group(0) if match else ""
        if expected_ext and base.endswith(expected_ext):
            base = base[:-len(expected_ext)]
        return base

    def extname(self, path: str) -> str:
        """
        Get the extension: the last '.' followed by non-dot characters.

        The match runs over the whole string, not only the last segment,
        so 'dir.name/file' yields '.name/file'.
        """
        match = re.search(r"\.[^.]+\Z", path)
        return match.group(0) if match else ""
