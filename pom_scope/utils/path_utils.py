"""Path utilities for finding Maven descriptors and filtering paths."""

import fnmatch
from pathlib import Path
from typing import Iterator, List, Optional


DEFAULT_IGNORE_PATTERNS = [
    "**/.git/**",
    "**/.svn/**",
    "**/.idea/**",
    "**/target/**",
    "**/build/**",
    "**/node_modules/**",
    "**/src/test/resources/**",
]


def is_pom_file(file_path: Path) -> bool:
    """Check whether a file name looks like a Maven descriptor.

    Args:
        file_path: Path to check

    Returns:
        True for ``pom.xml`` and ``*.pom.xml``
    """
    name = file_path.name
    return name == "pom.xml" or name.endswith(".pom.xml")


class PathFilter:
    """Filters paths based on glob patterns."""

    def __init__(self, ignore_patterns: Optional[List[str]] = None) -> None:
        """Initialize path filter.

        Args:
            ignore_patterns: Additional glob patterns to ignore
        """
        self.ignore_patterns = [*DEFAULT_IGNORE_PATTERNS, *(ignore_patterns or [])]

    def is_ignored(self, path: Path) -> bool:
        """Check if a path should be ignored.

        Args:
            path: Path to check, relative to the search root

        Returns:
            True if path should be ignored
        """
        # Anchor relative paths so "**/x/**" also matches top-level directories
        path_str = "/" + path.as_posix().lstrip("/")

        for pattern in self.ignore_patterns:
            if fnmatch.fnmatch(path_str, pattern):
                return True

        return False

    def filter_paths(self, paths: Iterator[Path]) -> Iterator[Path]:
        """Filter paths based on ignore patterns.

        Args:
            paths: Iterator of paths to filter

        Yields:
            Paths that should not be ignored
        """
        for path in paths:
            if not self.is_ignored(path):
                yield path


def find_pom_files(root_path: Path, ignore_patterns: Optional[List[str]] = None) -> List[str]:
    """Find all Maven descriptors in a directory tree.

    Args:
        root_path: Root directory to search
        ignore_patterns: Additional ignore patterns

    Returns:
        Sorted POSIX paths relative to ``root_path``

    Raises:
        ValueError: If the root path does not exist
    """
    if not root_path.exists():
        raise ValueError(f"Root path does not exist: {root_path}")

    path_filter = PathFilter(ignore_patterns)
    candidates = (
        file_path.relative_to(root_path)
        for file_path in root_path.rglob("*.xml")
        if file_path.is_file() and is_pom_file(file_path)
    )
    return sorted(path.as_posix() for path in path_filter.filter_paths(candidates))
