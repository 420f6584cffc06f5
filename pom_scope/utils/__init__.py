"""Utility functions and helpers for PomScope."""

from .logging import setup_logging, get_logger
from .path_utils import find_pom_files

__all__ = [
    "setup_logging",
    "get_logger",
    "find_pom_files",
]
