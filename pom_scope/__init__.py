"""PomScope - extract Maven dependencies and resolve their versions across multi-module projects."""

__version__ = "0.1.0"

from .core.extract import extract_package, parse_pom
from .core.models import ExtractConfig, MavenDependency, MavenProperty, PomFile, SkipReason
from .core.pipeline import extract_all_package_files, extract_from_contents
from .core.resolver import clean_result, resolve_parents

__all__ = [
    "ExtractConfig",
    "MavenDependency",
    "MavenProperty",
    "PomFile",
    "SkipReason",
    "extract_package",
    "parse_pom",
    "resolve_parents",
    "clean_result",
    "extract_all_package_files",
    "extract_from_contents",
]
