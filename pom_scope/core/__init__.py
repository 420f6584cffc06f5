"""Descriptor parsing and cross-file property resolution for PomScope."""

from .models import ExtractConfig, MavenDependency, MavenProperty, PomFile, SkipReason
from .extract import extract_package, parse_pom
from .resolver import apply_props, clean_result, resolve_parents, walk_chain

__all__ = [
    "ExtractConfig",
    "MavenDependency",
    "MavenProperty",
    "PomFile",
    "SkipReason",
    "extract_package",
    "parse_pom",
    "apply_props",
    "resolve_parents",
    "clean_result",
    "walk_chain",
]
