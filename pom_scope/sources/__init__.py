"""Descriptor content sources for PomScope."""

from .base import ContentSource
from .local import LocalFileSource
from .http import HttpFileSource

__all__ = [
    "ContentSource",
    "LocalFileSource",
    "HttpFileSource",
]
