"""Content source interface for descriptor retrieval."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ContentSource(Protocol):
    """Anything that can return the text of a file by path."""

    async def get_file_content(self, path: str) -> Optional[str]:
        """Return the file's text, or None if it is missing or unreadable."""
        ...
