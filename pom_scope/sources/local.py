"""Local filesystem content source."""

import asyncio
from pathlib import Path
from typing import Optional

from ..utils.logging import get_logger


class LocalFileSource:
    """Reads descriptor files relative to a project root on disk."""

    def __init__(self, root: Path, encoding: str = "utf-8") -> None:
        """Initialize the local source.

        Args:
            root: Project root that file identifiers are relative to
            encoding: Text encoding of descriptor files
        """
        self.root = Path(root)
        self.encoding = encoding
        self.logger = get_logger("LocalFileSource")

    async def get_file_content(self, path: str) -> Optional[str]:
        """Read a file below the project root.

        Args:
            path: POSIX path relative to the root

        Returns:
            File text, or None if the file is missing or unreadable
        """
        return await asyncio.to_thread(self._read, self.root / path)

    def _read(self, file_path: Path) -> Optional[str]:
        if not file_path.is_file():
            return None

        try:
            return file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Failed to read {file_path}: {e}")
            return None
