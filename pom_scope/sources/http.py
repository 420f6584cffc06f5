"""HTTP content source for descriptors served by a repository host."""

import asyncio
import ssl
from typing import Optional

import aiohttp
import certifi
from aiohttp import ClientTimeout

from ..utils.logging import get_logger


class HttpFileSource:
    """Async source fetching raw descriptor files below a base URL."""

    TIMEOUT = ClientTimeout(total=30)

    def __init__(
        self,
        base_url: str,
        session: Optional[aiohttp.ClientSession] = None
    ) -> None:
        """Initialize the HTTP source.

        Args:
            base_url: URL that file paths are appended to
            session: Optional aiohttp session for connection reuse
        """
        if not base_url:
            raise ValueError("Base URL cannot be empty")

        self.base_url = base_url.rstrip("/")
        self.logger = get_logger("HttpFileSource")
        self._session = session
        self._owns_session = session is None
        self._ssl_context = ssl.create_default_context(cafile=certifi.where())

    async def __aenter__(self) -> "HttpFileSource":
        """Async context manager entry."""
        self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session if this source created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def url_for(self, path: str) -> str:
        """Build the URL of a file path."""
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_file_content(self, path: str) -> Optional[str]:
        """Fetch a descriptor file.

        Args:
            path: File path relative to the base URL

        Returns:
            File text, or None on a non-200 response, client error or undecodable body
        """
        url = self.url_for(path)
        session = self._get_session()

        try:
            async with session.get(url) as response:
                if response.status != 200:
                    self.logger.warning(f"GET {url} returned {response.status}")
                    return None
                return await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            self.logger.warning(f"GET {url} failed: {e}")
            return None

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session.

        Returns:
            aiohttp ClientSession
        """
        if not self._session or self._session.closed:
            connector = aiohttp.TCPConnector(ssl=self._ssl_context)
            self._session = aiohttp.ClientSession(
                timeout=self.TIMEOUT,
                connector=connector
            )
            self._owns_session = True
        return self._session
