"""
Image downloader for saving page images locally.

Uses aiohttp to stream each image to disk, one request at a time.
"""

import asyncio
import os
from typing import Optional, Set

import aiohttp
from aiohttp import ClientTimeout, ClientError

from ..utils.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, DOWNLOAD_CHUNK_SIZE
from ..utils.log import get_logger
from ..utils.paths import ensure_parent_dir


class AssetDownloader:
    """
    Downloads remote images to local files.

    Every failure is isolated to the image it concerns: it is logged,
    recorded in failed_assets, and reported as False.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the image downloader.

        Args:
            timeout: Request timeout in seconds
            user_agent: User agent string for requests
        """
        self.timeout = ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self.logger = get_logger("downloader")

        self._session: Optional[aiohttp.ClientSession] = None

        # Track failed images
        self._failed: Set[str] = set()

    @property
    def session(self) -> aiohttp.ClientSession:
        """Shared HTTP session, opened on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent}
            )
        return self._session

    @property
    def failed_assets(self) -> Set[str]:
        """Get set of URLs that failed to download."""
        return self._failed.copy()

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def fetch(self, url: str, local_path: str) -> bool:
        """
        Stream a remote resource to a local file.

        Args:
            url: Remote URL to download
            local_path: Destination file path

        Returns:
            True if the file was written, False otherwise
        """
        try:
            ensure_parent_dir(local_path)

            async with self.session.get(url, allow_redirects=True) as response:
                if response.status < 200 or response.status >= 300:
                    self.logger.warning(f"HTTP {response.status} for image: {url}")
                    self._failed.add(url)
                    return False

                with open(local_path, 'wb') as f:
                    async for chunk in response.content.iter_chunked(DOWNLOAD_CHUNK_SIZE):
                        f.write(chunk)

            self.logger.debug(f"Downloaded: {url} -> {local_path}")
            return True

        except ClientError as e:
            self.logger.warning(f"Failed to download image {url}: {e}")
        except asyncio.TimeoutError:
            self.logger.warning(f"Timeout downloading image {url}")
        except (OSError, ValueError) as e:
            self.logger.warning(f"Error saving image {url}: {e}")

        self._failed.add(url)
        self._remove_partial(local_path)
        return False

    async def fetch_text(self, url: str) -> Optional[str]:
        """
        Fetch a text resource (such as a sitemap).

        Args:
            url: URL to fetch

        Returns:
            Response body, or None on HTTP or network error
        """
        try:
            async with self.session.get(url, allow_redirects=True) as response:
                if response.status != 200:
                    self.logger.error(f"HTTP {response.status} for {url}")
                    return None
                return await response.text()
        except ClientError as e:
            self.logger.error(f"Error fetching {url}: {e}")
        except asyncio.TimeoutError:
            self.logger.error(f"Timeout fetching {url}")
        return None

    def _remove_partial(self, local_path: str) -> None:
        if os.path.exists(local_path):
            try:
                os.remove(local_path)
            except OSError as e:
                self.logger.debug(f"Could not remove partial file {local_path}: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
