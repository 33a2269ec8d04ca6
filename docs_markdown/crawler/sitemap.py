"""
Sitemap loader listing the pages of a documentation site.
"""

from typing import List

from bs4 import BeautifulSoup

from ..utils.constants import SITEMAP_FILENAME
from ..utils.log import get_logger
from .downloader import AssetDownloader


class SitemapError(Exception):
    """Raised when the sitemap cannot be fetched or lists no pages."""


def sitemap_url_for(root_url: str) -> str:
    """Location of the pages sitemap under a documentation root."""
    return f"{root_url.rstrip('/')}/{SITEMAP_FILENAME}"


def parse_sitemap(xml: str) -> List[str]:
    """
    Extract page URLs from a sitemap document.

    Args:
        xml: Sitemap XML (<urlset><url><loc>...</loc></url>...</urlset>)

    Returns:
        The <loc> values, in document order
    """
    soup = BeautifulSoup(xml, 'xml')
    urls = []

    for url in soup.find_all('url'):
        loc = url.find('loc')
        if loc and loc.get_text().strip():
            urls.append(loc.get_text().strip())

    return urls


class SitemapLoader:
    """Fetches and parses a documentation site's pages sitemap."""

    def __init__(self, downloader: AssetDownloader):
        """
        Initialize the sitemap loader.

        Args:
            downloader: Downloader whose HTTP session is used for the request
        """
        self.downloader = downloader
        self.logger = get_logger("sitemap")

    async def load(self, root_url: str) -> List[str]:
        """
        Get the ordered page list of a documentation site.

        Args:
            root_url: Documentation root URL

        Returns:
            Page URLs in sitemap order

        Raises:
            SitemapError: If the sitemap is unreachable, malformed or empty
        """
        url = sitemap_url_for(root_url)
        self.logger.info(f"Fetching sitemap: {url}")

        xml = await self.downloader.fetch_text(url)
        if xml is None:
            raise SitemapError(f"Could not fetch sitemap at {url}")

        try:
            urls = parse_sitemap(xml)
        except Exception as e:
            raise SitemapError(f"Could not parse sitemap at {url}: {e}") from e

        if not urls:
            raise SitemapError(
                "No URLs found in sitemap. Check if the sitemap URL is correct."
            )

        return urls
