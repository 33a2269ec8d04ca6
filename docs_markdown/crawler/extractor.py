"""
Content extractor for rendered documentation pages.

Uses BeautifulSoup to find the page title, the main content container, and
every image's candidate source URLs.
"""

from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from ..utils.constants import CONTENT_SELECTORS, DEFAULT_SITE_TITLE, UNTITLED_PAGE
from ..utils.log import get_logger
from .models import ImageCandidate


def parse_html(html: str) -> BeautifulSoup:
    """
    Parse HTML, preferring lxml.

    Args:
        html: HTML content

    Returns:
        Parsed document
    """
    try:
        return BeautifulSoup(html, 'lxml')
    except Exception:
        # Fallback to html.parser if lxml fails
        return BeautifulSoup(html, 'html.parser')


def first_srcset_url(srcset: str) -> str:
    """
    Get the first URL listed in a srcset attribute.

    Args:
        srcset: Value like 'a.png 1x, b.png 2x'

    Returns:
        First URL token, or '' if the attribute is empty
    """
    first = srcset.split(',')[0].strip()
    return first.split()[0] if first else ""


class AssetExtractor:
    """
    Extracts the title, content container and image candidates of a page.

    Image candidates keep the DOM order of the <img> elements; their index is
    later embedded in the local image filename.
    """

    def __init__(self):
        """Initialize the extractor."""
        self.logger = get_logger("extractor")

    def extract_title(self, soup: BeautifulSoup) -> str:
        """
        Get the page title from the first <h1>.

        Args:
            soup: Parsed page

        Returns:
            Stripped heading text, or 'Untitled Page'
        """
        heading = soup.find('h1')
        if heading:
            return heading.get_text().strip()
        return UNTITLED_PAGE

    def extract_site_title(self, soup: BeautifulSoup) -> str:
        """
        Guess the documentation site's name from its home page.

        Args:
            soup: Parsed home page

        Returns:
            Site name, or 'GitBook-Documentation' if none can be found
        """
        doc_title = soup.title.get_text().strip() if soup.title else ""

        # Titles usually read "Page Title | Site Name"
        if doc_title and 'undefined' not in doc_title:
            site_title = doc_title.split('|')[0].strip()
            if site_title:
                return site_title

        heading = soup.select_one('header h1, header .logo-text, .site-title')
        if heading and heading.get_text().strip():
            return heading.get_text().strip()

        return doc_title or DEFAULT_SITE_TITLE

    def extract_content_html(self, soup: BeautifulSoup) -> str:
        """
        Get the inner HTML of the main content container.

        Tries <main>, then .main-content, then <body>, then the whole document.

        Args:
            soup: Parsed page

        Returns:
            Inner HTML of the chosen container
        """
        for selector in CONTENT_SELECTORS:
            container = soup.select_one(selector)
            if container:
                self.logger.debug(f"Content container: {selector}")
                return container.decode_contents()

        self.logger.debug("No content container found, using document body")
        if soup.body:
            return soup.body.decode_contents()
        return soup.decode_contents()

    def extract_images(self, soup: BeautifulSoup, page_url: str) -> List[ImageCandidate]:
        """
        Collect every <img> element's candidate sources in one pass.

        Args:
            soup: Parsed page
            page_url: URL of the page (for resolving relative URLs)

        Returns:
            One candidate per <img>, in document order
        """
        candidates = []

        for index, img in enumerate(soup.find_all('img')):
            candidate = ImageCandidate(
                index=index,
                original_src=self._attr(img, 'src'),
                data_src=self._attr(img, 'data-src'),
                srcset=self._attr(img, 'srcset'),
                alt_text=self._attr(img, 'alt') or f"image-{index + 1}",
            )
            candidate.resolved_url = self.resolve(candidate, page_url)
            candidates.append(candidate)

        self.logger.debug(
            f"Found {len(candidates)} images on {page_url}, "
            f"{sum(1 for c in candidates if c.resolved_url)} with a source"
        )

        return candidates

    def resolve(self, candidate: ImageCandidate, page_url: str) -> Optional[str]:
        """
        Choose the single remote URL to fetch for an image.

        Priority: src, then data-src, then the first srcset entry. Inline
        data: URIs are placeholders and count as missing.

        Args:
            candidate: Extracted image attributes
            page_url: URL of the page (for resolving relative URLs)

        Returns:
            Absolute URL, or None if the image has no usable source
        """
        for source in (
            candidate.original_src,
            candidate.data_src,
            first_srcset_url(candidate.srcset),
        ):
            if source and not source.startswith('data:'):
                return urljoin(page_url, source)
        return None

    @staticmethod
    def _attr(tag: Tag, name: str) -> str:
        value = tag.get(name) or ''
        if isinstance(value, list):
            value = ' '.join(value)
        return value.strip()
