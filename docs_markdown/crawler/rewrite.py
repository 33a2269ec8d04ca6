"""
Image link rewriter for converting remote image URLs to local paths.

Rewrites Markdown image references to point at locally downloaded copies.
"""

import re
from typing import Iterable, List, Tuple

from ..utils.log import get_logger
from ..utils.paths import strip_query, url_basename
from .models import ImageCandidate


# Shortest filename trusted for filename-only matching
MIN_FILENAME_LENGTH = 4

# Alt text: anything on one line except a "](" that would close it
ALT_TEXT = r'(?:[^\]\n]|\](?!\())*'

# Markdown image reference; captures the URL
IMAGE_REFERENCE = re.compile(r'!\[' + ALT_TEXT + r'\]\(([^)\s]+)[^)]*\)')


class ImageLinkRewriter:
    """
    Rewrites Markdown image references to local image paths.

    The Markdown converter does not keep track of which <img> produced which
    reference, so each downloaded image is matched textually, from the most
    to the least precise pattern:

    1. the exact resolved URL;
    2. the URL without its query string, followed by anything;
    3. the data-src URL without its query string, followed by anything;
    4. any reference whose URL contains the image's filename (catches CDN
       rewrites that change host or path but keep the filename).

    Each pass runs on the output of the previous one, and every match is
    replaced with the candidate's own alt text and local path.
    """

    def __init__(self):
        """Initialize the image link rewriter."""
        self.logger = get_logger("rewriter")

    def rewrite(self, markdown: str, candidates: Iterable[ImageCandidate]) -> str:
        """
        Rewrite image references for every downloaded image.

        Args:
            markdown: Markdown body produced by the converter
            candidates: Image candidates of the page

        Returns:
            Markdown with local image references
        """
        for candidate in candidates:
            if not candidate.is_downloaded:
                continue

            replacement = f"![{candidate.alt_text}]({candidate.local_path})"

            for name, pattern in self._build_patterns(candidate):
                try:
                    markdown = re.sub(pattern, lambda _: replacement, markdown)
                except re.error as e:
                    self.logger.warning(
                        f"Error replacing image reference ({name}) "
                        f"for {candidate.resolved_url}: {e}"
                    )

        return markdown

    def _build_patterns(self, candidate: ImageCandidate) -> List[Tuple[str, str]]:
        """
        Build the ordered substitution patterns for one image.

        Args:
            candidate: Downloaded image candidate

        Returns:
            List of (pass name, regex source) pairs
        """
        patterns = []

        if candidate.resolved_url:
            patterns.append((
                "exact",
                self._image_pattern(re.escape(candidate.resolved_url), r'\)')
            ))

        if candidate.base_url:
            patterns.append((
                "base",
                self._image_pattern(re.escape(candidate.base_url), r'[^)]*\)')
            ))

        if candidate.data_src:
            patterns.append((
                "data-src",
                self._image_pattern(re.escape(strip_query(candidate.data_src)), r'[^)]*\)')
            ))

        filename = url_basename(candidate.base_url or "")
        if len(filename) >= MIN_FILENAME_LENGTH:
            patterns.append((
                "filename",
                self._image_pattern(r'[^)]*' + re.escape(filename), r'[^)]*\)')
            ))

        return patterns

    @staticmethod
    def _image_pattern(url_pattern: str, tail: str) -> str:
        return r'!\[' + ALT_TEXT + r'\]\(' + url_pattern + tail

    def find_remote_references(self, markdown: str) -> List[str]:
        """
        List image URLs in Markdown that still point to a remote host.

        Args:
            markdown: Markdown text

        Returns:
            Remote image URLs in order of appearance
        """
        return [
            url for url in IMAGE_REFERENCE.findall(markdown)
            if url.startswith(('http://', 'https://', '//'))
        ]
