"""
Data models shared by the page conversion pipeline.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..utils.constants import ERROR_PAGE_TITLE


@dataclass(frozen=True)
class PageJob:
    """One sitemap entry scheduled for conversion."""

    url: str
    # 1-based, strictly increasing across the crawl; embedded in image names
    sequence_number: int
    # Category directory receiving the .md file and its images/ folder
    output_dir: str


@dataclass
class ImageCandidate:
    """
    Raw attributes of one <img> element, in document order.

    The resolution fields are filled once a remote URL is chosen and the
    image has been saved locally.
    """

    index: int
    original_src: str = ""
    data_src: str = ""
    srcset: str = ""
    alt_text: str = ""

    resolved_url: Optional[str] = None
    base_url: Optional[str] = None
    local_path: Optional[str] = None
    local_filename: Optional[str] = None

    @property
    def is_downloaded(self) -> bool:
        """Whether a local copy exists for this image."""
        return bool(self.local_path)


@dataclass
class MarkdownDocument:
    """A page's title and Markdown body."""

    title: str
    body: str
    failed: bool = False
    images_saved: int = 0
    error: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_error(cls, url: str, error: Exception) -> "MarkdownDocument":
        """
        Build the placeholder document written when a page cannot be converted.

        Args:
            url: Page URL that failed
            error: Exception raised during conversion

        Returns:
            Document flagged as failed
        """
        message = str(error) or error.__class__.__name__
        return cls(
            title=ERROR_PAGE_TITLE,
            body=f"Failed to extract content from {url}. Error: {message}",
            failed=True,
            error=message,
        )

    def render(self) -> str:
        """Full Markdown text with the title heading prepended."""
        return f"# {self.title}\n\n{self.body}"
