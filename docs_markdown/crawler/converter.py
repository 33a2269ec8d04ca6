"""
Page converter turning one rendered documentation page into Markdown.

Runs the per-page pipeline: render, hide chrome, extract, download images,
convert to Markdown, and point image references at the local copies.
"""

import os
from typing import List

from ..utils.constants import IMAGES_DIRNAME
from ..utils.log import get_logger
from ..utils.paths import (
    ensure_dir,
    extension_for,
    local_filename_for,
    markdown_image_path,
    strip_query,
)
from .downloader import AssetDownloader
from .extractor import AssetExtractor, parse_html
from .markdown import HtmlToMarkdown
from .models import ImageCandidate, MarkdownDocument, PageJob
from .rewrite import ImageLinkRewriter
from .sanitizer import DomSanitizer


class PageConverter:
    """
    Converts a single page into a self-contained Markdown document.

    Never raises: any failure while converting a page yields a placeholder
    document describing the error, so one broken page cannot stop a crawl.
    """

    def __init__(
        self,
        renderer,
        downloader: AssetDownloader,
        sanitizer: DomSanitizer = None,
        extractor: AssetExtractor = None,
        markdown: HtmlToMarkdown = None,
        rewriter: ImageLinkRewriter = None
    ):
        """
        Initialize the page converter.

        Args:
            renderer: Object whose async load(url) returns a rendered page
            downloader: Image downloader
            sanitizer: Chrome sanitizer (default: DomSanitizer())
            extractor: Content extractor (default: AssetExtractor())
            markdown: HTML to Markdown converter (default: HtmlToMarkdown())
            rewriter: Image link rewriter (default: ImageLinkRewriter())
        """
        self.renderer = renderer
        self.downloader = downloader
        self.sanitizer = sanitizer or DomSanitizer()
        self.extractor = extractor or AssetExtractor()
        self.markdown = markdown or HtmlToMarkdown()
        self.rewriter = rewriter or ImageLinkRewriter()
        self.logger = get_logger("converter")

    async def convert(self, job: PageJob) -> MarkdownDocument:
        """
        Convert the page described by a job.

        Args:
            job: Page URL, sequence number and output directory

        Returns:
            The page's Markdown document, or an error placeholder
        """
        try:
            return await self._convert(job)
        except Exception as e:
            self.logger.error(f"Failed to extract markdown for: {job.url}: {e}")
            return MarkdownDocument.from_error(job.url, e)

    async def _convert(self, job: PageJob) -> MarkdownDocument:
        page = await self.renderer.load(job.url)

        await self.sanitizer.sanitize(page)

        html = await page.content()
        page_url = page.url or job.url
        soup = parse_html(html)

        title = self.extractor.extract_title(soup)
        candidates = self.extractor.extract_images(soup, page_url)

        saved = await self.download_images(candidates, job)

        content_html = self.extractor.extract_content_html(soup)
        body = self.markdown.convert(content_html)
        body = self.rewriter.rewrite(body, candidates)

        remaining = self.rewriter.find_remote_references(body)
        if remaining:
            self.logger.debug(f"{len(remaining)} remote image references left on {job.url}")

        return MarkdownDocument(title=title, body=body, images_saved=saved)

    async def download_images(self, candidates: List[ImageCandidate], job: PageJob) -> int:
        """
        Download every image that has a source URL, one at a time.

        Successful candidates get their local path and filename filled in;
        failed ones are left untouched.

        Args:
            candidates: Image candidates of the page, in DOM order
            job: Page being converted

        Returns:
            Number of images saved
        """
        images_dir = os.path.join(job.output_dir, IMAGES_DIRNAME)
        saved = 0

        for candidate in candidates:
            if not candidate.resolved_url:
                continue

            ensure_dir(images_dir)

            filename = local_filename_for(
                job.sequence_number,
                candidate.index,
                extension_for(candidate.resolved_url)
            )
            destination = os.path.join(images_dir, filename)

            if not await self.downloader.fetch(candidate.resolved_url, destination):
                continue

            candidate.local_filename = filename
            candidate.local_path = markdown_image_path(filename)
            candidate.base_url = strip_query(candidate.resolved_url)
            saved += 1

        return saved
