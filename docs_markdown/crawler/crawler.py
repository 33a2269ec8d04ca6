"""
Main documentation crawler module.

Orchestrates the export: site title detection, sitemap loading, and the
sequential page-by-page conversion to Markdown files.
"""

import os
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .converter import PageConverter
from .downloader import AssetDownloader
from .extractor import AssetExtractor, parse_html
from .models import PageJob
from .renderer import PageRenderer
from .sitemap import SitemapError, SitemapLoader
from ..utils.constants import DEFAULT_OUTPUT_ROOT, DEFAULT_SITE_TITLE
from ..utils.log import get_logger, print_error, print_info, print_success
from ..utils.paths import (
    categorize_url,
    ensure_dir,
    filename_from_url,
    sanitize_folder_name,
)


@dataclass
class CrawlResult:
    """Results of the export."""

    site_title: str = ""
    output_dir: str = ""
    pages_total: int = 0
    pages_processed: int = 0
    failed_pages: int = 0
    images_downloaded: int = 0
    images_failed: int = 0
    aborted: bool = False
    errors: List[Dict] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        """Whether every page was converted and written."""
        return not self.aborted and self.failed_pages == 0


class DocsCrawler:
    """
    Documentation site to Markdown exporter.

    Visits the sitemap's pages strictly in order with one shared browser page
    and one HTTP session; a page's images are downloaded and its file written
    before the next page is loaded.
    """

    def __init__(
        self,
        url: str,
        output_root: str = DEFAULT_OUTPUT_ROOT,
        renderer: Optional[PageRenderer] = None,
        downloader: Optional[AssetDownloader] = None
    ):
        """
        Initialize the documentation crawler.

        Args:
            url: Documentation root URL
            output_root: Directory under which the site folder is created
            renderer: Page renderer (default: headless Chromium)
            downloader: Image downloader (default: AssetDownloader())
        """
        self.root_url = url.rstrip('/')
        self.output_root = output_root

        # Initialize logger
        self.logger = get_logger("crawler")

        # Initialize components
        self.renderer = renderer or PageRenderer()
        self.downloader = downloader or AssetDownloader()
        self.extractor = AssetExtractor()
        self.sitemap = SitemapLoader(self.downloader)
        self.converter = PageConverter(
            self.renderer,
            self.downloader,
            extractor=self.extractor
        )

        self.save_dir: Optional[str] = None

    async def crawl(self) -> CrawlResult:
        """
        Export every page listed in the site's sitemap.

        Returns:
            CrawlResult with statistics and errors
        """
        start_time = time.time()
        result = CrawlResult()

        print_info(f"Starting to scrape documentation site: {self.root_url}")

        try:
            # Renderer and HTTP session are released on every exit path
            async with self.renderer, self.downloader:
                result.site_title = await self._detect_site_title()
                folder_name = (
                    sanitize_folder_name(result.site_title)
                    or sanitize_folder_name(DEFAULT_SITE_TITLE)
                )
                self.save_dir = os.path.join(self.output_root, folder_name)
                result.output_dir = self.save_dir
                ensure_dir(self.save_dir)

                print_info(f'Site title detected: "{result.site_title}"')
                print_info(f'Using output folder: "{folder_name}"')

                try:
                    urls = await self.sitemap.load(self.root_url)
                except SitemapError as e:
                    print_error(str(e))
                    result.aborted = True
                    result.errors.append({
                        'url': self.root_url,
                        'error': str(e),
                        'type': 'sitemap_error'
                    })
                    return result

                result.pages_total = len(urls)
                print_info(f"Found {len(urls)} pages to process")

                for sequence_number, url in enumerate(urls, start=1):
                    await self._crawl_page(url, sequence_number, result)

        finally:
            result.images_failed = len(self.downloader.failed_assets)
            for asset_url in sorted(self.downloader.failed_assets):
                result.errors.append({
                    'url': asset_url,
                    'error': 'Failed to download image',
                    'type': 'download_error'
                })
            result.duration_seconds = time.time() - start_time

        print_success(
            f"Conversion complete! {result.pages_processed} pages processed "
            f"in {result.duration_seconds:.1f}s"
        )
        print_info(f"Output saved to: {os.path.abspath(self.save_dir)}")

        return result

    async def _detect_site_title(self) -> str:
        """
        Load the documentation root and read the site's name from it.

        Returns:
            Site title, or the default title if the page cannot be loaded
        """
        try:
            page = await self.renderer.load(self.root_url)
            html = await page.content()
        except Exception as e:
            self.logger.error(f"Error extracting site title: {e}")
            return DEFAULT_SITE_TITLE

        return self.extractor.extract_site_title(parse_html(html))

    async def _crawl_page(self, url: str, sequence_number: int, result: CrawlResult) -> None:
        """
        Convert one sitemap entry and write its Markdown file.

        Args:
            url: Page URL
            sequence_number: 1-based position of the page in the crawl
            result: Crawl result updated in place
        """
        category_dir = os.path.join(self.save_dir, categorize_url(url))
        ensure_dir(category_dir)

        md_path = os.path.join(category_dir, f"{filename_from_url(url)}.md")

        self.logger.info(f"Processing page {sequence_number}/{result.pages_total}: {url}")

        job = PageJob(url=url, sequence_number=sequence_number, output_dir=category_dir)
        document = await self.converter.convert(job)
        result.images_downloaded += document.images_saved

        if document.failed:
            result.failed_pages += 1
            result.errors.append({
                'url': url,
                'error': document.error,
                'type': 'render_error'
            })

        try:
            with open(md_path, 'w', encoding='utf-8') as f:
                f.write(document.render())
        except OSError as e:
            self.logger.error(f"Error saving page {url}: {e}")
            if not document.failed:
                result.failed_pages += 1
            result.errors.append({
                'url': url,
                'error': str(e),
                'type': 'save_error'
            })
            return

        result.pages_processed += 1
        result.files.append(md_path)
        self.logger.info(f"Saved markdown for: {url} at {md_path}")
