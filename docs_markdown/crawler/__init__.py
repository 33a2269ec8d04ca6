"""
Crawler module for documentation export.

Contains components for rendering, sanitizing, extracting, downloading,
converting, and rewriting documentation pages.
"""

from .crawler import DocsCrawler, CrawlResult
from .converter import PageConverter
from .renderer import PageRenderer, RenderError
from .sanitizer import DomSanitizer
from .extractor import AssetExtractor
from .downloader import AssetDownloader
from .markdown import HtmlToMarkdown
from .rewrite import ImageLinkRewriter
from .sitemap import SitemapLoader, SitemapError
from .models import PageJob, ImageCandidate, MarkdownDocument

__all__ = [
    "DocsCrawler",
    "CrawlResult",
    "PageConverter",
    "PageRenderer",
    "RenderError",
    "DomSanitizer",
    "AssetExtractor",
    "AssetDownloader",
    "HtmlToMarkdown",
    "ImageLinkRewriter",
    "SitemapLoader",
    "SitemapError",
    "PageJob",
    "ImageCandidate",
    "MarkdownDocument",
]
