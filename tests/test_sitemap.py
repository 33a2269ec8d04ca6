"""Tests for sitemap loading."""

import asyncio

import pytest

from docs_markdown.crawler.downloader import AssetDownloader
from docs_markdown.crawler.sitemap import (
    SitemapError,
    SitemapLoader,
    parse_sitemap,
    sitemap_url_for,
)
from tests.helpers import serve


SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>https://docs.example.com/main/guides/setup</loc><priority>0.5</priority></url>
  <url><loc> https://docs.example.com/main/api/auth </loc></url>
  <url><loc></loc></url>
  <url><loc>https://docs.example.com/main/faq</loc></url>
</urlset>
"""

EMPTY_SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"></urlset>
"""


class TestParseSitemap:
    """Tests for sitemap parsing."""

    def test_locations_in_order(self):
        """Test that <loc> values come back trimmed and in order."""
        assert parse_sitemap(SITEMAP) == [
            "https://docs.example.com/main/guides/setup",
            "https://docs.example.com/main/api/auth",
            "https://docs.example.com/main/faq",
        ]

    def test_empty(self):
        """Test a sitemap without entries."""
        assert parse_sitemap(EMPTY_SITEMAP) == []

    def test_sitemap_url(self):
        """Test the sitemap location under the docs root."""
        assert sitemap_url_for("https://docs.example.com/main/") == (
            "https://docs.example.com/main/sitemap-pages.xml"
        )


class TestSitemapLoader:
    """Tests for fetching the sitemap."""

    def load(self, routes, root_path="/main"):
        async def scenario():
            async with serve(routes) as base:
                async with AssetDownloader() as downloader:
                    return await SitemapLoader(downloader).load(f"{base}{root_path}")
        return asyncio.run(scenario())

    def test_loads_pages(self):
        """Test a reachable sitemap."""
        routes = {"/main/sitemap-pages.xml": (200, SITEMAP.encode(), "application/xml")}
        assert len(self.load(routes)) == 3

    def test_empty_sitemap_is_fatal(self):
        """Test that a sitemap without pages raises."""
        routes = {"/main/sitemap-pages.xml": (200, EMPTY_SITEMAP.encode(), "application/xml")}
        with pytest.raises(SitemapError, match="No URLs found"):
            self.load(routes)

    def test_missing_sitemap_is_fatal(self):
        """Test that an unreachable sitemap raises."""
        routes = {"/other.xml": (200, b"", "application/xml")}
        with pytest.raises(SitemapError, match="Could not fetch"):
            self.load(routes)
