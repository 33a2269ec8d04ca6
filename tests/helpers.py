"""Test doubles for the browser and HTTP layers."""

import os
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from aiohttp import web
from aiohttp.test_utils import TestServer

from docs_markdown.crawler.renderer import RenderError

# Smallest valid PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64 + b"\xff\xd9"


class FakePage:
    """In-memory stand-in for a rendered Playwright page."""

    def __init__(self, html: str, url: str, evaluate_error: Optional[Exception] = None):
        self.html = html
        self.url = url
        self.evaluate_error = evaluate_error
        self.evaluated: List = []

    async def evaluate(self, script, arg=None):
        if self.evaluate_error:
            raise self.evaluate_error
        self.evaluated.append(arg)
        return 0

    async def content(self) -> str:
        return self.html


class FakeRenderer:
    """Renderer serving registered HTML by URL."""

    def __init__(self, pages: Optional[Dict[str, str]] = None):
        self.pages = dict(pages or {})
        self.failures: Dict[str, Exception] = {}
        self.loaded: List[str] = []
        self.started = False
        self.stopped = False

    def add_page(self, url: str, html: str) -> None:
        self.pages[url] = html

    def fail(self, url: str, error: Exception) -> None:
        self.failures[url] = error

    async def start(self) -> None:
        self.started = True

    async def stop(self) -> None:
        self.stopped = True

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    async def load(self, url: str) -> FakePage:
        self.loaded.append(url)
        if url in self.failures:
            raise self.failures[url]
        if url not in self.pages:
            raise RenderError(f"HTTP 404 for {url}")
        return FakePage(self.pages[url], url)


class RecordingDownloader:
    """Downloader writing fixed bytes without any network access."""

    def __init__(self, failing: tuple = ()):
        self.failing = set(failing)
        self.calls: List[tuple] = []

    async def fetch(self, url: str, local_path: str) -> bool:
        self.calls.append((url, local_path))
        if url in self.failing:
            return False
        os.makedirs(os.path.dirname(local_path), exist_ok=True)
        with open(local_path, 'wb') as f:
            f.write(PNG_BYTES)
        return True


@asynccontextmanager
async def serve(routes: Dict[str, tuple]):
    """
    Serve static responses from a local aiohttp server.

    Args:
        routes: Path -> (status, body bytes, content type)

    Yields:
        Base URL of the server, without trailing slash
    """
    async def handler(request):
        status, body, content_type = routes[request.path]
        return web.Response(status=status, body=body, content_type=content_type)

    app = web.Application()
    for path in routes:
        app.router.add_get(path, handler)

    async with TestServer(app) as server:
        yield str(server.make_url('')).rstrip('/')


def page_html(body: str, title: str = "Docs") -> str:
    """Wrap body markup in a full HTML document."""
    return (
        f"<html><head><title>{title}</title></head>"
        f"<body>{body}</body></html>"
    )
