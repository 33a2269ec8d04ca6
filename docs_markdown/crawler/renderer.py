"""
Page renderer using Playwright for JavaScript rendering.

Keeps one headless browser page open for the whole crawl and navigates it
from URL to URL.
"""

from typing import Dict, Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page

from ..utils.constants import (
    DEFAULT_PAGE_TIMEOUT,
    DEFAULT_USER_AGENT,
    DEFAULT_VIEWPORT,
    DEFAULT_WAIT_UNTIL,
)
from ..utils.log import get_logger


class RenderError(Exception):
    """Raised when a page cannot be loaded."""


class PageRenderer:
    """
    Renders web pages using a Playwright headless browser.

    A single page is reused for every navigation, so pages are always loaded
    one after another.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_PAGE_TIMEOUT,
        wait_until: str = DEFAULT_WAIT_UNTIL,
        headless: bool = True,
        viewport: Optional[Dict[str, int]] = None,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the page renderer.

        Args:
            timeout: Page load timeout in milliseconds
            wait_until: Event to wait for ('load', 'domcontentloaded', 'networkidle')
            headless: Run browser in headless mode
            viewport: Viewport size used while extracting content
            user_agent: User agent string for the browser
        """
        self.timeout = timeout
        self.wait_until = wait_until
        self.headless = headless
        self.viewport = dict(viewport or DEFAULT_VIEWPORT)
        self.user_agent = user_agent
        self.logger = get_logger("renderer")

        self._playwright = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def start(self) -> None:
        """
        Start the Playwright browser and open the shared page.
        """
        self.logger.info("Starting Playwright browser...")
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.headless,
            args=[
                '--disable-blink-features=AutomationControlled',
                '--no-sandbox',
                '--disable-setuid-sandbox',
                '--disable-dev-shm-usage',
            ]
        )
        self._context = await self._browser.new_context(
            user_agent=self.user_agent,
            viewport=self.viewport,
            ignore_https_errors=True,
        )
        self._page = await self._context.new_page()
        self._page.set_default_navigation_timeout(self.timeout)
        self.logger.info("Browser started successfully")

    async def stop(self) -> None:
        """
        Stop the Playwright browser instance.
        """
        if self._context:
            await self._context.close()
            self._context = None
            self._page = None
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        self.logger.info("Browser stopped")

    async def load(self, url: str) -> Page:
        """
        Navigate the shared page to a URL and wait for the network to settle.

        Args:
            url: URL to render

        Returns:
            The rendered page

        Raises:
            RenderError: If the page returns no response or an HTTP error
        """
        if not self._page:
            await self.start()

        await self._page.set_viewport_size(self.viewport)

        self.logger.debug(f"Rendering: {url}")
        response = await self._page.goto(
            url,
            wait_until=self.wait_until,
            timeout=self.timeout
        )

        if not response:
            raise RenderError(f"No response for {url}")

        if response.status >= 400:
            raise RenderError(f"HTTP {response.status} for {url}")

        self.logger.debug(f"Successfully rendered: {self._page.url}")
        return self._page

    async def __aenter__(self):
        """Async context manager entry."""
        try:
            await self.start()
        except Exception:
            # Release whatever part of the browser did start
            await self.stop()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.stop()
