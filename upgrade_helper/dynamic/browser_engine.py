"""Browser session for one upgrade helper request.

Every request launches its own Chromium and closes it on the way out;
nothing is pooled or shared between requests.

Usage:
    async with BrowserSession(config) as session:
        await session.goto(config.url)
        await session.wait_for_selector('input', timeout=10000)
"""

import asyncio
from typing import Any, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from ..core.config import UpgradeHelperConfig
from ..errors import BrowserLaunchError, NavigationError, PageTimeoutError


class BrowserSession:
    """
    Browser automation using Playwright.

    Handles launch, page loading, bounded waits and cleanup.
    """

    def __init__(self, config: UpgradeHelperConfig = None):
        self.config = config or UpgradeHelperConfig()
        self.playwright = None
        self.browser = None
        self.page = None

    async def __aenter__(self) -> 'BrowserSession':
        try:
            await self.initialize()
        except BaseException:
            await self.cleanup()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.cleanup()
        return False

    async def initialize(self):
        """Launch the browser and open the single page of this session."""
        try:
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(headless=self.config.headless)
            self.page = await self.browser.new_page()
        except PlaywrightError as e:
            raise BrowserLaunchError(
                f"Browser launch failed: {e}. Run: playwright install chromium"
            ) from e

        self.page.set_default_timeout(self.config.navigation_timeout)
        self.config.log("✓ Browser initialized")

    async def goto(self, url: str, wait_until: Optional[str] = None):
        """
        Navigate to URL.

        Args:
            url: Target URL
            wait_until: When to consider navigation successful; defaults to
                the configured value ("networkidle" waits for the page's
                data requests to settle)
        """
        try:
            await self.page.goto(
                url,
                wait_until=wait_until or self.config.wait_until,
                timeout=self.config.navigation_timeout,
            )
        except PlaywrightError as e:
            self.config.log(f"  ✗ Failed to load {url}: {e}")
            raise NavigationError(f"Failed to load {url}: {e}") from e
        self.config.log(f"  ✓ Loaded: {url}")

    async def wait_for_selector(self, selector: str, timeout: int) -> Any:
        """Wait for element to appear; raises PageTimeoutError when it does not."""
        try:
            return await self.page.wait_for_selector(selector, timeout=timeout)
        except PlaywrightTimeoutError as e:
            self.config.log(f"  ✗ Gave up on {selector} after {timeout}ms")
            raise PageTimeoutError(selector, timeout) from e

    async def pause(self, milliseconds: int):
        """Fixed delay, used while the page re-renders."""
        await asyncio.sleep(milliseconds / 1000)

    async def cleanup(self):
        """Close browser and cleanup."""
        try:
            if self.browser:
                await self.browser.close()
        except PlaywrightError as e:
            self.config.log(f"⚠ Cleanup warning: {e}")
        finally:
            if self.playwright:
                await self.playwright.stop()
            self.page = None
            self.browser = None
            self.playwright = None
        self.config.log("✓ Browser cleanup complete")
