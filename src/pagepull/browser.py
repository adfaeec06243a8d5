"""Browser session lifecycle: launch, connect over CDP, navigate."""

from __future__ import annotations

import contextlib
import logging
from types import TracebackType
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from .models.config import ConnectConfig, LaunchConfig, WaitUntil

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    A browser, one of its contexts and the page to work on.

    Owns the Playwright driver it was created with. ``close`` tears
    everything down; when the session is attached to an existing browser,
    closing only disconnects and leaves that browser running.

    Example:
        session = await launch_browser(LaunchConfig(headless=True))
        async with session:
            await navigate_to(session.page, "https://example.com")
            html = await session.page.content()
    """

    def __init__(
        self,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
        owns_context: bool = True,
    ) -> None:
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self.page = page
        self._owns_context = owns_context
        self._closed = False

    async def close(self) -> None:
        """Close the context (if owned), the browser connection and the driver."""
        if self._closed:
            return
        self._closed = True

        if self._owns_context:
            try:
                await self.context.close()
            except Exception as e:
                logger.debug(f"Error closing context: {e}")

        try:
            await self.browser.close()
        finally:
            await self.playwright.stop()
        logger.info("Browser session closed")

    async def __aenter__(self) -> BrowserSession:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()


async def launch_browser(config: Optional[LaunchConfig] = None) -> BrowserSession:
    """
    Launch a new Chromium instance with a fresh context and page.

    Args:
        config: Launch settings (defaults if None)

    Returns:
        Open browser session
    """
    config = config or LaunchConfig()
    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.launch(headless=config.headless)

        context_options: dict[str, object] = {}
        if config.viewport:
            context_options["viewport"] = {"width": config.viewport.width, "height": config.viewport.height}
        if config.user_agent:
            context_options["user_agent"] = config.user_agent

        context = await browser.new_context(**context_options)  # type: ignore[arg-type]
        page = await context.new_page()
    except BaseException:
        with contextlib.suppress(Exception):
            await playwright.stop()
        raise

    logger.info(f"Browser launched (headless={config.headless})")
    return BrowserSession(playwright, browser, context, page)


async def connect_to_existing(config: ConnectConfig) -> BrowserSession:
    """
    Attach to a running Chromium through the DevTools protocol.

    Reuses the first existing context and its first page when there is
    one; otherwise creates them.

    Args:
        config: Connection settings

    Returns:
        Browser session; closing it disconnects without killing the browser
    """
    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.connect_over_cdp(config.debug_url)

        contexts = browser.contexts
        if contexts:
            context = contexts[0]
            owns_context = False
            page = context.pages[0] if context.pages else await context.new_page()
        else:
            context = await browser.new_context()
            owns_context = True
            page = await context.new_page()
    except BaseException:
        with contextlib.suppress(Exception):
            await playwright.stop()
        raise

    logger.info(f"Connected to browser at {config.debug_url}")
    return BrowserSession(playwright, browser, context, page, owns_context=owns_context)


async def navigate_to(page: Page, url: str, wait_until: WaitUntil = "domcontentloaded") -> None:
    """
    Navigate to a URL and wait for the page to be ready.

    Args:
        page: Page to navigate
        url: Target URL
        wait_until: 'load', 'domcontentloaded', 'networkidle' or 'commit'
    """
    logger.debug(f"Navigating to {url} (wait_until={wait_until})")
    await page.goto(url, wait_until=wait_until)
