"""Live page backend using Playwright locators."""

from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..exceptions import ExtractionTimeout, MissingAttributeName
from ..models.options import ExtractionMode, SelectorKind

logger = logging.getLogger(__name__)


class PageDocument:
    """
    Rendered document exposed through a Playwright page.

    Supports CSS and XPath selectors. Values are returned exactly as the
    browser reports them; text is not trimmed.

    The page is only read through locators. Navigation and other state
    changes on the same page must not overlap with an extraction.

    Example:
        document = PageDocument(page)
        await document.wait_for_match("h1", SelectorKind.CSS, timeout_ms=5000)
        handles = await document.resolve("h1", SelectorKind.CSS)
        title = await document.extract_value(handles[0], ExtractionMode.TEXT)
    """

    def __init__(self, page: Page):
        self._page = page

    def supports(self, kind: SelectorKind) -> bool:
        return kind in (SelectorKind.CSS, SelectorKind.XPATH)

    def _locator(self, selector: str, kind: SelectorKind) -> Locator:
        if kind == SelectorKind.XPATH:
            return self._page.locator(f"xpath={selector}")
        return self._page.locator(selector)

    async def wait_for_match(self, selector: str, kind: SelectorKind, timeout_ms: int) -> None:
        """
        Wait until the first element matching ``selector`` is attached.

        Playwright removes its own waiter when the timeout fires, so
        nothing keeps polling the page after this raises.

        Raises:
            ExtractionTimeout: If nothing matched within ``timeout_ms``
        """
        try:
            await self._locator(selector, kind).first.wait_for(state="attached", timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            logger.debug(f"Wait for {selector!r} timed out: {e}")
            raise ExtractionTimeout(selector, timeout_ms) from e

    async def count(self, selector: str, kind: SelectorKind) -> int:
        return await self._locator(selector, kind).count()

    async def resolve(self, selector: str, kind: SelectorKind) -> list[Locator]:
        locator = self._locator(selector, kind)
        total = await locator.count()
        return [locator.nth(i) for i in range(total)]

    async def extract_value(
        self,
        element: Locator,
        mode: ExtractionMode,
        attribute_name: Optional[str] = None,
    ) -> Optional[str]:
        if mode == ExtractionMode.HTML:
            return await element.inner_html()
        if mode == ExtractionMode.ATTRIBUTE:
            if not attribute_name:
                raise MissingAttributeName()
            return await element.get_attribute(attribute_name)
        return await element.text_content()
