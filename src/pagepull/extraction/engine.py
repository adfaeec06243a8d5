"""Extraction engine shared by the static and live backends."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Optional

from playwright.async_api import Page

from ..exceptions import BackendFault, ExtractionError, MissingAttributeName, UnsupportedSelectorCombination
from ..models.options import ExtractionMode, ExtractionOptions
from ..models.result import ExtractionResult
from .live import PageDocument
from .protocols import AsyncDocumentBackend, DocumentBackend
from .static import XPATH_UNSUPPORTED_MESSAGE, HtmlDocument

logger = logging.getLogger(__name__)


def _require_attribute_name(options: ExtractionOptions) -> None:
    if options.mode == ExtractionMode.ATTRIBUTE and not options.attribute_name:
        raise MissingAttributeName()


def _single_result(value: Optional[str]) -> ExtractionResult:
    return ExtractionResult(success=True, data=value, count=1 if value else 0)


def _multiple_result(values: Iterable[Optional[str]]) -> ExtractionResult:
    # Elements that produced nothing are dropped, not kept as placeholders
    data = [value for value in values if value]
    return ExtractionResult(success=True, data=data, count=len(data))


def _failure(exc: Exception, options: ExtractionOptions) -> ExtractionResult:
    if isinstance(exc, ExtractionError):
        error: ExtractionError = exc
    else:
        error = BackendFault(str(exc) or "Unknown error")
    message = str(error) or "Unknown error"
    logger.warning(f"Extraction of {options.selector!r} failed ({error.code}): {message}")
    return ExtractionResult.failure(message)


def extract_from_document(document: DocumentBackend, options: ExtractionOptions) -> ExtractionResult:
    """
    Run an extraction against a synchronous document backend.

    ``wait`` and ``timeout_ms`` are ignored: a parsed document never changes.

    Args:
        document: Backend to query
        options: Extraction request

    Returns:
        Normalized result; failures are reported in the result, never raised
    """
    try:
        if not document.supports(options.selector_kind):
            raise UnsupportedSelectorCombination(XPATH_UNSUPPORTED_MESSAGE)

        elements = document.resolve(options.selector, options.selector_kind)
        logger.debug(f"Selector {options.selector!r} matched {len(elements)} element(s)")

        _require_attribute_name(options)

        if options.multiple:
            return _multiple_result(
                document.extract_value(element, options.mode, options.attribute_name) for element in elements
            )

        value = document.extract_value(elements[0], options.mode, options.attribute_name) if elements else None
        return _single_result(value)

    except Exception as e:
        return _failure(e, options)


def extract_from_html(html: str, options: ExtractionOptions) -> ExtractionResult:
    """
    Extract content from an HTML string.

    Only CSS selectors are supported; an XPath request produces a failed
    result explaining the unsupported combination.

    Example:
        result = extract_from_html("<h1>Main Title</h1>", ExtractionOptions(selector="h1"))
        # ExtractionResult(success=True, data="Main Title", count=1, error=None)
    """
    try:
        document = HtmlDocument(html)
    except Exception as e:
        return _failure(e, options)
    return extract_from_document(document, options)


async def _gather_in_order(
    document: AsyncDocumentBackend,
    elements: list,
    options: ExtractionOptions,
) -> list[Optional[str]]:
    """Extract every element concurrently, keeping document order."""
    tasks = [
        asyncio.ensure_future(document.extract_value(element, options.mode, options.attribute_name))
        for element in elements
    ]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def extract_from_live_document(
    document: AsyncDocumentBackend,
    options: ExtractionOptions,
) -> ExtractionResult:
    """
    Run an extraction against a live document backend.

    When ``options.wait`` is set, waits up to ``options.timeout_ms`` for the
    first match before resolving. A timeout is reported as a failed result.
    """
    try:
        if not document.supports(options.selector_kind):
            raise UnsupportedSelectorCombination(
                f"Unsupported selector combination: {options.selector_kind.value} selectors are not supported"
            )

        if options.wait:
            await document.wait_for_match(options.selector, options.selector_kind, options.timeout_ms)

        elements = await document.resolve(options.selector, options.selector_kind)
        logger.debug(f"Selector {options.selector!r} matched {len(elements)} element(s)")

        _require_attribute_name(options)

        if options.multiple:
            values = await _gather_in_order(document, elements, options)
            return _multiple_result(values)

        value = await document.extract_value(elements[0], options.mode, options.attribute_name) if elements else None
        return _single_result(value)

    except Exception as e:
        return _failure(e, options)


async def extract_from_page(page: Page, options: ExtractionOptions) -> ExtractionResult:
    """
    Extract content from a live Playwright page.

    Example:
        session = await launch_browser(LaunchConfig())
        async with session:
            await navigate_to(session.page, "https://example.com")
            result = await extract_from_page(session.page, ExtractionOptions(selector="h1"))
    """
    return await extract_from_live_document(PageDocument(page), options)
