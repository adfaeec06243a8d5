"""Tests for extraction from live pages (Playwright mocked)."""

import asyncio
from typing import Optional

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pagepull import ExtractionOptions, extract_from_page
from pagepull.models import Cardinality, ExtractionMode, SelectorKind


class MockElement:
    """A matched element with canned values."""

    def __init__(
        self,
        text: Optional[str] = None,
        html: str = "",
        attrs: Optional[dict[str, str]] = None,
        delay: float = 0.0,
    ):
        self.text = text
        self.html = html
        self.attrs = attrs or {}
        self.delay = delay


class MockLocator:
    """Mock of playwright.async_api.Locator over a fixed element list."""

    def __init__(self, elements: list[MockElement], fail_with: Optional[Exception] = None):
        self._elements = elements
        self._fail_with = fail_with
        self._first: Optional[MockLocator] = None
        self.wait_calls: list[dict] = []

    @property
    def first(self) -> "MockLocator":
        if self._first is None:
            self._first = MockLocator(self._elements[:1], self._fail_with)
        return self._first

    def nth(self, index: int) -> "MockLocator":
        return MockLocator(self._elements[index : index + 1], self._fail_with)

    async def count(self) -> int:
        if self._fail_with:
            raise self._fail_with
        return len(self._elements)

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.wait_calls.append({"state": state, "timeout": timeout})
        if not self._elements:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def _element(self) -> MockElement:
        element = self._elements[0]
        await asyncio.sleep(element.delay)
        return element

    async def text_content(self) -> Optional[str]:
        return (await self._element()).text

    async def inner_html(self) -> str:
        return (await self._element()).html

    async def get_attribute(self, name: str) -> Optional[str]:
        return (await self._element()).attrs.get(name)


class MockPage:
    """Mock of playwright.async_api.Page resolving selectors from a dict."""

    def __init__(self, matches: dict[str, list[MockElement]], fail_with: Optional[Exception] = None):
        self._matches = matches
        self._fail_with = fail_with
        self.selectors: list[str] = []
        self.locators: list[MockLocator] = []

    def locator(self, selector: str) -> MockLocator:
        self.selectors.append(selector)
        locator = MockLocator(self._matches.get(selector, []), self._fail_with)
        self.locators.append(locator)
        return locator


@pytest.fixture
def page():
    return MockPage(
        {
            "h1": [MockElement(text="Main Title", html="Main <em>Title</em>")],
            "li": [MockElement(text="Item 1"), MockElement(text="Item 2"), MockElement(text="Item 3")],
            "img": [MockElement(attrs={"src": "/image.png"})],
            "a": [
                MockElement(text="A", attrs={"href": "/a"}),
                MockElement(text="B"),
                MockElement(text="C", attrs={"href": "/c"}),
            ],
            "xpath=//h1": [MockElement(text="Main Title")],
            ".padded": [MockElement(text="  Padded  ")],
        }
    )


class TestLiveSingleExtraction:
    """Tests for single-element extraction on live pages."""

    @pytest.mark.asyncio
    async def test_extracts_text(self, page):
        """Test text extraction after waiting."""
        result = await extract_from_page(page, ExtractionOptions(selector="h1"))

        assert result.success is True
        assert result.data == "Main Title"
        assert result.count == 1

    @pytest.mark.asyncio
    async def test_extracts_inner_html(self, page):
        """Test inner HTML extraction."""
        result = await extract_from_page(page, ExtractionOptions(selector="h1", mode=ExtractionMode.HTML))

        assert result.data == "Main <em>Title</em>"

    @pytest.mark.asyncio
    async def test_text_is_not_trimmed(self, page):
        """Test that browser text is returned as-is."""
        result = await extract_from_page(page, ExtractionOptions(selector=".padded"))

        assert result.data == "  Padded  "
        assert result.count == 1

    @pytest.mark.asyncio
    async def test_absent_attribute(self, page):
        """Test that a missing attribute gives no data."""
        options = ExtractionOptions(selector="img", mode="attribute", attribute_name="alt")
        result = await extract_from_page(page, options)

        assert result.success is True
        assert result.data is None
        assert result.count == 0

    @pytest.mark.asyncio
    async def test_no_match_without_wait(self, page):
        """Test zero matches when waiting is disabled."""
        result = await extract_from_page(page, ExtractionOptions(selector=".missing", wait=False))

        assert result.success is True
        assert result.data is None
        assert result.count == 0

    @pytest.mark.asyncio
    async def test_xpath_selectors_are_prefixed(self, page):
        """Test that XPath selectors go through Playwright's xpath= engine."""
        options = ExtractionOptions(selector="//h1", selector_kind=SelectorKind.XPATH)
        result = await extract_from_page(page, options)

        assert result.data == "Main Title"
        assert "xpath=//h1" in page.selectors
        assert "//h1" not in page.selectors


class TestLiveMultipleExtraction:
    """Tests for extracting every match on live pages."""

    @pytest.mark.asyncio
    async def test_extracts_all_items(self, page):
        """Test multiple extraction."""
        result = await extract_from_page(page, ExtractionOptions(selector="li", cardinality=Cardinality.MULTIPLE))

        assert result.data == ["Item 1", "Item 2", "Item 3"]
        assert result.count == 3

    @pytest.mark.asyncio
    async def test_no_matches_without_wait(self, page):
        """Test zero matches gives an empty list."""
        options = ExtractionOptions(selector=".missing", cardinality="multiple", wait=False)
        result = await extract_from_page(page, options)

        assert result.success is True
        assert result.data == []
        assert result.count == 0

    @pytest.mark.asyncio
    async def test_skips_missing_values(self, page):
        """Test that elements without the attribute are dropped."""
        options = ExtractionOptions(
            selector="a",
            mode="attribute",
            attribute_name="href",
            cardinality="multiple",
        )
        result = await extract_from_page(page, options)

        assert result.data == ["/a", "/c"]
        assert result.count == 2

    @pytest.mark.asyncio
    async def test_keeps_document_order_when_completion_order_differs(self):
        """Test that slow early elements still come first."""
        page = MockPage(
            {
                "p": [
                    MockElement(text="first", delay=0.05),
                    MockElement(text="second", delay=0.02),
                    MockElement(text="third", delay=0.0),
                ]
            }
        )
        result = await extract_from_page(page, ExtractionOptions(selector="p", cardinality="multiple"))

        assert result.data == ["first", "second", "third"]


class TestLiveErrors:
    """Tests for failures reported in the result."""

    @pytest.mark.asyncio
    async def test_timeout_is_a_failed_result(self, page):
        """Test that waiting for a missing element fails without raising."""
        result = await extract_from_page(page, ExtractionOptions(selector=".missing", timeout_ms=50))

        assert result.success is False
        assert result.data is None
        assert result.count == 0
        assert "Timeout" in result.error
        assert ".missing" in result.error
        assert "50ms" in result.error

    @pytest.mark.asyncio
    async def test_wait_uses_timeout(self, page):
        """Test that the timeout is passed to Playwright."""
        await extract_from_page(page, ExtractionOptions(selector="h1", timeout_ms=1234))

        assert page.locators[0].first.wait_calls == [{"state": "attached", "timeout": 1234}]

    @pytest.mark.asyncio
    async def test_no_wait_skips_waiting(self, page):
        """Test that wait=False never waits."""
        await extract_from_page(page, ExtractionOptions(selector="h1", wait=False))

        assert all(not locator.first.wait_calls for locator in page.locators)

    @pytest.mark.asyncio
    async def test_missing_attribute_name(self, page):
        """Test that attribute mode without a name fails."""
        result = await extract_from_page(page, ExtractionOptions(selector="img", mode="attribute"))

        assert result.success is False
        assert result.error == "Missing attribute name: Attribute name required for attribute extraction"

    @pytest.mark.asyncio
    async def test_backend_error_is_captured(self):
        """Test that Playwright errors become failed results."""
        page = MockPage({}, fail_with=RuntimeError("Unexpected token in selector"))
        result = await extract_from_page(page, ExtractionOptions(selector="div[", wait=False))

        assert result.success is False
        assert result.error == "Backend fault: Unexpected token in selector"
