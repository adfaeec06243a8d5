"""Static HTML backend using BeautifulSoup."""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..exceptions import MissingAttributeName, UnsupportedSelectorCombination
from ..models.options import ExtractionMode, SelectorKind

logger = logging.getLogger(__name__)

XPATH_UNSUPPORTED_MESSAGE = (
    "Unsupported selector combination: XPath not supported for HTML parsing. "
    "Use CSS selectors or extract from live page."
)


class HtmlDocument:
    """
    Queryable tree parsed from an HTML string.

    Only CSS selectors are supported; they are evaluated by soupsieve
    through ``BeautifulSoup.select``. Text values are stripped of
    surrounding whitespace since indentation in static markup carries no
    meaning.

    Example:
        document = HtmlDocument("<ul><li>One</li><li>Two</li></ul>")
        items = document.resolve("li", SelectorKind.CSS)
        document.extract_value(items[0], ExtractionMode.TEXT)  # "One"
    """

    def __init__(self, html: str, parser: str = "html.parser"):
        """
        Parse the document.

        Args:
            html: Markup to parse
            parser: BeautifulSoup tree builder
        """
        self._soup = BeautifulSoup(html, parser)

    def supports(self, kind: SelectorKind) -> bool:
        return kind == SelectorKind.CSS

    def resolve(self, selector: str, kind: SelectorKind) -> list[Tag]:
        if not self.supports(kind):
            raise UnsupportedSelectorCombination(XPATH_UNSUPPORTED_MESSAGE)
        return list(self._soup.select(selector))

    def count(self, selector: str, kind: SelectorKind) -> int:
        return len(self.resolve(selector, kind))

    def extract_value(
        self,
        element: Tag,
        mode: ExtractionMode,
        attribute_name: Optional[str] = None,
    ) -> Optional[str]:
        if mode == ExtractionMode.HTML:
            return element.decode_contents()

        if mode == ExtractionMode.ATTRIBUTE:
            if not attribute_name:
                raise MissingAttributeName()
            value = element.get(attribute_name)
            if value is None:
                return None
            # Multi-valued attributes such as class come back as lists
            if isinstance(value, list):
                return " ".join(value)
            return str(value)

        text = element.get_text().strip()
        return text or None
