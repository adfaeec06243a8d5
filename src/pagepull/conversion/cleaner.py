"""Removal of non-content and hidden elements before Markdown conversion."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# Elements whose content never belongs in the output, not even as text
NON_CONTENT_TAGS = [
    "script",
    "style",
    "noscript",
    "iframe",
    "svg",
    "canvas",
    "template",
]

DISPLAY_NONE_PATTERN = re.compile(r"display\s*:\s*none", re.IGNORECASE)


def is_hidden(tag: Tag) -> bool:
    """
    Check whether an element is marked as hidden.

    An element is hidden when it carries the ``hidden`` attribute,
    ``aria-hidden="true"``, or an inline ``display:none`` style.
    """
    if tag.has_attr("hidden"):
        return True
    if str(tag.get("aria-hidden", "")).strip().lower() == "true":
        return True
    style = tag.get("style")
    if isinstance(style, list):
        style = " ".join(style)
    return bool(style and DISPLAY_NONE_PATTERN.search(style))


class NoiseFilter:
    """
    Strips elements that should not reach the Markdown output.

    Two passes run in order: non-content tags (scripts, styles, frames,
    graphics, templates) are removed, then every element flagged as hidden
    is removed together with its descendants.

    Example:
        cleaner = NoiseFilter()
        html = cleaner.clean('<p>Shown</p><p style="display:none">Not shown</p>')
    """

    def __init__(self, remove_tags: Optional[list[str]] = None, parser: str = "html.parser"):
        """
        Initialize the filter.

        Args:
            remove_tags: Tag names to remove (extends defaults)
            parser: BeautifulSoup tree builder
        """
        self._remove_tags = list(NON_CONTENT_TAGS)
        if remove_tags:
            self._remove_tags.extend(remove_tags)
        self._parser = parser

    def _remove_non_content(self, soup: BeautifulSoup) -> None:
        for el in soup.find_all(self._remove_tags):
            if not el.decomposed:
                el.decompose()

    def _remove_hidden(self, soup: BeautifulSoup) -> None:
        hidden = soup.find_all(is_hidden)
        for el in hidden:
            # Children of an already removed element are gone with it
            if not el.decomposed:
                el.decompose()
        if hidden:
            logger.debug(f"Removed {len(hidden)} hidden element(s)")

    def clean_soup(self, html: str) -> BeautifulSoup:
        soup = BeautifulSoup(html, self._parser)
        self._remove_non_content(soup)
        self._remove_hidden(soup)
        return soup

    def clean(self, html: str) -> str:
        """
        Remove noise from an HTML fragment.

        Args:
            html: HTML fragment

        Returns:
            The fragment without non-content or hidden elements
        """
        return str(self.clean_soup(html))
