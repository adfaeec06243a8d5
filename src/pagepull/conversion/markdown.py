"""HTML to Markdown conversion."""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urljoin

import html2text
from bs4 import BeautifulSoup

from .cleaner import NoiseFilter

logger = logging.getLogger(__name__)

# <pre> contents are swapped for this token before html2text runs and put
# back as fenced blocks afterwards, so no Markdown post-processing touches code
CODE_PLACEHOLDER = "PAGEPULLCODEBLOCK{index}"
CODE_PLACEHOLDER_PATTERN = re.compile(r"\[code\][\s>]*PAGEPULLCODEBLOCK(\d+)[\s>]*\[/code\]")


class HtmlToMarkdown:
    """
    Converts HTML fragments to clean Markdown.

    Non-content and hidden elements are stripped first (see ``NoiseFilter``),
    then html2text renders the rest: ATX headings, ``**bold**``,
    ``_italic_``, inline ``[text](href)`` links, ``-`` bullets, numbered
    lists, backtick inline code and fenced code blocks.

    Example:
        converter = HtmlToMarkdown()
        converter.convert("<h1>Hello World</h1>")  # "# Hello World"
    """

    def __init__(
        self,
        body_width: int = 0,
        inline_links: bool = True,
        wrap_links: bool = False,
        ignore_images: bool = False,
        ignore_tables: bool = False,
        unicode_snob: bool = True,
        noise_filter: Optional[NoiseFilter] = None,
    ):
        """
        Initialize the Markdown converter.

        Args:
            body_width: Max line width (0 = no wrapping)
            inline_links: Use inline [text](url) vs reference style
            wrap_links: Wrap long links
            ignore_images: Skip image conversion
            ignore_tables: Skip table conversion
            unicode_snob: Use Unicode chars where possible
            noise_filter: Pre-filter for unwanted elements (uses default if None)
        """
        self._body_width = body_width
        self._inline_links = inline_links
        self._wrap_links = wrap_links
        self._ignore_images = ignore_images
        self._ignore_tables = ignore_tables
        self._unicode_snob = unicode_snob
        self._noise_filter = noise_filter or NoiseFilter()

    def _build_converter(self, base_url: str) -> html2text.HTML2Text:
        # HTML2Text accumulates output across handle() calls, so each
        # conversion gets a fresh instance
        converter = html2text.HTML2Text(baseurl=base_url, bodywidth=self._body_width)

        # Link handling
        converter.inline_links = self._inline_links
        converter.wrap_links = self._wrap_links
        converter.protect_links = False
        converter.skip_internal_links = False
        converter.use_automatic_links = False

        # Content handling
        converter.ignore_images = self._ignore_images
        converter.ignore_tables = self._ignore_tables
        converter.unicode_snob = self._unicode_snob
        converter.escape_snob = False
        converter.default_image_alt = ""

        # Markup
        converter.ul_item_mark = "-"
        converter.emphasis_mark = "_"
        converter.strong_mark = "**"
        converter.mark_code = True
        converter.single_line_break = False
        return converter

    def _extract_code_blocks(self, soup: BeautifulSoup) -> list[str]:
        """Replace the contents of every outermost <pre> with a placeholder."""
        blocks: list[str] = []
        outermost = [pre for pre in soup.find_all("pre") if pre.find_parent("pre") is None]
        for pre in outermost:
            code = pre.get_text().replace("\r\n", "\n").replace("\r", "\n")
            # A newline right after <pre> is not part of the content
            if code.startswith("\n"):
                code = code[1:]
            if code.endswith("\n"):
                code = code[:-1]
            pre.string = CODE_PLACEHOLDER.format(index=len(blocks))
            blocks.append(code)
        return blocks

    def _restore_code_blocks(self, markdown: str, blocks: list[str]) -> str:
        """Put extracted code back as fenced blocks."""

        def replace_block(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index >= len(blocks):
                return match.group(0)
            code = blocks[index]
            fence = "```"
            while fence in code:
                fence += "`"
            if not code:
                return f"{fence}\n{fence}"
            return f"{fence}\n{code}\n{fence}"

        return CODE_PLACEHOLDER_PATTERN.sub(replace_block, markdown)

    def _clean_output(self, markdown: str) -> str:
        """Clean up the converted Markdown."""
        # Normalize line endings
        markdown = markdown.replace("\r\n", "\n").replace("\r", "\n")

        # Remove trailing whitespace on each line
        markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))

        # Remove excessive blank lines
        markdown = re.sub(r"\n{3,}", "\n\n", markdown)

        return markdown.strip()

    def _fix_relative_links(self, markdown: str, base_url: str) -> str:
        """Make relative link targets absolute against ``base_url``."""

        def replace_link(match: re.Match[str]) -> str:
            text = match.group(1)
            url = match.group(2)

            # Skip anchors and already absolute URLs
            if url.startswith(("#", "http://", "https://", "mailto:", "tel:")):
                result: str = match.group(0)
                return result

            return f"[{text}]({urljoin(base_url, url)})"

        return re.sub(r"\[([^\]]+)\]\(([^)]+)\)", replace_link, markdown)

    def convert(self, html: str, base_url: Optional[str] = None) -> str:
        """
        Convert an HTML fragment to Markdown.

        Args:
            html: HTML fragment
            base_url: Page URL for resolving relative links (left as-is if None)

        Returns:
            Markdown string without leading or trailing blank lines
        """
        try:
            soup = self._noise_filter.clean_soup(html)
            code_blocks = self._extract_code_blocks(soup)
            markdown = self._build_converter(base_url or "").handle(str(soup))
            markdown = self._clean_output(markdown)
            if base_url:
                markdown = self._fix_relative_links(markdown, base_url)
            return self._restore_code_blocks(markdown, code_blocks)

        except Exception as e:
            logger.error(f"Failed to convert HTML to Markdown: {e}")
            # Plain text of the filtered tree as fallback
            soup = self._noise_filter.clean_soup(html)
            text: str = soup.get_text(separator="\n")
            return text.strip()


def html_to_markdown(html: str, base_url: Optional[str] = None) -> str:
    """Convert an HTML fragment to Markdown with default settings."""
    return HtmlToMarkdown().convert(html, base_url)
