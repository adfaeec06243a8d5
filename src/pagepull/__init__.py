"""
pagepull - Extract content from web pages with CSS or XPath selectors.

Usage:
    from pagepull import ExtractionOptions, FormatOptions, extract_from_html, format_output

    result = extract_from_html(
        "<ul><li>Item 1</li><li>Item 2</li></ul>",
        ExtractionOptions(selector="li", cardinality="multiple"),
    )
    print(format_output(result, FormatOptions(format="json")))
"""

__version__ = "0.1.0"

from .conversion import HtmlToMarkdown, html_to_markdown
from .extraction import extract_from_html, extract_from_page
from .models import (
    Cardinality,
    ExtractionMode,
    ExtractionOptions,
    ExtractionResult,
    FormatOptions,
    OutputFormat,
    SelectorKind,
)
from .output import format_output

__all__ = [
    "__version__",
    # Extraction
    "extract_from_html",
    "extract_from_page",
    # Output
    "format_output",
    "html_to_markdown",
    "HtmlToMarkdown",
    # Models
    "Cardinality",
    "ExtractionMode",
    "ExtractionOptions",
    "ExtractionResult",
    "FormatOptions",
    "OutputFormat",
    "SelectorKind",
]
