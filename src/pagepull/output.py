"""Rendering of extraction results into output strings."""

import json
import logging
from typing import Callable, Optional

from .conversion.markdown import HtmlToMarkdown
from .models.options import FormatOptions, OutputFormat
from .models.result import ExtractedData, ExtractionResult

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No results found"
MARKDOWN_SEPARATOR = "\n\n---\n\n"

Renderer = Callable[[ExtractedData, ExtractionResult, FormatOptions], str]


def _render_json(data: ExtractedData, result: ExtractionResult, options: FormatOptions) -> str:
    payload = {"data": data, "count": result.count}
    if options.pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _render_lines(data: ExtractedData, result: ExtractionResult, options: FormatOptions) -> str:
    if isinstance(data, list):
        return "\n".join(data)
    return str(data)


def _render_text(data: ExtractedData, result: ExtractionResult, options: FormatOptions) -> str:
    if isinstance(data, list):
        return "\n\n".join(data)
    return str(data)


def _render_markdown(data: ExtractedData, result: ExtractionResult, options: FormatOptions) -> str:
    converter = HtmlToMarkdown()
    if isinstance(data, list):
        return MARKDOWN_SEPARATOR.join(converter.convert(html, options.base_url) for html in data)
    return converter.convert(str(data), options.base_url)


RENDERERS: dict[OutputFormat, Renderer] = {
    OutputFormat.JSON: _render_json,
    OutputFormat.LINES: _render_lines,
    OutputFormat.TEXT: _render_text,
    OutputFormat.MARKDOWN: _render_markdown,
}


def format_output(result: ExtractionResult, options: Optional[FormatOptions] = None) -> str:
    """
    Render an extraction result.

    A failed result renders as ``Error: <message>`` whatever the format, and
    a successful result without data renders as ``No results found``.

    Args:
        result: Result of an extraction call
        options: Output format options (text format if None)

    Returns:
        Rendered output; this function does not raise
    """
    options = options or FormatOptions()

    if not result.success:
        return f"Error: {result.error}"

    if result.data is None:
        return NO_RESULTS_MESSAGE

    renderer = RENDERERS.get(options.format, _render_text)
    return renderer(result.data, result, options)
