"""Content conversion for pagepull (noise filtering, HTML to Markdown)."""

from .cleaner import NON_CONTENT_TAGS, NoiseFilter, is_hidden
from .markdown import HtmlToMarkdown, html_to_markdown

__all__ = [
    # Filtering
    "NON_CONTENT_TAGS",
    "NoiseFilter",
    "is_hidden",
    # Conversion
    "HtmlToMarkdown",
    "html_to_markdown",
]
