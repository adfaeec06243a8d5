"""Selector-based extraction from static HTML and live pages."""

from .engine import (
    extract_from_document,
    extract_from_html,
    extract_from_live_document,
    extract_from_page,
)
from .live import PageDocument
from .protocols import AsyncDocumentBackend, DocumentBackend
from .static import HtmlDocument

__all__ = [
    # Protocols
    "DocumentBackend",
    "AsyncDocumentBackend",
    # Backends
    "HtmlDocument",
    "PageDocument",
    # Engine
    "extract_from_document",
    "extract_from_html",
    "extract_from_live_document",
    "extract_from_page",
]
