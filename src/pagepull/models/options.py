"""Pydantic request models for extraction and output formatting."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SelectorKind(str, Enum):
    """How the selector string is interpreted."""

    CSS = "css"
    XPATH = "xpath"


class ExtractionMode(str, Enum):
    """What is read from each matched element."""

    TEXT = "text"
    HTML = "html"
    ATTRIBUTE = "attribute"


class Cardinality(str, Enum):
    """Whether the first match or every match is extracted."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class OutputFormat(str, Enum):
    """Rendering targets understood by ``format_output``."""

    JSON = "json"
    TEXT = "text"
    LINES = "lines"
    MARKDOWN = "markdown"


class ExtractionOptions(BaseModel):
    """
    Immutable description of one extraction request.

    ``wait`` and ``timeout_ms`` only apply to live pages; static HTML
    extraction ignores them. ``attribute_name`` is checked against ``mode``
    when a value is extracted, not here, so options can be built before the
    attribute is known.

    Example:
        options = ExtractionOptions(selector="li", cardinality="multiple")
    """

    selector: str = Field(..., min_length=1, description="CSS selector or XPath expression")
    selector_kind: SelectorKind = Field(SelectorKind.CSS, description="Selector language")
    mode: ExtractionMode = Field(ExtractionMode.TEXT, description="Value to read from each element")
    attribute_name: Optional[str] = Field(None, description="Attribute to read when mode is 'attribute'")
    cardinality: Cardinality = Field(Cardinality.SINGLE, description="First match or all matches")
    wait: bool = Field(True, description="Wait for the first match on live pages")
    timeout_ms: int = Field(10000, gt=0, description="Wait timeout in milliseconds (live pages only)")

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def multiple(self) -> bool:
        return self.cardinality == Cardinality.MULTIPLE


class FormatOptions(BaseModel):
    """Output rendering options."""

    format: OutputFormat = Field(OutputFormat.TEXT, description="Output format")
    pretty: bool = Field(True, description="Indent JSON output")
    base_url: Optional[str] = Field(None, description="Page URL for resolving relative Markdown links")

    model_config = {"extra": "forbid", "frozen": True}
