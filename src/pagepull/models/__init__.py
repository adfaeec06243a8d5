"""Pagepull request, result and configuration models."""

from .config import ConnectConfig, LaunchConfig, Viewport, WaitUntil
from .options import (
    Cardinality,
    ExtractionMode,
    ExtractionOptions,
    FormatOptions,
    OutputFormat,
    SelectorKind,
)
from .result import ExtractedData, ExtractionResult

__all__ = [
    # Options
    "Cardinality",
    "ExtractionMode",
    "ExtractionOptions",
    "FormatOptions",
    "OutputFormat",
    "SelectorKind",
    # Results
    "ExtractedData",
    "ExtractionResult",
    # Config
    "ConnectConfig",
    "LaunchConfig",
    "Viewport",
    "WaitUntil",
]
