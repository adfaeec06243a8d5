"""Normalized result shared by every extraction backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

ExtractedData = Union[str, list[str], None]


@dataclass
class ExtractionResult:
    """
    Outcome of one extraction call.

    Attributes:
        success: False when the extraction failed; ``error`` then holds the reason
        data: None, a single string (single cardinality) or a list of strings
            in document order (multiple cardinality)
        count: Number of non-empty values produced
        error: Failure message, only set when ``success`` is False
    """

    success: bool
    data: ExtractedData = None
    count: int = 0
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> ExtractionResult:
        return cls(success=False, data=None, count=0, error=message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "success": self.success,
            "data": self.data,
            "count": self.count,
        }
        if self.error is not None:
            result["error"] = self.error
        return result
