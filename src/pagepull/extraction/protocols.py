"""Protocol definitions for document backends."""

from typing import Any, Optional, Protocol

from ..models.options import ExtractionMode, SelectorKind


class DocumentBackend(Protocol):
    """
    Protocol for documents that can be queried synchronously.

    Implementations wrap a parsed markup tree. Elements returned by
    ``resolve`` are borrowed handles that are only valid for the current
    extraction call.
    """

    def supports(self, kind: SelectorKind) -> bool:
        """Return True if ``kind`` selectors can be evaluated."""
        ...

    def resolve(self, selector: str, kind: SelectorKind) -> list[Any]:
        """
        Find elements matching a selector.

        Args:
            selector: Selector string, forwarded unchanged to the backend
            kind: Selector language

        Returns:
            Matched elements in document order (empty if none match)
        """
        ...

    def count(self, selector: str, kind: SelectorKind) -> int:
        """Return the number of elements currently matching ``selector``."""
        ...

    def extract_value(
        self,
        element: Any,
        mode: ExtractionMode,
        attribute_name: Optional[str] = None,
    ) -> Optional[str]:
        """
        Read one value from a matched element.

        Raises:
            MissingAttributeName: If mode is ATTRIBUTE and no name was given
        """
        ...


class AsyncDocumentBackend(Protocol):
    """
    Protocol for documents backed by a rendering runtime.

    Same capabilities as ``DocumentBackend`` but every query suspends, and
    callers can wait for a selector to start matching.
    """

    def supports(self, kind: SelectorKind) -> bool:
        """Return True if ``kind`` selectors can be evaluated."""
        ...

    async def wait_for_match(self, selector: str, kind: SelectorKind, timeout_ms: int) -> None:
        """
        Block until at least one element matches.

        Raises:
            ExtractionTimeout: If nothing matched within ``timeout_ms``
        """
        ...

    async def resolve(self, selector: str, kind: SelectorKind) -> list[Any]:
        """Find elements matching a selector, in document order."""
        ...

    async def count(self, selector: str, kind: SelectorKind) -> int:
        """Return the number of elements currently matching ``selector``."""
        ...

    async def extract_value(
        self,
        element: Any,
        mode: ExtractionMode,
        attribute_name: Optional[str] = None,
    ) -> Optional[str]:
        """Read one value from a matched element."""
        ...
