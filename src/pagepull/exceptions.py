"""Exception hierarchy for extraction failures.

The extraction engine catches every one of these and turns it into a failed
``ExtractionResult``; they never reach callers of ``extract_from_html`` or
``extract_from_page``.
"""


class ExtractionError(Exception):
    """Base class for failures raised while extracting from a document."""

    code = "ExtractionError"


class UnsupportedSelectorCombination(ExtractionError):
    """Selector kind cannot be evaluated by the chosen backend (XPath on static HTML)."""

    code = "UnsupportedSelectorCombination"


class ExtractionTimeout(ExtractionError):
    """No element matched the selector before the wait timeout elapsed."""

    code = "Timeout"

    def __init__(self, selector: str, timeout_ms: int):
        self.selector = selector
        self.timeout_ms = timeout_ms
        super().__init__(f"Timeout: no element matched '{selector}' within {timeout_ms}ms")


class MissingAttributeName(ExtractionError):
    """Attribute extraction was requested without naming the attribute."""

    code = "MissingAttributeName"

    def __init__(self, message: str = "Attribute name required for attribute extraction"):
        super().__init__(f"Missing attribute name: {message}")


class BackendFault(ExtractionError):
    """Any other failure reported by the underlying document library."""

    code = "BackendFault"

    def __init__(self, message: str = "Unknown error"):
        self.detail = message
        super().__init__(f"Backend fault: {message}")
