"""
Custom exception types for the Gherkin AST builder.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from gherkin_ast.builder.core.tokens import Location


class ErrorCode(Enum):

    # --- Table Errors ---
    INCONSISTENT_CELL_COUNT = "inconsistent cell count within the table"

    # --- Event Stream Errors ---
    # Raised by the driver when a recorded stream does not nest correctly.
    UNBALANCED_EVENT_STREAM = "Unbalanced event stream: {details}"

    # --- Aggregates ---
    MULTIPLE_ERRORS = "Parser errors:\n{details}"


class GherkinError(Exception):
    def __init__(
        self,
        code: ErrorCode,
        location: Optional["Location"] = None,
        **kwargs,
    ):
        self.code = code
        self.location = location
        self.details = kwargs

        # The template (e.g. "Unbalanced event stream: {details}") is populated
        # with any extra data it needs from kwargs.
        core_message = code.value.format(**kwargs)

        location_prefix = ""
        if location:
            location_prefix = f"({location.line}:{location.column}): "

        self.message = location_prefix + core_message

        super().__init__(self.message)

    def as_attachment(self, uri: str) -> Dict[str, Any]:
        """Renders the error as an out-of-band diagnostic for the given source."""
        source: Dict[str, Any] = {"uri": uri}
        if self.location:
            source["location"] = {"line": self.location.line, "column": self.location.column}
        return {"data": self.message, "source": source}


class AstBuilderError(GherkinError):
    """
    Raised while closing a rule. `partial_result` holds whatever the rule
    managed to build, so the caller can keep assembling the document.
    """

    def __init__(self, code: ErrorCode, location: Optional["Location"] = None, partial_result: Any = None, **kwargs):
        self.partial_result = partial_result
        super().__init__(code, location, **kwargs)


class InconsistentCellCountError(AstBuilderError):
    def __init__(self, location: "Location", partial_result: Any = None):
        super().__init__(ErrorCode.INCONSISTENT_CELL_COUNT, location, partial_result=partial_result)


class CompositeParserError(GherkinError):
    def __init__(self, errors: List[GherkinError]):
        self.errors = list(errors)
        super().__init__(ErrorCode.MULTIPLE_ERRORS, details="\n".join(str(e) for e in self.errors))


class InternalBuilderError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
