"""Diagnostic codes and data structures.

Defines error codes, categories, and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for diagnostics.

    Inherits from ``StrEnum`` so serialization and log aggregation receive
    plain strings (``"lookup"``, ``"schema"``) rather than enum reprs.

    Categories:
        LOOKUP: Key could not be resolved against the schema
        CONTEXT: Context token supplied but no variant carries it
        INTERPOLATION: Placeholder scanning or parameter problems
        SCHEMA: Structural problem in a resource schema
    """

    LOOKUP = "lookup"
    CONTEXT = "context"
    INTERPOLATION = "interpolation"
    SCHEMA = "schema"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing keys, disallowed shapes)
        2000-2999: Interpolation errors and warnings
        5000-5099: Schema errors (construction fails)
        5100-5199: Schema warnings (validator only)
    """

    # Lookup errors (1000-1999)
    KEY_NOT_FOUND = 1001
    CONTEXT_NOT_MATCHED = 1002
    OBJECT_NOT_ALLOWED = 1003
    INVALID_KEY = 1004

    # Interpolation (2000-2999)
    MALFORMED_INTERPOLATION = 2001
    EMPTY_INTERPOLATION = 2002
    PARAMETER_NOT_PROVIDED = 2003

    # Schema errors (5000-5099)
    SCHEMA_INVALID_KEY = 5001
    SCHEMA_INVALID_NODE = 5002
    SCHEMA_CYCLE = 5003
    SCHEMA_DEPTH_EXCEEDED = 5004

    # Schema warnings (5100-5199)
    SCHEMA_UNREACHABLE_KEY = 5101
    SCHEMA_NAMESPACE_SEPARATOR_IN_KEY = 5102
    SCHEMA_PLURAL_MISSING_OTHER = 5103
    SCHEMA_PLURAL_SUFFIX_IN_V3 = 5104

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the numeric range of the code."""
        if self is DiagnosticCode.CONTEXT_NOT_MATCHED:
            return ErrorCategory.CONTEXT
        if self.value < 2000:
            return ErrorCategory.LOOKUP
        if self.value < 3000:
            return ErrorCategory.INTERPOLATION
        return ErrorCategory.SCHEMA


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (linters, editor integrations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key: Lookup key or schema path the diagnostic refers to
        namespace: Namespace the diagnostic refers to
        candidates: Fully-qualified keys that were tried, in order
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key: str | None = None
    namespace: str | None = None
    candidates: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[KEY_NOT_FOUND]: Key 'greeting' not found
              --> namespace: common
              = tried: common:greeting, fallback:greeting
              = help: Check that the key exists in the resource schema

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
