"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Lookup failures are never raised by the engine's public lookup methods:
they are returned in ``(result, errors)`` tuples so the calling layer can
apply its own fallback policy.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DepthLimitExceededError",
    "I18nKeyError",
    "InvalidContextMatchError",
    "KeyNotFoundError",
    "MalformedInterpolationError",
    "ParameterNotProvidedError",
    "SchemaError",
]


class I18nKeyError(Exception):
    """Base exception for all i18nkeys errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nKeyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def is_warning(self) -> bool:
        """True when the attached diagnostic has warning severity."""
        return self.diagnostic is not None and self.diagnostic.severity == "warning"


class KeyNotFoundError(I18nKeyError):
    """No schema entry matches any candidate key.

    Raised (or returned) after plural, context and namespace expansion has
    been exhausted. Also used when the key addresses a sub-tree while
    return-objects mode is off.

    Fallback: the lookup layer returns null, the default value, or the key.
    """


class InvalidContextMatchError(KeyNotFoundError):
    """A context token was supplied but no key variant contains it.

    Subclass of KeyNotFoundError: callers that only care about "did it
    resolve" can catch the base class.
    """


class MalformedInterpolationError(I18nKeyError):
    """Unbalanced interpolation delimiters in a resource string.

    Recoverable: the unterminated token is ignored and scanning continues.
    """


class ParameterNotProvidedError(I18nKeyError):
    """A required interpolation parameter was not supplied by the caller."""


class SchemaError(I18nKeyError):
    """Resource schema is structurally invalid.

    Raised at construction time (fail-fast). Cycles, unsupported node
    types, non-string keys, and excessive nesting all raise this error.
    """


class DepthLimitExceededError(SchemaError):
    """Raised when schema nesting exceeds the configured maximum depth."""
