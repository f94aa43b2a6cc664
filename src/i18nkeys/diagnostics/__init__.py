"""Diagnostic system for i18nkeys errors.

Provides structured error diagnostics with codes, hints, and candidate lists.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DepthLimitExceededError,
    I18nKeyError,
    InvalidContextMatchError,
    KeyNotFoundError,
    MalformedInterpolationError,
    ParameterNotProvidedError,
    SchemaError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "I18nKeyError",
    "InvalidContextMatchError",
    "KeyNotFoundError",
    "MalformedInterpolationError",
    "OutputFormat",
    "ParameterNotProvidedError",
    "SchemaError",
    "ValidationResult",
]
