"""i18nkeys - Schema-checked translation key resolution.

Given a tree of translation resources grouped by namespace, i18nkeys
enumerates the keys a lookup may use, resolves a key (with namespace,
key prefix, context and plural rules applied) to the value it addresses,
and reports the interpolation parameters that value requires. Failed
lookups return structured diagnostics instead of raising.

Public API:
    KeyEngine - Key enumeration, resolution and lookup against a schema
    KeyOptions - Separator and behavior configuration
    ResourceSchema - Immutable namespace trees
    ResolutionRequest - One lookup request
    validate_schema - Standalone schema checks for CI and tooling

Exceptions:
    I18nKeyError - Base exception class
    KeyNotFoundError - No candidate resolved
    InvalidContextMatchError - Key exists but not with the requested context
    MalformedInterpolationError - Placeholder syntax problem (warning)
    ParameterNotProvidedError - Required parameter missing (warning)
    SchemaError - Structurally invalid resources

Submodules:
    i18nkeys.analysis - Key enumeration over schemas
    i18nkeys.introspection - Interpolation placeholder extraction
    i18nkeys.diagnostics - Error types, templates and formatting
    i18nkeys.runtime - Options, plural rules, resolver and engine
"""

# Essential Public API - Minimal exports for clean namespace
from .analysis import KeySet
from .diagnostics import (
    I18nKeyError,
    InvalidContextMatchError,
    KeyNotFoundError,
    MalformedInterpolationError,
    ParameterNotProvidedError,
    SchemaError,
)
from .enums import JsonFormat, ValueShape
from .introspection import extract_parameters
from .runtime import (
    DetailedResult,
    KeyEngine,
    KeyOptions,
    ResolutionRequest,
    ResolutionResult,
    ScopedTranslator,
)
from .schema import ResourceSchema
from .validation import validate_schema

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("i18nkeys")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DetailedResult",
    "I18nKeyError",
    "InvalidContextMatchError",
    "JsonFormat",
    "KeyEngine",
    "KeyNotFoundError",
    "KeyOptions",
    "KeySet",
    "MalformedInterpolationError",
    "ParameterNotProvidedError",
    "ResolutionRequest",
    "ResolutionResult",
    "ResourceSchema",
    "ScopedTranslator",
    "SchemaError",
    "ValueShape",
    "__version__",
    "extract_parameters",
    "validate_schema",
]
