"""Shared constants for i18nkeys.

This module provides centralized configuration constants used across
schema, analysis and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for schema traversal
- Separator defaults: Default key, namespace, plural and context separators
- Plural categories: CLDR category names and the ordinal marker
- Logging limits: Truncation of keys and values in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Separator defaults
    "DEFAULT_KEY_SEPARATOR",
    "DEFAULT_NS_SEPARATOR",
    "DEFAULT_PLURAL_SEPARATOR",
    "DEFAULT_CONTEXT_SEPARATOR",
    "DEFAULT_INTERPOLATION_PREFIX",
    "DEFAULT_INTERPOLATION_SUFFIX",
    "DEFAULT_NAMESPACE",
    "DEFAULT_LOCALE",
    # Plural categories
    "PLURAL_CATEGORIES",
    "ORDINAL_MARKER",
    # Logging limits
    "LOG_TRUNCATE_WARNING",
    "LOG_TRUNCATE_DEBUG",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth of a resource schema.
# Resource files are static configuration trees; real bundles rarely nest
# deeper than 5-6 levels. 100 levels is malformed or programmatically
# constructed input and is rejected before it can exhaust the stack.
MAX_DEPTH: int = 100

# ============================================================================
# SEPARATOR DEFAULTS
# ============================================================================

DEFAULT_KEY_SEPARATOR: str = "."
DEFAULT_NS_SEPARATOR: str = ":"
DEFAULT_PLURAL_SEPARATOR: str = "_"
DEFAULT_CONTEXT_SEPARATOR: str = "_"
DEFAULT_INTERPOLATION_PREFIX: str = "{{"
DEFAULT_INTERPOLATION_SUFFIX: str = "}}"

# Namespace used when a request names none.
DEFAULT_NAMESPACE: str = "translation"

# Locale reported in detailed results and used for plural selection.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# CLDR plural categories in canonical order.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Token placed between two plural separators to mark ordinal variants:
# place_ordinal_one, place_ordinal_two, ...
ORDINAL_MARKER: str = "ordinal"

# ============================================================================
# LOGGING LIMITS
# ============================================================================

# Warnings show more context as they're surfaced to users.
# Debug messages are high-volume, shorter keeps logs manageable.
LOG_TRUNCATE_WARNING: int = 100
LOG_TRUNCATE_DEBUG: int = 50
