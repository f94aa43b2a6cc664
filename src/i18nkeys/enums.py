"""Enumerations for i18nkeys type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class JsonFormat(StrEnum):
    """Resource JSON format version.

    StrEnum provides automatic string conversion: str(JsonFormat.V4) == "v4"
    """

    V3 = "v3"
    """Legacy format: plural variants are addressed only by full suffixed key."""

    V4 = "v4"
    """CLDR suffixes: item_one / item_other may be addressed as item."""


class ValueShape(StrEnum):
    """Shape of a resolved resource value."""

    STRING = "string"
    """String leaf: the only shape that carries interpolation parameters."""

    ARRAY = "array"
    """Array of strings: opaque leaf, never descended into."""

    OBJECT = "object"
    """Sub-tree: only returned in return-objects mode."""

    OPEN = "open"
    """No schema configured: value shape is unconstrained."""


__all__ = [
    "JsonFormat",
    "ValueShape",
]
