"""Separator and behavior options for key resolution.

Provides a single frozen dataclass that encapsulates every separator and
flag the key engine consumes. Options are validated once at construction
and are read-only thereafter.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from i18nkeys.constants import (
    DEFAULT_CONTEXT_SEPARATOR,
    DEFAULT_INTERPOLATION_PREFIX,
    DEFAULT_INTERPOLATION_SUFFIX,
    DEFAULT_KEY_SEPARATOR,
    DEFAULT_NAMESPACE,
    DEFAULT_NS_SEPARATOR,
    DEFAULT_PLURAL_SEPARATOR,
)
from i18nkeys.enums import JsonFormat
from i18nkeys.types import Namespace, NamespaceSelector

__all__ = ["KeyOptions", "as_namespace_tuple"]


def as_namespace_tuple(
    value: Namespace | Sequence[Namespace] | Literal[False] | None,
) -> tuple[Namespace, ...]:
    """Normalize a namespace selector to an ordered, de-duplicated tuple.

    ``False``, ``None`` and empty sequences yield an empty tuple.

    Example:
        >>> as_namespace_tuple("common")
        ('common',)
        >>> as_namespace_tuple(["a", "b", "a"])
        ('a', 'b')
        >>> as_namespace_tuple(False)
        ()
    """
    if value is None or value is False:
        return ()
    if isinstance(value, str):
        return (value,)
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return tuple(dict.fromkeys(value))


@dataclass(frozen=True, slots=True)
class KeyOptions:
    """Immutable separator and behavior configuration.

    All fields have defaults matching the common JSON resource conventions;
    ``KeyOptions()`` is a usable configuration.

    Attributes:
        key_separator: Joins nested key segments. ``False`` disables nesting
            and treats every key as one flat identifier.
        ns_separator: Separates an explicit namespace from the key.
            ``False`` disables namespace-qualified keys.
        plural_separator: Precedes plural and ordinal suffixes.
        context_separator: Precedes the context token.
        interpolation_prefix: Opening placeholder delimiter.
        interpolation_suffix: Closing placeholder delimiter.
        json_format: Resource format version; ``v4`` makes plural leaves
            addressable by their unsuffixed base key.
        return_null: Failed lookups yield None instead of a display fallback.
        return_objects: Keys addressing sub-trees are valid and resolve to
            the sub-tree.
        fallback_ns: Namespace(s) searched after the primary ones.
            ``False`` disables fallback.
        default_ns: Namespace(s) used when a request names none.

    Raises:
        ValueError: If a separator or delimiter is empty, if the key and
            namespace separators collide with each other or with the plural
            or context separators, or if default_ns is empty.

    Example:
        >>> options = KeyOptions(key_separator="/", fallback_ns=["common"])
        >>> options.fallback_ns
        ('common',)
    """

    key_separator: str | Literal[False] = DEFAULT_KEY_SEPARATOR
    ns_separator: str | Literal[False] = DEFAULT_NS_SEPARATOR
    plural_separator: str = DEFAULT_PLURAL_SEPARATOR
    context_separator: str = DEFAULT_CONTEXT_SEPARATOR
    interpolation_prefix: str = DEFAULT_INTERPOLATION_PREFIX
    interpolation_suffix: str = DEFAULT_INTERPOLATION_SUFFIX
    json_format: JsonFormat = JsonFormat.V4
    return_null: bool = False
    return_objects: bool = False
    fallback_ns: Namespace | tuple[Namespace, ...] | Literal[False] = False
    default_ns: NamespaceSelector = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        """Normalize selectors and validate separators."""
        # Frozen dataclass: normalization goes through object.__setattr__
        object.__setattr__(self, "json_format", JsonFormat(self.json_format))
        fallback = as_namespace_tuple(self.fallback_ns)
        object.__setattr__(self, "fallback_ns", fallback or False)
        default = as_namespace_tuple(self.default_ns)
        if not default:
            msg = "default_ns must name at least one namespace"
            raise ValueError(msg)
        object.__setattr__(self, "default_ns", default[0] if len(default) == 1 else default)

        for name in (
            "plural_separator",
            "context_separator",
            "interpolation_prefix",
            "interpolation_suffix",
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                msg = f"{name} must be a non-empty string"
                raise ValueError(msg)

        structural: dict[str, str] = {}
        for name in ("key_separator", "ns_separator"):
            value = getattr(self, name)
            if value is False:
                continue
            if not isinstance(value, str) or not value:
                msg = f"{name} must be a non-empty string or False"
                raise ValueError(msg)
            structural[name] = value

        if len(set(structural.values())) < len(structural):
            msg = "key_separator and ns_separator must differ"
            raise ValueError(msg)
        for name, value in structural.items():
            if value in (self.plural_separator, self.context_separator):
                msg = f"{name} must differ from the plural and context separators"
                raise ValueError(msg)

    @property
    def default_namespaces(self) -> tuple[Namespace, ...]:
        """default_ns as a tuple."""
        return as_namespace_tuple(self.default_ns)

    @property
    def fallback_namespaces(self) -> tuple[Namespace, ...]:
        """fallback_ns as a tuple (empty when disabled)."""
        return as_namespace_tuple(self.fallback_ns)
