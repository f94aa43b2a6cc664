"""Type aliases for the resource-key domain.

Provides semantic type aliases used throughout the package and by user
code when annotating engine call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "ArrayLeaf",
    "Branch",
    "KeyPath",
    "LocaleCode",
    "Namespace",
    "Node",
    "NamespaceSelector",
]

type Namespace = str
"""Name of a top-level schema partition (e.g., 'common', 'errors')."""

type KeyPath = str
"""Key segments joined by the key separator (e.g., 'settings.theme')."""

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'en', 'lv_LV', 'pt-BR')."""

type ArrayLeaf = tuple[str, ...]
"""Array of strings: an opaque leaf, never descended into."""

type Node = str | ArrayLeaf | Branch
"""A schema node: string leaf, array leaf, or branch."""

type Branch = Mapping[str, Node]
"""Mapping from child key to child node."""

type NamespaceSelector = Namespace | tuple[Namespace, ...]
"""Single namespace or ordered namespace list."""
