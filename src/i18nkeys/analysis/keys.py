"""Key enumeration over resource schemas.

Walks a namespace tree and produces every key path a lookup may use:

- Without return-objects: string and array leaf paths only. A path that
  stops at a branch is not a key; only its descendants are.
- With return-objects: branch paths are keys too.
- Segments containing the key separator are unreachable and are skipped
  along with their subtrees.
- In the v4 format, plural- and ordinal-suffixed leaves also contribute
  their unsuffixed base key (``item_one`` makes ``item`` valid).

An absent schema enumerates to the open key set, which accepts any string.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from i18nkeys.core.plural_suffix import strip_plural_suffix
from i18nkeys.enums import JsonFormat
from i18nkeys.schema.model import ResourceSchema, is_branch
from i18nkeys.types import Branch, KeyPath, Namespace

if TYPE_CHECKING:
    from i18nkeys.runtime.options import KeyOptions

__all__ = [
    "KeySet",
    "enumerate_key_prefixes",
    "enumerate_keys",
    "join_key",
]


@dataclass(frozen=True, slots=True)
class KeySet:
    """Immutable set of valid keys, or the open set that accepts any key.

    Iteration over an open set yields nothing; test ``is_open`` before
    treating the contents as exhaustive.

    Example:
        >>> keys = KeySet(frozenset({"a", "b.c"}))
        >>> "b.c" in keys
        True
        >>> "anything" in KeySet.open()
        True
    """

    keys: frozenset[KeyPath] = frozenset()
    is_open: bool = False

    @classmethod
    def open(cls) -> KeySet:
        """Key set of the absent-schema mode."""
        return cls(frozenset(), is_open=True)

    @classmethod
    def of(cls, keys: Iterable[KeyPath]) -> KeySet:
        """Closed key set from any iterable."""
        return cls(frozenset(keys))

    def __contains__(self, key: object) -> bool:
        if self.is_open:
            return isinstance(key, str)
        return key in self.keys

    def __iter__(self) -> Iterator[KeyPath]:
        return iter(sorted(self.keys))

    def __len__(self) -> int:
        return len(self.keys)

    def union(self, other: KeySet) -> KeySet:
        """Union; open if either side is open."""
        if self.is_open or other.is_open:
            return KeySet.open()
        return KeySet(self.keys | other.keys)


def join_key(prefix: KeyPath | None, key: str, separator: str | Literal[False]) -> KeyPath:
    """Join a parent path and a child key with the key separator.

    Example:
        >>> join_key("settings", "theme", ".")
        'settings.theme'
        >>> join_key(None, "theme", ".")
        'theme'
    """
    if not prefix:
        return key
    if separator is False:
        msg = "Cannot join nested keys while the key separator is disabled"
        raise ValueError(msg)
    return f"{prefix}{separator}{key}"


def _walk(
    branch: Branch,
    prefix: KeyPath | None,
    options: KeyOptions,
    with_return_objects: bool,
    with_leaves: bool,
    out: set[KeyPath],
) -> None:
    expand_plurals = options.json_format is JsonFormat.V4
    separator = options.key_separator
    for key, child in branch.items():
        # A segment containing the key separator cannot be addressed by any path
        if separator is not False and separator in key:
            continue
        path = join_key(prefix, key, separator)
        if is_branch(child):
            if with_return_objects:
                out.add(path)
            # Without a key separator nested paths cannot be expressed
            if separator is not False:
                _walk(child, path, options, with_return_objects, with_leaves, out)
            continue
        if not with_leaves:
            continue
        out.add(path)
        if expand_plurals:
            base = strip_plural_suffix(key, options.plural_separator)
            if base is not None:
                out.add(join_key(prefix, base, separator))


def enumerate_keys(
    schema: ResourceSchema,
    namespace: Namespace,
    options: KeyOptions,
    *,
    with_return_objects: bool = False,
) -> KeySet:
    """Enumerate every valid key path of one namespace.

    Args:
        schema: Resource schema
        namespace: Namespace to enumerate
        options: Separators and json format
        with_return_objects: Also emit paths that stop at branches

    Returns:
        Closed KeySet, empty if the namespace is not in the schema; the open
        KeySet if the schema is absent

    Example:
        >>> schema = ResourceSchema({"ns": {"a": "A", "b": {"c": "C"}}})
        >>> sorted(enumerate_keys(schema, "ns", KeyOptions()))
        ['a', 'b.c']
        >>> sorted(enumerate_keys(schema, "ns", KeyOptions(), with_return_objects=True))
        ['a', 'b', 'b.c']
    """
    if schema.is_absent:
        return KeySet.open()
    tree = schema.get(namespace)
    if tree is None:
        return KeySet()
    out: set[KeyPath] = set()
    _walk(tree, None, options, with_return_objects, True, out)
    return KeySet(frozenset(out))


def enumerate_key_prefixes(
    schema: ResourceSchema, namespace: Namespace, options: KeyOptions
) -> KeySet:
    """Enumerate branch paths, i.e. valid key-prefix scopes of a namespace."""
    if schema.is_absent:
        return KeySet.open()
    tree = schema.get(namespace)
    if tree is None:
        return KeySet()
    out: set[KeyPath] = set()
    _walk(tree, None, options, True, False, out)
    return KeySet(frozenset(out))
