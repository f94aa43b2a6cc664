"""Value resolution: from a key path to the schema value it addresses.

The resolver walks the key segment by segment through branches. At the
final segment it tries the plural candidates (ordinal, cardinal, base) and
takes the first one present. It raises KeyNotFoundError when a segment is
missing, when a leaf is found where a branch was expected, or when the key
addresses a branch while return-objects mode is off.

The resolver is pure: it never logs and never applies fallback policy.
The engine collects its errors into ``(result, errors)`` tuples.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nkeys.diagnostics import ErrorTemplate, KeyNotFoundError
from i18nkeys.enums import ValueShape
from i18nkeys.runtime.options import KeyOptions
from i18nkeys.runtime.plural_rules import expand_for_lookup
from i18nkeys.schema.model import is_array_leaf, is_branch
from i18nkeys.types import Branch, KeyPath, Namespace, Node

__all__ = ["ValueResolution", "resolve_value", "split_key"]


@dataclass(frozen=True, slots=True)
class ValueResolution:
    """Outcome of a successful value resolution.

    Attributes:
        value: The addressed node; None in open mode
        shape: Shape of the value
        exact_key: Concrete key path, including any plural suffix
    """

    value: Node | None
    shape: ValueShape
    exact_key: KeyPath


def split_key(key: KeyPath, options: KeyOptions) -> tuple[str, ...]:
    """Split a key path into segments.

    Example:
        >>> split_key("a.b.c", KeyOptions())
        ('a', 'b', 'c')
        >>> split_key("a.b.c", KeyOptions(key_separator=False))
        ('a.b.c',)
    """
    if options.key_separator is False:
        return (key,)
    return tuple(key.split(options.key_separator))


def _shape_of(node: Node) -> ValueShape:
    if is_branch(node):
        return ValueShape.OBJECT
    if is_array_leaf(node):
        return ValueShape.ARRAY
    return ValueShape.STRING


def resolve_value(
    tree: Branch | None,
    key: KeyPath,
    options: KeyOptions,
    *,
    plural_category: str | None = None,
    return_objects: bool = False,
    namespace: Namespace | None = None,
) -> ValueResolution:
    """Resolve a key path within one namespace tree.

    Args:
        tree: Namespace tree, or None for the open (absent schema) mode
        key: Key path, already prefixed and context-qualified
        options: Separators
        plural_category: CLDR category to try before the base key
        return_objects: Accept branch results
        namespace: Namespace name for diagnostics

    Returns:
        ValueResolution for the first matching candidate

    Raises:
        KeyNotFoundError: If no candidate resolves, or the match is a branch
            while return_objects is False
        ValueError: If plural_category is not a CLDR category name
    """
    if tree is None:
        return ValueResolution(value=None, shape=ValueShape.OPEN, exact_key=key)

    *parents, last = split_key(key, options)
    node: Node = tree
    for segment in parents:
        if not is_branch(node) or segment not in node:
            raise KeyNotFoundError(ErrorTemplate.key_not_found(key, namespace))
        node = node[segment]

    if not is_branch(node):
        raise KeyNotFoundError(ErrorTemplate.key_not_found(key, namespace))

    for candidate in expand_for_lookup(last, plural_category, options.plural_separator):
        if candidate not in node:
            continue
        value = node[candidate]
        exact_key = key[: len(key) - len(last)] + candidate
        shape = _shape_of(value)
        if shape is ValueShape.OBJECT and not return_objects:
            raise KeyNotFoundError(ErrorTemplate.object_not_allowed(exact_key, namespace))
        return ValueResolution(value=value, shape=shape, exact_key=exact_key)

    raise KeyNotFoundError(ErrorTemplate.key_not_found(key, namespace))
