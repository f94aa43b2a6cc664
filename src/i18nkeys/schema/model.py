"""In-memory resource schema model.

A ResourceSchema maps namespace names to trees of string leaves, array
leaves and nested branches. Input mappings (typically decoded JSON) are
deep-frozen at construction: branches become MappingProxyType views over
private dicts and arrays become tuples, so a constructed schema can be
shared across threads without copying.

Construction is fail-fast. Non-string keys, unsupported value types,
cycles and excessive nesting raise SchemaError.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import TypeIs

from i18nkeys.constants import MAX_DEPTH
from i18nkeys.core.depth_guard import DepthGuard
from i18nkeys.diagnostics import ErrorTemplate, SchemaError
from i18nkeys.types import ArrayLeaf, Branch, Namespace, Node

__all__ = [
    "ResourceSchema",
    "freeze_namespace",
    "is_array_leaf",
    "is_branch",
    "is_string_leaf",
]


def is_branch(node: object) -> TypeIs[Branch]:
    """Check whether a node is a branch (mapping of child nodes)."""
    return isinstance(node, Mapping)


def is_array_leaf(node: object) -> TypeIs[ArrayLeaf]:
    """Check whether a node is an array leaf."""
    return isinstance(node, tuple)


def is_string_leaf(node: object) -> TypeIs[str]:
    """Check whether a node is a string leaf."""
    return isinstance(node, str)


def _describe_path(path: tuple[str, ...]) -> str:
    return "/".join(path) if path else "<root>"


def _freeze(
    value: object,
    path: tuple[str, ...],
    guard: DepthGuard,
    active: set[int],
) -> Node:
    """Deep-freeze one node, validating structure on the way down."""
    match value:
        case str():
            return value
        case Mapping():
            marker = id(value)
            if marker in active:
                raise SchemaError(ErrorTemplate.schema_cycle(_describe_path(path)))
            active.add(marker)
            try:
                with guard:
                    children: dict[str, Node] = {}
                    for key, child in value.items():
                        if not isinstance(key, str) or not key:
                            raise SchemaError(
                                ErrorTemplate.schema_invalid_key(
                                    _describe_path(path), type(key).__name__
                                )
                            )
                        children[key] = _freeze(child, (*path, key), guard, active)
            finally:
                active.discard(marker)
            return MappingProxyType(children)
        case Sequence() if not isinstance(value, (bytes, bytearray)):
            items = tuple(value)
            for item in items:
                if not isinstance(item, str):
                    raise SchemaError(
                        ErrorTemplate.schema_invalid_node(
                            _describe_path(path), f"list[{type(item).__name__}]"
                        )
                    )
            return items
        case _:
            raise SchemaError(
                ErrorTemplate.schema_invalid_node(_describe_path(path), type(value).__name__)
            )


def freeze_namespace(
    namespace: Namespace, data: Mapping[str, object], *, max_depth: int = MAX_DEPTH
) -> Branch:
    """Validate and deep-freeze the tree of a single namespace.

    Args:
        namespace: Namespace name (used in error paths)
        data: Nested mapping of string keys to strings, string lists or mappings
        max_depth: Maximum branch nesting depth

    Returns:
        Read-only branch

    Raises:
        SchemaError: If the tree is not a mapping, contains unsupported
            values, non-string keys, a cycle, or exceeds max_depth
    """
    if not isinstance(data, Mapping):
        raise SchemaError(ErrorTemplate.schema_invalid_node(namespace, type(data).__name__))
    return _freeze(  # type: ignore[return-value]  # Mapping input yields a branch
        data, (namespace,), DepthGuard(max_depth=max_depth), set()
    )


class ResourceSchema:
    """Immutable set of namespace trees.

    A schema is either *closed* (constructed from data, possibly with zero
    namespaces) or *absent* (``ResourceSchema.absent()``). An absent schema
    is the documented open mode: every key is accepted and no parameter
    constraints are derived.

    Thread Safety:
        Instances never change after construction. Replacing resources means
        constructing a new schema and swapping the reference.

    Example:
        >>> schema = ResourceSchema({
        ...     "common": {"hello": "Hello {{name}}", "menu": {"open": "Open"}},
        ... })
        >>> schema.namespaces
        ('common',)
        >>> schema.get("common")["menu"]["open"]
        'Open'
    """

    __slots__ = ("_namespaces",)

    def __init__(
        self,
        data: Mapping[Namespace, Mapping[str, object]],
        *,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Build a schema from plain nested mappings.

        Args:
            data: Mapping of namespace name to its resource tree
            max_depth: Maximum branch nesting depth per namespace

        Raises:
            SchemaError: On any structural problem (see freeze_namespace)
        """
        if not isinstance(data, Mapping):
            raise SchemaError(ErrorTemplate.schema_invalid_node("<root>", type(data).__name__))
        namespaces: dict[Namespace, Branch] = {}
        for namespace, tree in data.items():
            if not isinstance(namespace, str) or not namespace:
                raise SchemaError(
                    ErrorTemplate.schema_invalid_key("<root>", type(namespace).__name__)
                )
            namespaces[namespace] = freeze_namespace(namespace, tree, max_depth=max_depth)
        self._namespaces: Mapping[Namespace, Branch] | None = MappingProxyType(namespaces)

    @classmethod
    def absent(cls) -> ResourceSchema:
        """Create the open-mode schema (no resources configured)."""
        schema = cls({})
        schema._namespaces = None
        return schema

    @property
    def is_absent(self) -> bool:
        """True for the open-mode schema."""
        return self._namespaces is None

    @property
    def namespaces(self) -> tuple[Namespace, ...]:
        """Namespace names in insertion order (empty when absent)."""
        if self._namespaces is None:
            return ()
        return tuple(self._namespaces)

    def get(self, namespace: Namespace) -> Branch | None:
        """Return the tree of a namespace, or None if not configured."""
        if self._namespaces is None:
            return None
        return self._namespaces.get(namespace)

    def __contains__(self, namespace: object) -> bool:
        return self._namespaces is not None and namespace in self._namespaces

    def __iter__(self) -> Iterator[Namespace]:
        return iter(self.namespaces)

    def __len__(self) -> int:
        return len(self.namespaces)

    def __repr__(self) -> str:
        if self._namespaces is None:
            return "ResourceSchema.absent()"
        return f"ResourceSchema(namespaces={list(self._namespaces)!r})"
