"""Namespace and key-prefix resolution.

Turns a caller-facing key into the ordered list of (namespace, key)
candidates the value resolver should try, and computes the inverse: the
set of caller-facing keys that are valid for a request scope.

Candidate order is deterministic:

1. A namespace-qualified key (``common:greeting``) is tried only in the
   namespace it names.
2. A plain key is tried in each primary namespace, in configured order.
3. Then in each fallback namespace, in configured order, skipping
   namespaces already tried.

A key prefix scopes every candidate: with prefix ``settings`` the key
``theme`` becomes ``settings.theme``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from i18nkeys.analysis.keys import KeySet, enumerate_keys, join_key
from i18nkeys.runtime.context import filter_keys_by_context
from i18nkeys.runtime.options import KeyOptions
from i18nkeys.schema.model import ResourceSchema
from i18nkeys.types import KeyPath, Namespace

__all__ = [
    "Candidate",
    "apply_key_prefix",
    "parse_keys",
    "qualify_key",
    "resolve_candidates",
    "split_namespace",
    "strip_key_prefix",
]


@dataclass(frozen=True, slots=True)
class Candidate:
    """One (namespace, key) pair to try.

    Attributes:
        namespace: Namespace to resolve in
        key: Key path inside the namespace, key prefix applied
        source: Where the candidate came from: "qualified", "primary" or
            "fallback"
    """

    namespace: Namespace
    key: KeyPath
    source: str

    def qualified(self, options: KeyOptions) -> str:
        """Render as ``namespace<ns_separator>key`` for diagnostics."""
        return qualify_key(self.namespace, self.key, options)


def qualify_key(namespace: Namespace, key: KeyPath, options: KeyOptions) -> str:
    """Render a namespace-qualified key.

    With the namespace separator disabled the namespace is shown with ``:``
    for diagnostics only; such strings are not parseable keys.
    """
    separator = options.ns_separator if options.ns_separator is not False else ":"
    return f"{namespace}{separator}{key}"


def split_namespace(key: str, options: KeyOptions) -> tuple[Namespace | None, KeyPath]:
    """Split an explicit namespace off a key.

    Example:
        >>> split_namespace("common:greeting", KeyOptions())
        ('common', 'greeting')
        >>> split_namespace("greeting", KeyOptions())
        (None, 'greeting')
        >>> split_namespace("common:greeting", KeyOptions(ns_separator=False))
        (None, 'common:greeting')
    """
    if options.ns_separator is False:
        return None, key
    namespace, found, rest = key.partition(options.ns_separator)
    if not found or not namespace or not rest:
        return None, key
    return namespace, rest


def apply_key_prefix(key: KeyPath, key_prefix: KeyPath | None, options: KeyOptions) -> KeyPath:
    """Scope a key under a key prefix.

    Raises:
        ValueError: If a prefix is given while the key separator is disabled
    """
    if key_prefix is None:
        return key
    return join_key(key_prefix, key, options.key_separator)


def strip_key_prefix(
    keys: Iterable[KeyPath], key_prefix: KeyPath | None, options: KeyOptions
) -> frozenset[KeyPath]:
    """Keep keys under ``<prefix><key_separator>`` and remove that scope."""
    if key_prefix is None:
        return frozenset(keys)
    scope = join_key(key_prefix, "", options.key_separator)
    return frozenset(key[len(scope) :] for key in keys if key.startswith(scope) and key != scope)


def resolve_candidates(
    key: str,
    namespaces: tuple[Namespace, ...],
    options: KeyOptions,
    *,
    key_prefix: KeyPath | None = None,
) -> tuple[Candidate, ...]:
    """Produce the ordered candidates for a caller-facing key.

    Args:
        key: Key as passed by the caller (may be namespace-qualified)
        namespaces: Primary namespaces in priority order
        options: Separators and fallback chain
        key_prefix: Optional key-prefix scope

    Returns:
        Ordered, de-duplicated candidates

    Example:
        >>> options = KeyOptions(fallback_ns="common")
        >>> [(c.namespace, c.key) for c in resolve_candidates("title", ("app",), options)]
        [('app', 'title'), ('common', 'title')]
        >>> [(c.namespace, c.key) for c in resolve_candidates("errors:e1", ("app",), options)]
        [('errors', 'e1')]
    """
    explicit, rest = split_namespace(key, options)
    scoped = apply_key_prefix(rest, key_prefix, options)

    if explicit is not None:
        return (Candidate(explicit, scoped, "qualified"),)

    candidates: list[Candidate] = [Candidate(ns, scoped, "primary") for ns in namespaces]
    tried = set(namespaces)
    for ns in options.fallback_namespaces:
        if ns not in tried:
            tried.add(ns)
            candidates.append(Candidate(ns, scoped, "fallback"))
    return tuple(candidates)


def parse_keys(
    schema: ResourceSchema,
    namespaces: tuple[Namespace, ...],
    options: KeyOptions,
    *,
    key_prefix: KeyPath | None = None,
    context: str | None = None,
    with_return_objects: bool = False,
) -> KeySet:
    """Compute the caller-facing keys valid for a request scope.

    The result contains, with the key prefix stripped:

    - plain keys of every primary namespace;
    - ``namespace<ns_separator>key`` forms of the primary namespaces, when
      the namespace separator is enabled;
    - plain keys of the fallback namespaces.

    When a context is given, keys not carrying it are dropped and the token
    is stripped from the rest.

    Returns:
        The open KeySet if the schema is absent, otherwise a closed KeySet
    """
    if schema.is_absent:
        return KeySet.open()

    plain: set[KeyPath] = set()
    qualified: set[str] = set()
    for ns in namespaces:
        keys = strip_key_prefix(
            enumerate_keys(schema, ns, options, with_return_objects=with_return_objects).keys,
            key_prefix,
            options,
        )
        plain.update(keys)
        if options.ns_separator is not False:
            qualified.update(qualify_key(ns, key, options) for key in keys)

    for ns in options.fallback_namespaces:
        plain.update(
            strip_key_prefix(
                enumerate_keys(schema, ns, options, with_return_objects=with_return_objects).keys,
                key_prefix,
                options,
            )
        )

    return KeySet(filter_keys_by_context(plain | qualified, context, options.context_separator))
