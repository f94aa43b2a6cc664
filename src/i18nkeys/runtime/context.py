"""Context token filtering.

A context token selects among variant phrasings of one key, for example
gendered forms: ``friend_male``, ``friend_female``. The token is infixed
after the base key and before any plural suffix: ``friend_male_one``.

Stripping is strict: a key that does not contain the separator and token
is rejected, never passed through unchanged.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

__all__ = ["append_context", "filter_keys_by_context", "strip_context"]


def strip_context(key: str, context: str | None, separator: str) -> str | None:
    """Remove the context token from a key.

    Matches ``<prefix><separator><context><suffix>`` at the first occurrence
    of ``<separator><context>`` and returns ``<prefix><suffix>``.

    Args:
        key: Key that may carry a context token
        context: Context token, or None to pass the key through
        separator: Configured context separator

    Returns:
        The unqualified key, or None if a context was supplied and the key
        does not carry it

    Example:
        >>> strip_context("friend_male_one", "male", "_")
        'friend_one'
        >>> strip_context("friend_male", "male", "_")
        'friend'
        >>> strip_context("friend", "male", "_") is None
        True
        >>> strip_context("friend", None, "_")
        'friend'
    """
    if context is None:
        return key
    token = separator + context
    prefix, found, suffix = key.partition(token)
    if not found:
        return None
    return prefix + suffix


def append_context(key: str, context: str | None, separator: str) -> str:
    """Attach a context token to a key (inverse of strip_context).

    Example:
        >>> append_context("friend", "female", "_")
        'friend_female'
    """
    if context is None:
        return key
    return f"{key}{separator}{context}"


def filter_keys_by_context(
    keys: Iterable[str], context: str | None, separator: str
) -> frozenset[str]:
    """Derive the unqualified keys available for a context.

    Keys without the context token are dropped; keys with it are stripped.
    Without a context the keys are returned unchanged.
    """
    if context is None:
        return frozenset(keys)
    stripped = (strip_context(key, context, separator) for key in keys)
    return frozenset(key for key in stripped if key is not None)
