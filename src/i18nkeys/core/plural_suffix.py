"""Plural and ordinal key suffixes.

Bidirectional mapping between a base key and its plural-suffixed
(``item_one``) and ordinal-suffixed (``item_ordinal_one``) variants.
Shared by key enumeration, lookup and schema validation.

Python 3.13+. Zero external dependencies.
"""

from i18nkeys.constants import ORDINAL_MARKER, PLURAL_CATEGORIES

__all__ = ["plural_suffix", "strip_plural_suffix"]


def _check_category(category: str) -> None:
    if category not in PLURAL_CATEGORIES:
        msg = f"Unknown plural category '{category}', expected one of {PLURAL_CATEGORIES}"
        raise ValueError(msg)


def plural_suffix(category: str, plural_separator: str, *, ordinal: bool = False) -> str:
    """Build the key suffix for a plural category.

    Example:
        >>> plural_suffix("one", "_")
        '_one'
        >>> plural_suffix("two", "_", ordinal=True)
        '_ordinal_two'
    """
    _check_category(category)
    if ordinal:
        return f"{plural_separator}{ORDINAL_MARKER}{plural_separator}{category}"
    return f"{plural_separator}{category}"


def strip_plural_suffix(key: str, plural_separator: str) -> str | None:
    """Return the base key of a plural- or ordinal-suffixed key.

    The ordinal pattern is checked first, so ``place_ordinal_one`` yields
    ``place`` rather than ``place_ordinal``.

    Returns:
        Base key, or None if the key carries no plural suffix

    Example:
        >>> strip_plural_suffix("item_other", "_")
        'item'
        >>> strip_plural_suffix("place_ordinal_few", "_")
        'place'
        >>> strip_plural_suffix("item", "_") is None
        True
    """
    for category in PLURAL_CATEGORIES:
        ordinal = plural_suffix(category, plural_separator, ordinal=True)
        if key.endswith(ordinal) and len(key) > len(ordinal):
            return key[: -len(ordinal)]
    for category in PLURAL_CATEGORIES:
        cardinal = plural_suffix(category, plural_separator)
        if key.endswith(cardinal) and len(key) > len(cardinal):
            return key[: -len(cardinal)]
    return None
