"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used by plural category selection.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "validate_locale_format",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def validate_locale_format(locale_code: str) -> None:
    """Validate locale code format.

    Checks that the code is non-empty and contains only alphanumeric
    characters with optional underscore or hyphen separators.

    Raises:
        ValueError: If locale code is empty or has invalid format
    """
    if not locale_code:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)

    if not locale_code.replace("_", "").replace("-", "").isalnum():
        msg = f"Invalid locale code format: '{locale_code}'"
        raise ValueError(msg)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in hot paths like plural rule selection.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the parsed-locale cache."""
    get_babel_locale.cache_clear()
