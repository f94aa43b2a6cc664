"""Plural lookup candidates and CLDR category selection.

Lookup tries the ordinal-suffixed form first, then the cardinal form, then
the base key. Category selection maps a count to a CLDR category for a
locale using Babel's CLDR data. The engine accepts an explicit category; this
selector is the default collaborator used when only a count is given.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from decimal import Decimal

from babel.core import UnknownLocaleError

from i18nkeys.core.plural_suffix import plural_suffix
from i18nkeys.locale_utils import get_babel_locale

__all__ = [
    "expand_for_lookup",
    "select_plural_category",
]

logger = logging.getLogger(__name__)


def expand_for_lookup(
    base_key: str, category: str | None, plural_separator: str
) -> tuple[str, ...]:
    """List the concrete keys to try for a base key, most specific first.

    The order is fixed: ordinal-suffixed, plural-suffixed, then the base key.
    Without a category only the base key is tried.

    Args:
        base_key: Final key segment without plural suffix
        category: CLDR category (zero, one, two, few, many, other) or None
        plural_separator: Configured plural separator

    Returns:
        Candidate keys in lookup order

    Raises:
        ValueError: If category is not a CLDR category name

    Example:
        >>> expand_for_lookup("item", "one", "_")
        ('item_ordinal_one', 'item_one', 'item')
        >>> expand_for_lookup("item", None, "_")
        ('item',)
    """
    if category is None:
        return (base_key,)
    return (
        base_key + plural_suffix(category, plural_separator, ordinal=True),
        base_key + plural_suffix(category, plural_separator),
        base_key,
    )


def select_plural_category(
    n: int | float | Decimal, locale: str, *, ordinal: bool = False
) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")
        ordinal: Use ordinal rules (1st, 2nd, 3rd) instead of cardinal rules

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(0, "lv_LV")
        'zero'
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "en", ordinal=True)
        'two'

    Fallback:
        If the locale cannot be parsed, cardinal selection uses the simple
        one/other rule and ordinal selection returns "other".
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Unknown locale '%s' for plural rules: %s", locale, e)
        if ordinal:
            return "other"
        return "one" if abs(n) == 1 else "other"

    rule = locale_obj.ordinal_form if ordinal else locale_obj.plural_form
    return rule(n)
