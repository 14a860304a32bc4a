"""
Locale data submodule.

Provides per-language quote glyphs and localized month/day names.

Basic usage:
    >>> from smart_typography.locales import quotes_for, date_names_for
    >>> quotes_for("fr").primary
    ('«', '»')
    >>> "Mar" in date_names_for("en").month_names
    True
"""

from smart_typography.locales._dates import (
    DateNameSet,
    clear_date_name_cache,
    date_names_for,
)
from smart_typography.locales._profiles import (
    DEFAULT_LOCALE,
    LocaleProfile,
    available_locales,
    quotes_for,
)

__all__ = [
    "DEFAULT_LOCALE",
    "DateNameSet",
    "LocaleProfile",
    "available_locales",
    "clear_date_name_cache",
    "date_names_for",
    "quotes_for",
]
