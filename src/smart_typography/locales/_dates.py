"""
Localized month and day names for date-range disambiguation.

Names come from the CLDR data shipped with babel. Both the wide
("January", "Monday") and abbreviated ("Jan", "Mon") forms are collected,
in both the format and stand-alone contexts. Lookups fail open: a locale
babel does not know yields an empty set, and a single missing entry is
skipped, so the range rule only ever recognizes fewer ranges, never more.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from babel import Locale, UnknownLocaleError

__all__ = ["DateNameSet", "date_names_for", "clear_date_name_cache"]

logger = logging.getLogger(__name__)

_CONTEXTS = ("format", "stand-alone")
_WIDTHS = ("wide", "abbreviated")

# CLDR indexes months 1-12 and weekdays 0-6 (Monday first)
_MONTH_INDEXES = range(1, 13)
_DAY_INDEXES = range(0, 7)


@dataclass(frozen=True)
class DateNameSet:
    """Month and day names of one locale."""

    month_names: frozenset[str] = field(default_factory=frozenset)
    day_names: frozenset[str] = field(default_factory=frozenset)

    EMPTY: ClassVar["DateNameSet"]

    def __bool__(self) -> bool:
        return bool(self.month_names or self.day_names)

    def is_range(self, first: str, second: str) -> bool:
        """True if both words are month names, or both are day names."""
        if first in self.month_names and second in self.month_names:
            return True
        return first in self.day_names and second in self.day_names


DateNameSet.EMPTY = DateNameSet()

# Per-code cache; entries are deterministic so eviction is harmless
_date_name_cache: dict[str, DateNameSet] = {}


def _names(table_for, indexes: range) -> Iterator[str]:
    """Yield every available name, skipping entries missing from CLDR."""
    for context in _CONTEXTS:
        for width in _WIDTHS:
            for idx in indexes:
                try:
                    name = table_for(context)[width][idx]
                except KeyError:
                    continue
                if not name:
                    continue
                yield name
                # German "Jan." / French "janv." also appear without the dot
                if name.endswith("."):
                    yield name[:-1]


def _load(code: str) -> DateNameSet:
    try:
        locale = Locale.parse(code, sep="-")
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug(f"No CLDR date names for {code!r}: {e}")
        return DateNameSet.EMPTY

    months = frozenset(_names(lambda context: locale.months[context], _MONTH_INDEXES))
    days = frozenset(_names(lambda context: locale.days[context], _DAY_INDEXES))
    return DateNameSet(month_names=months, day_names=days)


def date_names_for(code: str | None) -> DateNameSet:
    """
    Return the month and day names for a language code.

    Results are cached per lower-cased code.

    Args:
        code: Language tag such as ``"en"`` or ``"de-CH"`` (``_`` also accepted)

    Returns:
        DateNameSet, empty if the locale data is unavailable

    Example:
        >>> names = date_names_for("en")
        >>> names.is_range("Mon", "Fri")
        True
        >>> names.is_range("Jan", "Fri")
        False
    """
    if not code:
        return DateNameSet.EMPTY

    key = code.strip().lower().replace("_", "-")
    cached = _date_name_cache.get(key)
    if cached is None:
        cached = _load(key)
        _date_name_cache[key] = cached
    return cached


def clear_date_name_cache() -> None:
    """Drop every cached DateNameSet."""
    _date_name_cache.clear()
