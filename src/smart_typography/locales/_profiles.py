"""
Per-language quote profiles.

Each profile names the typographic glyphs a language uses for its primary
(double) and secondary (single) quotes, plus the typewriter characters the
quote pass replaces. Glyphs follow the CLDR quotation delimiters.

Example:
    >>> from smart_typography.locales import quotes_for
    >>> quotes_for("de").primary
    ('„', '“')
    >>> quotes_for("xx").code
    'en'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

__all__ = [
    "LocaleProfile",
    "DEFAULT_LOCALE",
    "available_locales",
    "quotes_for",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocaleProfile:
    """Quote glyphs and typewriter patterns for one language."""

    code: str
    label: str
    primary: tuple[str, str]
    secondary: tuple[str, str]
    replace_primary: str = '"'
    replace_secondary: str = "'"

    @property
    def typewriter_primary_pattern(self) -> re.Pattern:
        return re.compile(self.replace_primary)

    @property
    def typewriter_secondary_pattern(self) -> re.Pattern:
        return re.compile(self.replace_secondary)


def _profile(code: str, label: str, primary: str, secondary: str) -> LocaleProfile:
    return LocaleProfile(
        code=code,
        label=label,
        primary=(primary[0], primary[1]),
        secondary=(secondary[0], secondary[1]),
    )


_PROFILES: tuple[LocaleProfile, ...] = (
    _profile("en", "English", "“”", "‘’"),
    _profile("bg", "Bulgarian", "„“", "„“"),
    _profile("cs", "Czech", "„“", "‚‘"),
    _profile("da", "Danish", "“”", "‘’"),
    _profile("de", "German", "„“", "‚‘"),
    _profile("de-ch", "German (Switzerland)", "«»", "‹›"),
    _profile("el", "Greek", "«»", "“”"),
    _profile("es", "Spanish", "«»", "“”"),
    _profile("et", "Estonian", "„“", "‚‘"),
    _profile("fi", "Finnish", "””", "’’"),
    _profile("fr", "French", "«»", "‹›"),
    _profile("he", "Hebrew", "””", "’’"),
    _profile("hr", "Croatian", "„“", "‚‘"),
    _profile("hu", "Hungarian", "„”", "»«"),
    _profile("it", "Italian", "«»", "“”"),
    _profile("ja", "Japanese", "「」", "『』"),
    _profile("lt", "Lithuanian", "„“", "‚‘"),
    _profile("lv", "Latvian", "“”", "‘’"),
    _profile("nb", "Norwegian Bokmål", "«»", "‘’"),
    _profile("nl", "Dutch", "“”", "‘’"),
    _profile("pl", "Polish", "„”", "«»"),
    _profile("pt", "Portuguese", "«»", "“”"),
    _profile("pt-br", "Portuguese (Brazil)", "“”", "‘’"),
    _profile("ro", "Romanian", "„”", "«»"),
    _profile("ru", "Russian", "«»", "„“"),
    _profile("sk", "Slovak", "„“", "‚‘"),
    _profile("sl", "Slovenian", "„“", "‚‘"),
    _profile("sv", "Swedish", "””", "’’"),
    _profile("tr", "Turkish", "“”", "‘’"),
    _profile("uk", "Ukrainian", "«»", "„“"),
    _profile("zh", "Chinese", "“”", "‘’"),
)

_BY_CODE = {profile.code: profile for profile in _PROFILES}

DEFAULT_LOCALE = _BY_CODE["en"]


def available_locales() -> list[LocaleProfile]:
    """Return the built-in profiles, English first."""
    return list(_PROFILES)


def quotes_for(code: str | None) -> LocaleProfile:
    """
    Look up the quote profile for a language code.

    Matching is case-insensitive and accepts either ``-`` or ``_`` as the
    region separator. A regional tag without its own profile falls back to
    its base language (``de-AT`` -> ``de``). Unknown codes get the English
    profile, so callers always receive usable glyphs.

    Args:
        code: BCP 47-ish language tag, e.g. ``"en"``, ``"de-CH"``, ``"pt_BR"``

    Returns:
        The matching LocaleProfile, or DEFAULT_LOCALE
    """
    if not code:
        return DEFAULT_LOCALE

    key = code.strip().lower().replace("_", "-")
    if key in _BY_CODE:
        return _BY_CODE[key]

    base = key.split("-", 1)[0]
    if base in _BY_CODE:
        return _BY_CODE[base]

    logger.debug(f"No quote profile for {code!r}, using {DEFAULT_LOCALE.code!r}")
    return DEFAULT_LOCALE
