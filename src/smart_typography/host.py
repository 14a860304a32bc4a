"""
Host-side helpers around the engine.

The engine itself never touches a UI. These helpers model what an
editor integration does around it, on plain data: decide whether a field
is eligible, apply settings, and run the engine over a field's text and
selection for live typing or for a "format now" action.

Example:
    >>> settings = HostSettings(lang="de")
    >>> state = FieldState('Er sagte "ja"', 13, 13)
    >>> process_input(state, settings).text
    'Er sagte „ja“'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

from smart_typography._caret import clamp_caret, map_caret_exact
from smart_typography._engine import normalize
from smart_typography.locales import LocaleProfile, quotes_for
from smart_typography.pipeline import DashStyle, EngineOptions

__all__ = [
    "FieldState",
    "HostSettings",
    "add_exclusion",
    "format_field",
    "has_ignored_class",
    "is_excluded_site",
    "is_text_field",
    "process_input",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Settings
# =============================================================================


@dataclass
class HostSettings:
    """Snapshot of the user's settings, passed to the engine per call."""

    lang: str = "en"
    enabled: bool = True
    sentence_break_dash: str = "em"
    ignored_classes: list[str] = field(default_factory=lambda: ["monaco"])
    excluded_sites: list[str] = field(default_factory=list)
    enable_context_menu: bool = True

    def __post_init__(self):
        # Fail at configuration time, not on a keystroke
        self.sentence_break_dash = DashStyle.parse(self.sentence_break_dash).value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HostSettings":
        """Build settings from stored key/value pairs, keeping defaults for gaps."""
        defaults = cls()
        return cls(
            lang=data.get("defaultLanguage") or defaults.lang,
            enabled=data.get("enabled", defaults.enabled) is not False,
            sentence_break_dash=data.get("sentenceBreakDash") or defaults.sentence_break_dash,
            ignored_classes=list(data.get("ignoredClasses") or defaults.ignored_classes),
            excluded_sites=list(data.get("excludedSites") or []),
            enable_context_menu=data.get("enableContextMenu") is not False,
        )

    def locale(self) -> LocaleProfile:
        return quotes_for(self.lang)

    def options(self) -> EngineOptions:
        return EngineOptions(sentence_break_dash=DashStyle.parse(self.sentence_break_dash))


# =============================================================================
# Eligibility
# =============================================================================


def is_text_field(
    tag_name: str, input_type: Optional[str] = None, content_editable: bool = False
) -> bool:
    """Textareas, contenteditable elements and plain text inputs are eligible."""
    if content_editable:
        return True
    tag = (tag_name or "").upper()
    if tag == "TEXTAREA":
        return True
    if tag == "INPUT":
        return (input_type or "text").lower() == "text"
    return False


def has_ignored_class(class_name: Optional[str], ignored_classes: list[str]) -> bool:
    """True if any class token contains one of the ignored patterns."""
    if not class_name:
        return False
    for token in class_name.split():
        for ignored in ignored_classes:
            if ignored and ignored in token:
                return True
    return False


def is_excluded_site(url: str, excluded_sites: list[str]) -> bool:
    """
    Check a page URL against the exclusion list.

    An entry matches the exact URL, any URL it is a prefix of, the page's
    host, or any subdomain of that host. Malformed URLs are never excluded.

    Example:
        >>> is_excluded_site("https://docs.example.com/a", ["example.com"])
        True
    """
    if not url or not excluded_sites:
        return False
    try:
        host = (urlsplit(url).hostname or "").lower()
    except ValueError:
        logger.debug(f"Ignoring malformed URL {url!r}")
        return False

    lowered = url.lower()
    for entry in excluded_sites:
        entry = entry.strip().lower()
        if not entry:
            continue
        if lowered == entry or lowered.startswith(entry):
            return True
        if host and (host == entry or host.endswith("." + entry)):
            return True
    return False


def add_exclusion(excluded_sites: list[str], value: str) -> bool:
    """Add a lower-cased entry; False for blank values and duplicates."""
    normalized = (value or "").strip().lower()
    if not normalized or normalized in excluded_sites:
        return False
    excluded_sites.append(normalized)
    return True


# =============================================================================
# Field Processing
# =============================================================================


@dataclass(frozen=True)
class FieldState:
    """A text field's value and selection."""

    text: str
    selection_start: int
    selection_end: Optional[int] = None

    @property
    def collapsed(self) -> bool:
        return self.selection_end is None or self.selection_end == self.selection_start


def process_input(state: FieldState, settings: HostSettings) -> FieldState:
    """
    Rewrite a field after a keystroke.

    Trailing spaces are kept (they would fight the cursor) and the caret
    keeps its distance from the end of the text.
    """
    if not settings.enabled:
        return state

    caret = clamp_caret(state.selection_start, len(state.text))
    result = normalize(
        state.text, False, caret, settings.locale(), None, settings.options()
    )
    return FieldState(result.text, result.caret_offset, result.caret_offset)


def format_field(state: FieldState, settings: HostSettings) -> FieldState:
    """
    Format a whole field, or only its selection, in one go.

    With a selection, only the selected text is rewritten and the new
    selection spans the formatted text. Otherwise the whole field is
    rewritten with trailing spaces trimmed and the caret is carried
    through an exact edit script.
    """
    locale = settings.locale()
    options = settings.options()
    text = state.text
    start = clamp_caret(state.selection_start, len(text))

    if not state.collapsed:
        end = clamp_caret(state.selection_end, len(text))
        start, end = min(start, end), max(start, end)
        formatted = normalize(text[start:end], True, None, locale, None, options).text
        return FieldState(text[:start] + formatted + text[end:], start, start + len(formatted))

    formatted = normalize(text, True, None, locale, None, options).text
    caret = map_caret_exact(text, start, formatted)
    return FieldState(formatted, caret, caret)
