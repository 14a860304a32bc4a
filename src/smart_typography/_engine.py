"""
Engine entry point: segment, rewrite, reassemble, remap the caret.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from smart_typography._caret import CaretState, clamp_caret
from smart_typography.locales import DateNameSet, LocaleProfile, date_names_for, quotes_for
from smart_typography.pipeline import DashStyle, EngineOptions, TypographyPipeline
from smart_typography.segments import has_literal_markers, segment

__all__ = ["NormalizationResult", "normalize", "format_text"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizationResult:
    """Rewritten text and the caret offset to restore, if any."""

    text: str
    caret_offset: Optional[int] = None


def normalize(
    text: str,
    trim_trailing_spaces: bool,
    caret_offset: Optional[int],
    locale: LocaleProfile,
    date_names: Optional[DateNameSet],
    options: EngineOptions,
) -> NormalizationResult:
    """
    Rewrite typewriter punctuation into typographic forms.

    Literal spans (backticks, ``{code}``, ``{noformat}``) pass through
    untouched; every other span runs through the substitution pipeline.
    Only the span holding the caret sees a local caret offset. The caret
    is then remapped over the whole string by keeping the number of
    characters after it constant.

    Args:
        text: Raw input text
        trim_trailing_spaces: Strip trailing blanks per line ("format now")
        caret_offset: Caret position in text, or None
        locale: Active quote profile
        date_names: Month/day names; None resolves them from locale.code
        options: Engine options

    Returns:
        NormalizationResult with the rewritten text and caret offset

    Example:
        >>> from smart_typography.locales import quotes_for
        >>> result = normalize('say "hi"', False, 8, quotes_for("en"), None, EngineOptions())
        >>> result.text, result.caret_offset
        ('say “hi”', 8)
    """
    if date_names is None:
        date_names = date_names_for(locale.code)
    if caret_offset is not None:
        caret_offset = clamp_caret(caret_offset, len(text))

    caret_state = CaretState.from_text(text, caret_offset)
    pipeline = TypographyPipeline(locale, date_names, options=options)

    if not has_literal_markers(text):
        rewritten = pipeline.apply(text, trim_trailing_spaces, caret_offset)
        return NormalizationResult(rewritten, caret_state.apply(rewritten))

    parts = []
    pos = 0
    caret_claimed = False
    for span in segment(text):
        end = pos + len(span)
        if span.literal:
            parts.append(span.text)
        else:
            local_caret = None
            if caret_offset is not None and not caret_claimed and pos <= caret_offset <= end:
                local_caret = caret_offset - pos
                caret_claimed = True
            parts.append(pipeline.apply(span.text, trim_trailing_spaces, local_caret))
        pos = end

    rewritten = "".join(parts)
    return NormalizationResult(rewritten, caret_state.apply(rewritten))


def format_text(
    text: str,
    lang: str = "en",
    sentence_break_dash: str = "em",
    trim_trailing_spaces: bool = True,
) -> str:
    """
    Format a whole block of text in one go.

    Convenience wrapper around normalize() for the "format now" action:
    no caret, trailing spaces trimmed by default.

    Example:
        >>> format_text("It's 5'10\\" tall...")
        'It’s 5′10″ tall…'
    """
    options = EngineOptions(sentence_break_dash=DashStyle.parse(sentence_break_dash))
    locale = quotes_for(lang)
    logger.debug(f"Formatting {len(text)} chars with locale {locale.code!r}")
    return normalize(text, trim_trailing_spaces, None, locale, None, options).text
