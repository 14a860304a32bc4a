"""
smart-typography: typographic text normalization.

Rewrites typewriter punctuation (straight quotes, double hyphens, triple
dots, plain apostrophes) into typographic forms, leaves code-marked spans
untouched, and keeps the caret where the user expects it.

Basic usage:
    >>> from smart_typography import format_text
    >>> format_text('He said "hello" -- twice...')
    'He said “hello” -- twice…'

Engine usage (live typing, with a caret):
    >>> from smart_typography import EngineOptions, normalize, quotes_for
    >>> result = normalize("don't", False, 5, quotes_for("en"), None, EngineOptions())
    >>> result.text, result.caret_offset
    ('don’t', 5)

Host helpers (smart_typography.host) model an editor integration on plain
data: settings, field eligibility, live typing and "format now":
    >>> from smart_typography import FieldState, HostSettings, process_input
    >>> process_input(FieldState("a---b", 5), HostSettings()).text
    'a—b'

Per-pass usage:
    >>> from smart_typography.pipeline import replace_dashes
    >>> replace_dashes("wait---really")
    'wait—really'
"""

from smart_typography._caret import CaretState, map_caret_exact, remap_caret
from smart_typography._engine import NormalizationResult, format_text, normalize
from smart_typography.host import FieldState, HostSettings, format_field, process_input
from smart_typography.locales import (
    DateNameSet,
    LocaleProfile,
    available_locales,
    date_names_for,
    quotes_for,
)
from smart_typography.pipeline import (
    DashStyle,
    EngineOptions,
    PipelineResult,
    TypographyPipeline,
    apply_pipeline,
)
from smart_typography.segments import TextSpan, segment

__version__ = "0.1.0"
__all__ = [
    "normalize",
    "format_text",
    "NormalizationResult",
    "EngineOptions",
    "DashStyle",
    "TypographyPipeline",
    "PipelineResult",
    "apply_pipeline",
    "LocaleProfile",
    "DateNameSet",
    "quotes_for",
    "date_names_for",
    "available_locales",
    "TextSpan",
    "segment",
    "CaretState",
    "remap_caret",
    "map_caret_exact",
    "HostSettings",
    "FieldState",
    "process_input",
    "format_field",
]


# Lazy import for the spaCy component (only when spacy is installed)
def __getattr__(name: str):
    if name == "TypographyComponent":
        try:
            from smart_typography.spacy import TypographyComponent
            return TypographyComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install smart-typography[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
