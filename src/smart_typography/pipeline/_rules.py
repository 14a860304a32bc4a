"""
Ordered typographic substitution passes.

Every pass is a pure ``str -> str`` function that is total (never fails)
and a no-op when it finds nothing to rewrite. Passes run in a fixed order,
and the order matters: later passes assume earlier ones already normalized
their targets.

    trailing_spaces        strip spaces/tabs before line breaks ("format now" only)
    multiple_spaces        collapse runs of 2+ spaces/tabs after a non-space
    symbols                (c) (tm) (r) -> <- co2 h2o
    sentence_break_dash    "x - y" -> "x — y" / "x – y"
    double_comma           ,, -> „
    measurements           5'10" -> 5′10″
    apostrophe_shortenings 'em 'twas 'cause 'n '99 rock'n'roll
    quotes                 locale-aware open/close quotes, apostrophes, primes
    dashes                 --- -> —, -- -> –, –- -> —
    ranges                 12-34 -> 12–34, Mon-Fri -> Mon–Fri
    ellipsis               ... -> …
    contractions           don't, I'll, ... with a typographic apostrophe

Example:
    >>> from smart_typography.locales import quotes_for
    >>> from smart_typography.pipeline import EngineOptions, TypographyPipeline
    >>> pipeline = TypographyPipeline(quotes_for("en"), options=EngineOptions())
    >>> pipeline.apply('He said "hello" to her.')
    'He said “hello” to her.'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union
import re

from smart_typography.locales import DateNameSet, LocaleProfile

__all__ = [
    "APOSTROPHE",
    "DashStyle",
    "EngineOptions",
    "PassChange",
    "PipelineResult",
    "SubstitutionRule",
    "TypographyPipeline",
    "apply_pipeline",
    "collapse_spaces",
    "fix_contractions",
    "localize_quotes",
    "replace_apostrophe_shortenings",
    "replace_dashes",
    "replace_double_commas",
    "replace_ellipses",
    "replace_measurements",
    "replace_ranges",
    "replace_sentence_break_dash",
    "replace_symbols",
    "trim_trailing_spaces",
]

APOSTROPHE = "\u2019"  # ’
EM_DASH = "\u2014"  # —
EN_DASH = "\u2013"  # –
ELLIPSIS = "\u2026"  # …
PRIME = "\u2032"  # ′
DOUBLE_PRIME = "\u2033"  # ″
LOW_DOUBLE_QUOTE = "\u201e"  # „

# Characters that count as an apostrophe typed by hand
_APOSTROPHE_LIKE = "['‘’´]"


# =============================================================================
# Options and Result Types
# =============================================================================


class DashStyle(Enum):
    """What a spaced hyphen between two words becomes."""

    EM = "em"
    EN = "en"
    NONE = "none"

    @classmethod
    def parse(cls, value: Union[str, "DashStyle"]) -> "DashStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown sentence break dash style: {value!r}. "
                f"Expected one of: {', '.join(s.value for s in cls)}"
            ) from None


@dataclass(frozen=True)
class EngineOptions:
    """Per-call options for the rewrite engine."""

    sentence_break_dash: DashStyle = DashStyle.EM

    def __post_init__(self):
        object.__setattr__(
            self, "sentence_break_dash", DashStyle.parse(self.sentence_break_dash)
        )


@dataclass
class PassChange:
    """Record of one pass that altered the text."""

    name: str
    before: str
    after: str


@dataclass
class PipelineResult:
    """Detailed result from running the pipeline."""

    original: str
    rewritten: str
    changes: list[PassChange] = field(default_factory=list)

    @property
    def passes_applied(self) -> list[str]:
        return [change.name for change in self.changes]


@dataclass(frozen=True)
class SubstitutionRule:
    """A single pattern -> replacement rewrite."""

    name: str
    pattern: re.Pattern
    replacement: Union[str, Callable[[re.Match], str]]
    description: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _apply_rules(rules: tuple[SubstitutionRule, ...], text: str) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


# =============================================================================
# Whitespace
# =============================================================================

_TRAILING_SPACES_RE = re.compile(r"[ \t]+(?=\r?\n|\Z)")
_MULTIPLE_SPACES_RE = re.compile(r"(?<=\S)[ \t]{2,}")


def trim_trailing_spaces(text: str) -> str:
    """Strip spaces and tabs at the end of every line."""
    return _TRAILING_SPACES_RE.sub("", text)


def _is_blank(char: str) -> bool:
    return char == " " or char == "\t"


def collapse_spaces(text: str, caret: Optional[int] = None) -> str:
    """
    Collapse runs of 2+ spaces/tabs that follow a non-space into one space.

    Leading indentation is kept. When the caret sits between two blanks,
    an exactly-two-blank run containing it is preserved so the user can
    type in front of an existing space; longer runs still collapse.

    Args:
        text: Normal span text
        caret: Caret offset local to text, or None

    Returns:
        Text with multiple spaces collapsed

    Example:
        >>> collapse_spaces("a   b")
        'a b'
        >>> collapse_spaces("a  b", caret=2)
        'a  b'
    """
    keep_double = (
        caret is not None
        and 0 < caret < len(text)
        and _is_blank(text[caret - 1])
        and _is_blank(text[caret])
    )
    if not keep_double:
        return _MULTIPLE_SPACES_RE.sub(" ", text)

    def _collapse(match: re.Match) -> str:
        if len(match.group(0)) == 2 and match.start() <= caret <= match.end():
            return match.group(0)
        return " "

    return _MULTIPLE_SPACES_RE.sub(_collapse, text)


# =============================================================================
# Symbols and Words
# =============================================================================

_SYMBOLS = {
    "(c)": "\u00a9",  # ©
    "(tm)": "\u2122",  # ™
    "(r)": "\u00ae",  # ®
    "->": "\u2192",  # →
    "<-": "\u2190",  # ←
}

_WORDS = {
    "co2": "CO\u2082",  # CO₂
    "h2o": "H\u2082O",  # H₂O
}

_SYMBOL_RULES = (
    SubstitutionRule(
        "symbols",
        re.compile(r"\((?:c|tm|r)\)|(?<!-)->|<-", re.IGNORECASE),
        lambda m: _SYMBOLS[m.group(0).lower()],
        "(c) (tm) (r) -> <- to © ™ ® → ← (--> is left alone)",
    ),
    SubstitutionRule(
        "words",
        re.compile(r"\b(?:co2|h2o)\b", re.IGNORECASE),
        lambda m: _WORDS[m.group(0).lower()],
        "co2 h2o to CO₂ H₂O",
    ),
)


def replace_symbols(text: str) -> str:
    """Replace symbol shorthands and chemical formulas."""
    return _apply_rules(_SYMBOL_RULES, text)


# =============================================================================
# Sentence Break Dash
# =============================================================================

# Word characters on both sides, so list markers ("- item") never match
_SENTENCE_BREAK_RE = re.compile(r"(?<=\w) - (?=\w)")


def replace_sentence_break_dash(text: str, style: DashStyle) -> str:
    """Turn a spaced hyphen between two words into a spaced dash."""
    if style is DashStyle.EM:
        return _SENTENCE_BREAK_RE.sub(f" {EM_DASH} ", text)
    if style is DashStyle.EN:
        return _SENTENCE_BREAK_RE.sub(f" {EN_DASH} ", text)
    return text


# =============================================================================
# Quotes
# =============================================================================

_DOUBLE_COMMA_RE = re.compile(r",,")
_FEET_INCHES_RE = re.compile(r"(\d+)[ \t]*'[ \t]*(\d+)[ \t]*\"")

_SHORTENING_RULES = (
    SubstitutionRule(
        "rock_n_roll",
        re.compile(rf"\b(rock|pop){_APOSTROPHE_LIKE}(n){_APOSTROPHE_LIKE}(roll)\b", re.IGNORECASE),
        rf"\1{APOSTROPHE}\2{APOSTROPHE}\3",
        "rock'n'roll, pop'n'roll",
    ),
    SubstitutionRule(
        "leading_apostrophe",
        re.compile(rf"(?<!\w){_APOSTROPHE_LIKE}(em|twas|cause|n|\d{{2}}s?)\b", re.IGNORECASE),
        rf"{APOSTROPHE}\1",
        "'em 'twas 'cause 'n '99 '99s",
    ),
)


def replace_double_commas(text: str) -> str:
    """Turn ``,,`` into a low double opening quote (German/Czech style)."""
    return _DOUBLE_COMMA_RE.sub(LOW_DOUBLE_QUOTE, text)


def replace_measurements(text: str) -> str:
    """Turn feet/inch measurements such as ``5'10"`` into primes."""
    return _FEET_INCHES_RE.sub(rf"\1{PRIME}\2{DOUBLE_PRIME}", text)


def replace_apostrophe_shortenings(text: str) -> str:
    """Give leading-apostrophe shortenings a typographic apostrophe."""
    return _apply_rules(_SHORTENING_RULES, text)


_MARKUP_OPENERS = "<["
_MARKUP_CLOSERS = ">]"
_OPENING_CONTEXT = "(>]"


def _markup_mask(text: str) -> list[bool]:
    """
    Mark every position that sits inside an unterminated tag or bracket.

    A position is inside markup when the first markup character after it
    is a closer (``>`` or ``]``) rather than an opener (``<`` or ``[``).
    """
    mask = [False] * len(text)
    inside = False
    for i in range(len(text) - 1, -1, -1):
        mask[i] = inside
        char = text[i]
        if char in _MARKUP_CLOSERS:
            inside = True
        elif char in _MARKUP_OPENERS:
            inside = False
    return mask


def _is_word(char: Optional[str]) -> bool:
    return char is not None and (char.isalnum() or char == "_")


def _is_plural_possessive(text: str, idx: int) -> bool:
    """Quote at idx follows a letter and an 's' (bosses', the Joneses')."""
    return idx >= 2 and text[idx - 1] in "sS" and text[idx - 2].isalpha()


def localize_quotes(text: str, locale: LocaleProfile) -> str:
    """
    Replace typewriter quotes with the locale's typographic quotes.

    Scans left to right keeping track of which quote kinds are open. Each
    typewriter quote outside markup becomes, in order of precedence:

    - an apostrophe, for a single quote between two word characters
    - a prime/double prime, after a digit when no quote of that kind is open
    - an apostrophe, for a plural possessive when no single quote is open
    - an opening quote, after start, whitespace, ``(``, ``>``, ``]`` or an
      opening quote of the other kind
    - a closing quote otherwise

    Typographic quotes already in the text update the open state too, so
    text curled on earlier keystrokes reads the same as freshly typed text.

    Quotes inside an unterminated ``<...>`` or ``[...]`` are left alone.

    Args:
        text: Normal span text
        locale: Active quote profile

    Returns:
        Text with quotes localized

    Example:
        >>> from smart_typography.locales import quotes_for
        >>> localize_quotes("'Hallo', sagte er", quotes_for("de"))
        '‚Hallo‘, sagte er'
    """
    if not text:
        return text

    primary_re = locale.typewriter_primary_pattern
    secondary_re = locale.typewriter_secondary_pattern
    inside_markup = _markup_mask(text)
    # Glyphs that double as the other side or an apostrophe say nothing about state
    primary_openers = {locale.primary[0], LOW_DOUBLE_QUOTE} - {locale.primary[1]}
    secondary_openers = (
        {locale.secondary[0]} - {locale.secondary[1], APOSTROPHE} - primary_openers
    )
    primary_closers = {locale.primary[1]} - {locale.primary[0], APOSTROPHE} - primary_openers
    secondary_closers = (
        {locale.secondary[1]}
        - {locale.secondary[0], APOSTROPHE}
        - primary_openers
        - secondary_openers
    )
    # A closing apostrophe glyph closes only when it does not sit inside a word
    apostrophe_closes = (
        locale.secondary[1] == APOSTROPHE and locale.secondary[0] != APOSTROPHE
    )

    result = []
    primary_open = False
    secondary_open = False
    # Index of the last typewriter quote that became an opening glyph
    opened_at = -1
    opened_primary = False

    for i, char in enumerate(text):
        if char == "\n":
            primary_open = secondary_open = False
            result.append(char)
            continue

        if char in primary_openers:
            primary_open = True
            result.append(char)
            continue
        if char in secondary_openers:
            secondary_open = True
            result.append(char)
            continue
        if char in primary_closers:
            primary_open = False
            result.append(char)
            continue
        if char in secondary_closers or (
            apostrophe_closes
            and char == APOSTROPHE
            and not _is_word(text[i + 1] if i + 1 < len(text) else None)
        ):
            secondary_open = False
            result.append(char)
            continue

        if inside_markup[i]:
            result.append(char)
            continue

        if primary_re.fullmatch(char):
            is_primary = True
        elif secondary_re.fullmatch(char):
            is_primary = False
        else:
            result.append(char)
            continue

        prev = text[i - 1] if i > 0 else None
        nxt = text[i + 1] if i + 1 < len(text) else None
        is_open = primary_open if is_primary else secondary_open
        glyphs = locale.primary if is_primary else locale.secondary
        after_other_opener = (opened_at == i - 1 and opened_primary != is_primary) or (
            prev in (secondary_openers if is_primary else primary_openers)
        )

        if not is_primary and _is_word(prev) and _is_word(nxt):
            result.append(APOSTROPHE)
        elif prev is not None and prev.isdigit() and not _is_word(nxt) and not is_open:
            result.append(DOUBLE_PRIME if is_primary else PRIME)
        elif (
            not is_primary
            and not is_open
            and not _is_word(nxt)
            and _is_plural_possessive(text, i)
        ):
            result.append(APOSTROPHE)
        elif prev is None or prev.isspace() or prev in _OPENING_CONTEXT or after_other_opener:
            result.append(glyphs[0])
            is_open = True
            opened_at = i
            opened_primary = is_primary
        else:
            result.append(glyphs[1])
            is_open = False

        if is_primary:
            primary_open = is_open
        else:
            secondary_open = is_open

    return "".join(result)


# =============================================================================
# Dashes, Ranges and Ellipses
# =============================================================================

_DASH_RULES = (
    SubstitutionRule(
        "three_hyphens", re.compile(r"(?<=\w)---(?=\w)"), EM_DASH, "--- to em dash"
    ),
    SubstitutionRule(
        "two_hyphens", re.compile(r"(?<=\w)--(?=\w)"), EN_DASH, "-- to en dash"
    ),
    SubstitutionRule(
        "en_dash_hyphen",
        re.compile(rf"(?<=\w){EN_DASH}-(?=\w)"),
        EM_DASH,
        "en dash + hyphen to em dash",
    ),
)

# Digits must not continue a longer chain, so 2024-01-15 stays as is
_NUMBER_RANGE_RE = re.compile(r"(?<![\d-])(\d+)\s*-\s*(\d+)(?![\d-])")
_WORD_RANGE_RE = re.compile(r"\b([^\W\d_]{3,})\s*-\s*([^\W\d_]{3,})\b")

_ELLIPSIS_RE = re.compile(rf"(?<![.{ELLIPSIS}])\.{{3}}(?![.{ELLIPSIS}])")


def replace_dashes(text: str) -> str:
    """Turn hyphen runs between word characters into dashes."""
    return _apply_rules(_DASH_RULES, text)


def replace_ranges(text: str, date_names: DateNameSet = DateNameSet.EMPTY) -> str:
    """
    Use en dashes for numeric and month/day ranges.

    A capitalized word pair is only treated as a range when both words are
    month names or both are day names of the active locale; a bare
    hyphenated phrase such as ``Bob-Alice`` is left alone.

    Example:
        >>> replace_ranges("pages 12-34")
        'pages 12–34'
    """
    text = _NUMBER_RANGE_RE.sub(rf"\1{EN_DASH}\2", text)
    if not date_names:
        return text

    def _date_range(match: re.Match) -> str:
        first, second = match.group(1), match.group(2)
        if first[0].isupper() and second[0].isupper() and date_names.is_range(first, second):
            return f"{first}{EN_DASH}{second}"
        return match.group(0)

    return _WORD_RANGE_RE.sub(_date_range, text)


def replace_ellipses(text: str) -> str:
    """Turn exactly three dots into an ellipsis glyph."""
    return _ELLIPSIS_RE.sub(ELLIPSIS, text)


# =============================================================================
# Contractions
# =============================================================================

_CONTRACTION_RULES = (
    SubstitutionRule(
        "negative_contractions",
        re.compile(
            rf"\b(don|won|can|couldn|wouldn|shouldn|didn|isn|aren|wasn|weren|hasn|haven|hadn)"
            rf"{_APOSTROPHE_LIKE}t\b",
            re.IGNORECASE,
        ),
        rf"\1{APOSTROPHE}t",
        "don't, can't, ... with a typographic apostrophe",
    ),
    SubstitutionRule(
        "pronoun_contractions",
        re.compile(
            rf"\b(I|you|we|they|he|she|it|who|what|there|here)"
            rf"{_APOSTROPHE_LIKE}(ll|ve|re|d|m|s)\b",
            re.IGNORECASE,
        ),
        rf"\1{APOSTROPHE}\2",
        "I'll, you've, it's, ... with a typographic apostrophe",
    ),
)


def fix_contractions(text: str) -> str:
    """Normalize the apostrophe of common English contractions."""
    return _apply_rules(_CONTRACTION_RULES, text)


# =============================================================================
# Pipeline
# =============================================================================


class TypographyPipeline:
    """
    The ordered sequence of substitution passes for one locale.

    Example:
        >>> from smart_typography.locales import quotes_for
        >>> pipeline = TypographyPipeline(quotes_for("en"), options=EngineOptions())
        >>> pipeline.apply("wait---really??")
        'wait—really??'
    """

    def __init__(
        self,
        locale: LocaleProfile,
        date_names: DateNameSet = DateNameSet.EMPTY,
        *,
        options: EngineOptions,
    ) -> None:
        self.locale = locale
        self.date_names = date_names
        self.options = options

    def passes(
        self, trim: bool = False, caret: Optional[int] = None
    ) -> list[tuple[str, Callable[[str], str]]]:
        """Return the (name, function) passes in execution order."""
        passes = []
        if trim:
            passes.append(("trailing_spaces", trim_trailing_spaces))
        passes.extend(
            [
                ("multiple_spaces", lambda text: collapse_spaces(text, caret)),
                ("symbols", replace_symbols),
            ]
        )
        if self.options.sentence_break_dash is not DashStyle.NONE:
            style = self.options.sentence_break_dash
            passes.append(
                ("sentence_break_dash", lambda text: replace_sentence_break_dash(text, style))
            )
        passes.extend(
            [
                ("double_comma", replace_double_commas),
                ("measurements", replace_measurements),
                ("apostrophe_shortenings", replace_apostrophe_shortenings),
                ("quotes", lambda text: localize_quotes(text, self.locale)),
                ("dashes", replace_dashes),
                ("ranges", lambda text: replace_ranges(text, self.date_names)),
                ("ellipsis", replace_ellipses),
                ("contractions", fix_contractions),
            ]
        )
        return passes

    def apply(
        self, text: str, trim_trailing_spaces: bool = False, caret: Optional[int] = None
    ) -> str:
        """
        Run every pass over a normal span.

        Args:
            text: Normal span text (no literal markers)
            trim_trailing_spaces: Strip trailing blanks on each line
            caret: Caret offset local to text, or None

        Returns:
            Rewritten text
        """
        if not text:
            return text
        for _name, func in self.passes(trim_trailing_spaces, caret):
            text = func(text)
        return text

    def apply_detailed(
        self, text: str, trim_trailing_spaces: bool = False, caret: Optional[int] = None
    ) -> PipelineResult:
        """
        Run every pass and record which ones changed the text.

        Example:
            >>> from smart_typography.locales import quotes_for
            >>> pipeline = TypographyPipeline(quotes_for("en"), options=EngineOptions())
            >>> pipeline.apply_detailed("a--b (c)").passes_applied
            ['symbols', 'dashes']
        """
        changes = []
        current = text
        for name, func in self.passes(trim_trailing_spaces, caret):
            rewritten = func(current)
            if rewritten != current:
                changes.append(PassChange(name=name, before=current, after=rewritten))
            current = rewritten
        return PipelineResult(original=text, rewritten=current, changes=changes)


def apply_pipeline(
    text: str,
    trim_trailing_spaces: bool,
    caret: Optional[int],
    locale: LocaleProfile,
    date_names: DateNameSet,
    options: EngineOptions,
) -> str:
    """Functional form of TypographyPipeline.apply()."""
    return TypographyPipeline(locale, date_names, options=options).apply(
        text, trim_trailing_spaces, caret
    )
