"""
Protected-span segmentation.

Splits text into literal spans (code markers, left untouched by every
rewrite) and normal spans (subject to the substitution pipeline).

Recognized literal markers, all matched non-greedily and case-insensitively:
    ```fenced```      triple backticks
    `inline`          single backticks
    {code}...{code}   also {code:lang}...{code}
    {noformat}...{noformat}

An unclosed marker swallows the rest of the string as literal. This is a
best-effort splitter, not a parser.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

__all__ = ["TextSpan", "segment", "has_literal_markers", "join_spans"]

logger = logging.getLogger(__name__)

_LITERAL_RE = re.compile(
    r"```[\s\S]*?(?:```|\Z)"
    r"|`[\s\S]*?(?:`|\Z)"
    r"|\{code(?::.*?)?\}[\s\S]*?(?:\{code\}|\Z)"
    r"|\{noformat\}[\s\S]*?(?:\{noformat\}|\Z)",
    re.IGNORECASE,
)

_CLOSERS = (("```", "```"), ("`", "`"), ("{code", "{code}"), ("{noformat}", "{noformat}"))


@dataclass(frozen=True)
class TextSpan:
    """A run of text that is either literal (protected) or normal."""

    text: str
    literal: bool = False

    def __len__(self) -> int:
        return len(self.text)


def has_literal_markers(text: str) -> bool:
    """Check whether text contains any literal marker start sequence."""
    if "`" in text:
        return True
    lowered = text.lower()
    return "{code" in lowered or "{noformat}" in lowered


def _is_closed(span: str) -> bool:
    lowered = span.lower()
    for opener, closer in _CLOSERS:
        if lowered.startswith(opener):
            # {code} and {code:lang} end at the first brace
            marker_end = lowered.index("}") + 1 if opener == "{code" else len(opener)
            return len(lowered) >= marker_end + len(closer) and lowered.endswith(closer)
    return True


def segment(text: str) -> list[TextSpan]:
    """
    Split text into ordered literal and normal spans.

    Concatenating the ``text`` of every returned span reproduces the input
    exactly. Empty normal spans between adjacent literals are not emitted.

    Args:
        text: Raw input text

    Returns:
        List of TextSpan in original order

    Example:
        >>> [(s.text, s.literal) for s in segment('say `"hi"` now')]
        [('say ', False), ('`"hi"`', True), (' now', False)]
    """
    if not has_literal_markers(text):
        return [TextSpan(text)]

    spans = []
    pos = 0
    for match in _LITERAL_RE.finditer(text):
        if match.start() > pos:
            spans.append(TextSpan(text[pos : match.start()]))
        literal = match.group(0)
        if not _is_closed(literal):
            logger.debug(f"Unclosed literal marker at {match.start()}, protecting to end")
        spans.append(TextSpan(literal, literal=True))
        pos = match.end()

    if pos < len(text):
        spans.append(TextSpan(text[pos:]))

    return spans


def join_spans(spans: Iterable[TextSpan]) -> str:
    """Reassemble spans into a single string."""
    return "".join(span.text for span in spans)
