"""
Caret remapping across a rewrite.

Two strategies:

- remap_caret(): keep the number of characters after the caret constant.
  Cheap and stable while typing, because rewrites happen at or behind the
  caret and the text that follows it is untouched.
- map_caret_exact(): walk a difflib edit script between the two strings.
  Used for whole-field formatting, where edits can land anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Optional

__all__ = ["CaretState", "clamp_caret", "remap_caret", "map_caret_exact"]


def clamp_caret(offset: int, length: int) -> int:
    """Clamp a caret offset into ``[0, length]``."""
    return max(0, min(offset, length))


@dataclass(frozen=True)
class CaretState:
    """Characters between the caret and the end of the text."""

    chars_after_caret: Optional[int] = None

    @classmethod
    def from_text(cls, text: str, offset: Optional[int]) -> "CaretState":
        if offset is None:
            return cls()
        return cls(len(text) - clamp_caret(offset, len(text)))

    def apply(self, rewritten: str) -> Optional[int]:
        """Caret offset in the rewritten text, or None if there is no caret."""
        if self.chars_after_caret is None:
            return None
        return clamp_caret(len(rewritten) - self.chars_after_caret, len(rewritten))


def remap_caret(original: str, caret: int, rewritten: str) -> int:
    """
    Map a caret from original to rewritten text by distance from the end.

    Args:
        original: Text before the rewrite
        caret: Caret offset in original (clamped if out of range)
        rewritten: Text after the rewrite

    Returns:
        Caret offset in rewritten, within ``[0, len(rewritten)]``

    Example:
        >>> remap_caret("a---b|", 5, "a—b|")
        3
    """
    return CaretState.from_text(original, caret).apply(rewritten)


def map_caret_exact(original: str, caret: int, rewritten: str) -> int:
    """
    Map a caret through a minimal edit script between the two strings.

    Unchanged regions shift the caret by their offset; a caret inside a
    replaced or deleted region lands at the end of its replacement.
    """
    caret = clamp_caret(caret, len(original))
    matcher = SequenceMatcher(a=original, b=rewritten, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if caret < i1:
            break
        if tag == "equal":
            if caret <= i2:
                return j1 + (caret - i1)
        elif caret < i2 or (caret == i2 and i1 == i2):
            return j2
    return clamp_caret(len(rewritten) - (len(original) - caret), len(rewritten))
