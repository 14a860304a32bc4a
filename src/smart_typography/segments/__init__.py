"""
Protected-span segmentation submodule.

Basic usage:
    >>> from smart_typography.segments import segment, join_spans
    >>> spans = segment("use `x--y` here")
    >>> [s.literal for s in spans]
    [False, True, False]
    >>> join_spans(spans)
    'use `x--y` here'
"""

from smart_typography.segments._splitter import (
    TextSpan,
    has_literal_markers,
    join_spans,
    segment,
)

__all__ = ["TextSpan", "segment", "has_literal_markers", "join_spans"]
