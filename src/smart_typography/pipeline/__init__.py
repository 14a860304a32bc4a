"""
Substitution pipeline submodule.

Re-exports the ordered typographic passes and the pipeline that runs them.
"""

from smart_typography.pipeline._rules import (
    APOSTROPHE,
    DashStyle,
    EngineOptions,
    PassChange,
    PipelineResult,
    SubstitutionRule,
    TypographyPipeline,
    apply_pipeline,
    collapse_spaces,
    fix_contractions,
    localize_quotes,
    replace_apostrophe_shortenings,
    replace_dashes,
    replace_double_commas,
    replace_ellipses,
    replace_measurements,
    replace_ranges,
    replace_sentence_break_dash,
    replace_symbols,
    trim_trailing_spaces,
)

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
