"""
spaCy integration for smart-typography.

Provides a pipeline component that stores the typographically normalized
text of a Doc. Tokens are left alone: quotes and dashes depend on context
that a single token does not carry.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("en")
    >>> nlp.add_pipe("typography_normalizer")
    >>> doc = nlp('He said "hello" to her.')
    >>> doc._.typographic
    'He said “hello” to her.'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc

from smart_typography._engine import normalize
from smart_typography.locales import date_names_for, quotes_for
from smart_typography.pipeline import DashStyle, EngineOptions, TypographyPipeline
from smart_typography.segments import segment

__all__ = [
    "TypographyComponent",
    "create_typography_normalizer",
    "get_typography_pipe",
]


@Language.factory(
    "typography_normalizer",
    default_config={
        "lang": "en",
        "sentence_break_dash": "em",
        "trim_trailing_spaces": True,
    },
    assigns=["doc._.typographic", "doc._.typography_passes"],
)
def create_typography_normalizer(
    nlp: Language,
    name: str,
    lang: str = "en",
    sentence_break_dash: str = "em",
    trim_trailing_spaces: bool = True,
) -> "TypographyComponent":
    """Create a typography normalizer pipeline component."""
    return TypographyComponent(
        nlp,
        name,
        lang=lang,
        sentence_break_dash=sentence_break_dash,
        trim_trailing_spaces=trim_trailing_spaces,
    )


class TypographyComponent:
    """
    spaCy pipeline component for typographic normalization.

    Extensions:
        - Doc._.typographic: Full normalized text.
        - Doc._.typography_passes: Names of the passes that changed the
          text, in execution order, without duplicates.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        lang: str = "en",
        sentence_break_dash: str = "em",
        trim_trailing_spaces: bool = True,
    ) -> None:
        self.name = name
        self.trim_trailing_spaces = trim_trailing_spaces
        # Raises ValueError for an unknown style, at pipeline build time
        self.options = EngineOptions(sentence_break_dash=DashStyle.parse(sentence_break_dash))
        self.locale = quotes_for(lang)
        self.date_names = date_names_for(self.locale.code)
        self._pipeline = TypographyPipeline(self.locale, self.date_names, options=self.options)

        if not Doc.has_extension("typographic"):
            Doc.set_extension("typographic", default=None)
        if not Doc.has_extension("typography_passes"):
            Doc.set_extension("typography_passes", default=None)

    def _passes_applied(self, text: str) -> list[str]:
        applied = []
        for span in segment(text):
            if span.literal:
                continue
            detailed = self._pipeline.apply_detailed(span.text, self.trim_trailing_spaces)
            for name in detailed.passes_applied:
                if name not in applied:
                    applied.append(name)
        return applied

    def __call__(self, doc: Doc) -> Doc:
        result = normalize(
            doc.text,
            self.trim_trailing_spaces,
            None,
            self.locale,
            self.date_names,
            self.options,
        )
        doc._.typographic = result.text
        doc._.typography_passes = self._passes_applied(doc.text)
        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "TypographyComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "TypographyComponent":
        return self


def get_typography_pipe(nlp: Language) -> Optional[TypographyComponent]:
    """Get the typography normalizer component from a pipeline."""
    if "typography_normalizer" in nlp.pipe_names:
        return nlp.get_pipe("typography_normalizer")
    return None
