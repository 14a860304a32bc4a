"""Shared fixtures for smart-typography tests."""

import pytest

from smart_typography.locales import DateNameSet, LocaleProfile, date_names_for, quotes_for
from smart_typography.pipeline import DashStyle, EngineOptions, TypographyPipeline


@pytest.fixture
def english() -> LocaleProfile:
    """Return the English quote profile."""
    return quotes_for("en")


@pytest.fixture
def german() -> LocaleProfile:
    """Return the German quote profile."""
    return quotes_for("de")


@pytest.fixture
def english_dates() -> DateNameSet:
    """Return English month and day names."""
    return date_names_for("en")


@pytest.fixture
def em_options() -> EngineOptions:
    """Return options with em-dash sentence breaks."""
    return EngineOptions(sentence_break_dash=DashStyle.EM)


@pytest.fixture
def pipeline(english, english_dates, em_options) -> TypographyPipeline:
    """Return a fresh English pipeline."""
    return TypographyPipeline(english, english_dates, options=em_options)
