"""Tests for the host-side helpers: settings, eligibility and field processing."""

import pytest

from smart_typography.host import (
    FieldState,
    HostSettings,
    add_exclusion,
    format_field,
    has_ignored_class,
    is_excluded_site,
    is_text_field,
    process_input,
)
from smart_typography.pipeline import DashStyle


# =============================================================================
# Settings
# =============================================================================


class TestHostSettings:
    def test_defaults(self):
        settings = HostSettings()
        assert settings.lang == "en"
        assert settings.enabled is True
        assert settings.sentence_break_dash == "em"
        assert settings.ignored_classes == ["monaco"]
        assert settings.excluded_sites == []
        assert settings.enable_context_menu is True

    def test_defaults_are_not_shared(self):
        first, second = HostSettings(), HostSettings()
        first.excluded_sites.append("example.com")
        assert second.excluded_sites == []

    def test_dash_is_normalized(self):
        assert HostSettings(sentence_break_dash="EN").sentence_break_dash == "en"

    def test_invalid_dash(self):
        with pytest.raises(ValueError):
            HostSettings(sentence_break_dash="long")

    def test_from_mapping(self):
        settings = HostSettings.from_mapping(
            {
                "defaultLanguage": "de",
                "enabled": False,
                "sentenceBreakDash": "none",
                "ignoredClasses": ["cm-", "ace"],
                "excludedSites": ["example.com"],
                "enableContextMenu": False,
            }
        )
        assert settings.lang == "de"
        assert settings.enabled is False
        assert settings.sentence_break_dash == "none"
        assert settings.ignored_classes == ["cm-", "ace"]
        assert settings.excluded_sites == ["example.com"]
        assert settings.enable_context_menu is False

    def test_from_empty_mapping(self):
        assert HostSettings.from_mapping({}) == HostSettings()

    def test_locale_and_options(self):
        settings = HostSettings(lang="fr", sentence_break_dash="en")
        assert settings.locale().code == "fr"
        assert settings.options().sentence_break_dash is DashStyle.EN


# =============================================================================
# Eligibility
# =============================================================================


class TestEligibility:
    @pytest.mark.parametrize(
        "tag,input_type,editable,expected",
        [
            ("TEXTAREA", None, False, True),
            ("textarea", None, False, True),
            ("INPUT", None, False, True),
            ("INPUT", "text", False, True),
            ("INPUT", "email", False, False),
            ("INPUT", "password", False, False),
            ("INPUT", "search", False, False),
            ("DIV", None, True, True),
            ("DIV", None, False, False),
            ("", None, False, False),
        ],
    )
    def test_is_text_field(self, tag, input_type, editable, expected):
        assert is_text_field(tag, input_type, editable) is expected

    @pytest.mark.parametrize(
        "class_name,expected",
        [
            ("editor monaco-editor", True),
            ("monaco", True),
            ("plain", False),
            ("", False),
            (None, False),
        ],
    )
    def test_has_ignored_class(self, class_name, expected):
        assert has_ignored_class(class_name, ["monaco"]) is expected

    def test_blank_ignored_entries_match_nothing(self):
        assert not has_ignored_class("anything", [""])


class TestExcludedSites:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com/page", True),
            ("https://docs.example.com/a", True),
            ("https://EXAMPLE.com", True),
            ("https://notexample.com/", False),
            ("https://other.org/example.com", False),
        ],
    )
    def test_host_entries(self, url, expected):
        assert is_excluded_site(url, ["example.com"]) is expected

    def test_url_prefix_entry(self):
        sites = ["https://other.org/drafts"]
        assert is_excluded_site("https://other.org/drafts/1", sites)
        assert not is_excluded_site("https://other.org/posts/1", sites)

    def test_malformed_url(self):
        assert not is_excluded_site("http://[::1", ["example.com"])

    @pytest.mark.parametrize("url,sites", [("", ["example.com"]), ("https://x.com", [])])
    def test_empty_inputs(self, url, sites):
        assert not is_excluded_site(url, sites)

    def test_add_exclusion(self):
        sites = []
        assert add_exclusion(sites, " Example.COM ")
        assert sites == ["example.com"]

    @pytest.mark.parametrize("value", ["example.com", "  ", ""])
    def test_add_exclusion_rejects_duplicates_and_blanks(self, value):
        sites = ["example.com"]
        assert not add_exclusion(sites, value)
        assert sites == ["example.com"]


# =============================================================================
# Field Processing
# =============================================================================


class TestProcessInput:
    def test_rewrites_and_keeps_caret(self):
        state = FieldState('say "hi" ', 9, 9)
        assert process_input(state, HostSettings()) == FieldState("say “hi” ", 9, 9)

    def test_caret_follows_shrinking_edit(self):
        result = process_input(FieldState("a--- tail", 4), HostSettings())
        assert result.text == "a--- tail"
        result = process_input(FieldState("a---b tail", 5), HostSettings())
        assert result == FieldState("a—b tail", 3, 3)

    def test_trailing_spaces_kept(self):
        result = process_input(FieldState("end \nnext", 4), HostSettings())
        assert result == FieldState("end \nnext", 4, 4)

    def test_disabled(self):
        state = FieldState('"x"', 3)
        assert process_input(state, HostSettings(enabled=False)) is state

    def test_locale_from_settings(self):
        result = process_input(FieldState('"ja"', 4), HostSettings(lang="de"))
        assert result.text == "„ja“"

    def test_out_of_range_caret(self):
        result = process_input(FieldState("x...", 40), HostSettings())
        assert result == FieldState("x…", 2, 2)


class TestFormatField:
    def test_whole_field(self):
        state = FieldState('"a"  \nb... c', 1)
        result = format_field(state, HostSettings())
        assert result.text == "“a”\nb… c"
        assert result.selection_start == result.selection_end == 1

    def test_caret_after_unrelated_edit(self):
        state = FieldState("ab c... d", 1)
        result = format_field(state, HostSettings())
        assert result == FieldState("ab c… d", 1, 1)

    def test_selection_only(self):
        state = FieldState('keep "this" and "that"', 16, 22)
        result = format_field(state, HostSettings())
        assert result == FieldState('keep "this" and “that”', 16, 22)

    def test_reversed_selection(self):
        state = FieldState("a... b...", 9, 5)
        result = format_field(state, HostSettings())
        assert result == FieldState("a... b…", 5, 7)

    def test_ignores_enabled_flag(self):
        state = FieldState("a---b", 0)
        assert format_field(state, HostSettings(enabled=False)).text == "a—b"

    def test_collapsed(self):
        assert FieldState("x", 0).collapsed
        assert FieldState("x", 1, 1).collapsed
        assert not FieldState("x", 0, 1).collapsed


def test_package_exports_host_helpers():
    import smart_typography

    assert smart_typography.HostSettings is HostSettings
    assert smart_typography.FieldState is FieldState
    assert smart_typography.process_input is process_input
    assert smart_typography.format_field is format_field
