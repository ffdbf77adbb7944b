"""Tests for Accept-Language parsing and preference chain ordering."""

from __future__ import annotations

from langtext.i18n.preferences import (
    DEFAULT_PREFERENCES,
    calculate_preference_order,
    parse_preference_header,
    sanitize_header,
)


def test_chain_ends_with_defaults():
    chain = calculate_preference_order("xx-xx")
    assert chain == ["xx-xx", "xx", "all", "en", "en-us"]
    assert tuple(chain[-3:]) == DEFAULT_PREFERENCES


def test_empty_header_yields_only_defaults():
    assert calculate_preference_order("") == ["all", "en", "en-us"]


def test_variant_precedes_bare_language():
    chain = calculate_preference_order("zh-TW")
    assert chain.index("zh-tw") < chain.index("zh")


def test_equal_quality_keeps_declaration_order():
    chain = calculate_preference_order("fr, en-us")
    assert chain[:3] == ["fr", "en-us", "en"]


def test_higher_quality_wins_over_declaration_order():
    chain = calculate_preference_order("en-us;q=0.5, fr;q=0.9")
    assert chain.index("fr") < chain.index("en-us")
    assert chain[:3] == ["fr", "en-us", "en"]


def test_missing_quality_defaults_to_one():
    preferences = parse_preference_header("de;q=0.8, it")
    assert [(p.language, p.qfactor) for p in preferences] == [("it", 1.0), ("de", 0.8)]


def test_underscore_variant_and_case_are_normalised():
    (preference,) = parse_preference_header("PT_BR;q=0.7")
    assert preference.language == "pt"
    assert preference.variant == "br"
    assert preference.tags == ("pt-br", "pt")


def test_malformed_entries_are_dropped():
    preferences = parse_preference_header("*, 1x, fr;q=1.2.3, ja;q=0.4")
    assert [p.language for p in preferences] == ["ja"]
    assert calculate_preference_order("garbage!!") == ["all", "en", "en-us"]


def test_long_variant_is_kept_whole():
    chain = calculate_preference_order("xx-nonexistant-language")
    assert chain[:2] == ["xx-nonexistant-language", "xx"]


def test_sanitize_header_rewrites_bracket_sequences():
    assert sanitize_header("en[].us") == "en-us"
    assert sanitize_header("fr, en-us") == "fr, en-us"


def test_quality_parameter_name_is_case_insensitive():
    chain = calculate_preference_order("de, fr;Q=0.5")
    assert chain[:2] == ["de", "fr"]
    (preference,) = parse_preference_header("fr;Q=0.5")
    assert preference.qfactor == 0.5
