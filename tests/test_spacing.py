"""Tests for punctuation resources and spacing profiles."""

import json

import pytest
from pydantic import ValidationError

from imetext.io import ResourceLoadError
from imetext.loaders import load_punctuation_resources
from imetext.models import Locale, PunctuationResources
from imetext.resources import DEFAULT_LOCALE_TAG, ResourceRegistry
from imetext.spacing import SpacingAndPunctuations


@pytest.fixture
def registry(locale_cache):
    return ResourceRegistry(cache=locale_cache)


def test_english_profile(registry):
    spacing = registry.spacing_and_punctuations("en_US")
    assert spacing.uses_american_typography
    assert not spacing.uses_german_rules
    assert spacing.current_language_has_spaces
    assert spacing.is_word_separator(ord(" "))
    assert spacing.is_word_separator(0x00A0)
    assert not spacing.is_word_separator(ord("a"))
    assert spacing.is_word_connector(ord("'"))
    assert spacing.is_word_code_point(ord("a"))
    assert spacing.is_word_code_point(ord("-"))
    assert not spacing.is_word_code_point(ord("1"))
    assert spacing.is_usually_preceded_by_space(ord("("))
    assert spacing.is_usually_followed_by_space(ord(","))
    assert not spacing.is_clustering_symbol(ord("!"))
    assert spacing.is_sentence_terminator(ord("?"))
    assert spacing.is_sentence_separator(ord("."))
    assert spacing.is_abbreviation_marker(ord("."))
    assert spacing.sentence_separator_and_space == ". "


def test_sets_are_sorted(registry):
    spacing = registry.spacing_and_punctuations("en")
    for values in (
        spacing.sorted_word_separators,
        spacing.sorted_word_connectors,
        spacing.sorted_symbols_followed_by_space,
    ):
        assert list(values) == sorted(values)


def test_language_flags(registry):
    assert registry.spacing_and_punctuations("de_DE").uses_german_rules
    assert not registry.spacing_and_punctuations("de_DE").uses_american_typography
    assert not registry.spacing_and_punctuations("fr").uses_american_typography


def test_french_profile(registry):
    assert registry.resolve_tag("fr_CA") == "fr"
    spacing = registry.spacing_and_punctuations("fr_CA")
    assert spacing.is_usually_preceded_by_space(ord("?"))
    assert spacing.is_clustering_symbol(ord("!"))


def test_languages_without_spaces(registry):
    assert not registry.spacing_and_punctuations("th_TH").current_language_has_spaces


def test_armenian_sentence_separator(registry):
    spacing = registry.spacing_and_punctuations("hy_AM")
    assert spacing.sentence_separator == 0x0589
    assert spacing.is_sentence_terminator(0x0589)
    assert spacing.sentence_separator_and_space == "\u0589 "


def test_default_resources(registry):
    assert registry.resolve_tag("en_US") == DEFAULT_LOCALE_TAG
    assert registry.resolve_tag("") == DEFAULT_LOCALE_TAG
    assert DEFAULT_LOCALE_TAG in registry.locale_tags


def test_with_word_separators(registry):
    spacing = registry.spacing_and_punctuations("en")
    overridden = spacing.with_word_separators([ord("x"), ord("a")])
    assert overridden.sorted_word_separators == (ord("a"), ord("x"))
    assert overridden.is_word_separator(ord("x"))
    assert not overridden.is_word_separator(ord(" "))
    assert spacing.is_word_separator(ord(" "))
    assert overridden.sorted_word_connectors == spacing.sorted_word_connectors


def test_profile_is_immutable(registry):
    spacing = registry.spacing_and_punctuations("en")
    with pytest.raises(ValidationError):
        spacing.sentence_separator = ord("!")


def test_dump(registry):
    dump = registry.spacing_and_punctuations("en").dump()
    assert "uses_american_typography = True" in dump
    assert "sentence_separator_and_space = '. '" in dump


def test_from_resources_uses_code_points():
    resources = PunctuationResources(symbols_word_separators=" \t\U0001F600")
    spacing = SpacingAndPunctuations.from_resources(resources, Locale.parse("en"))
    assert spacing.sorted_word_separators == (0x09, 0x20, 0x1F600)


def test_load_resources_file(resources_file, locale_cache):
    resources = load_punctuation_resources(resources_file)
    assert set(resources) == {"de", "de_CH"}
    assert resources["de"].symbols_word_connectors == "'-\u2010"

    registry = ResourceRegistry.from_file(resources_file, cache=locale_cache)
    assert registry.resolve_tag("de_AT") == "de"
    assert registry.spacing_and_punctuations("de_AT").is_word_connector(0x2010)
    swiss = registry.spacing_and_punctuations("de_CH")
    assert not swiss.is_word_connector(ord("'"))
    assert swiss.uses_german_rules
    assert "de_CH" in locale_cache


def test_invalid_json_fails(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ResourceLoadError, match="not valid JSON"):
        load_punctuation_resources(path)


def test_missing_file_fails(tmp_path):
    with pytest.raises(ResourceLoadError, match="Failed to read"):
        load_punctuation_resources(tmp_path / "missing.json")


def test_invalid_resources_fail(tmp_path):
    path = tmp_path / "invalid.json"
    path.write_text(
        json.dumps({"resources": {"en": {"sentenceSeparator": "period"}}}),
        encoding="utf-8",
    )
    with pytest.raises(ResourceLoadError, match="Invalid punctuation resources"):
        load_punctuation_resources(path)
