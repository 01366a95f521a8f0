"""Locale matching and code point text classification for input methods."""

from .locales import (
    LocaleCache,
    MatchLevel,
    find_best_match,
    get_match_level,
    get_match_level_sorted_string,
    is_match,
    is_rtl_language,
)
from .models import Locale, PunctuationResources
from .resources import ResourceRegistry
from .scripts import (
    ScriptId,
    get_script_from_spell_checker_locale,
    is_letter_part_of_script,
)
from .spacing import SpacingAndPunctuations
from .text import CapitalizationType, get_capitalization_type

__all__ = [
    "CapitalizationType",
    "Locale",
    "LocaleCache",
    "MatchLevel",
    "PunctuationResources",
    "ResourceRegistry",
    "ScriptId",
    "SpacingAndPunctuations",
    "find_best_match",
    "get_capitalization_type",
    "get_match_level",
    "get_match_level_sorted_string",
    "get_script_from_spell_checker_locale",
    "is_letter_part_of_script",
    "is_match",
    "is_rtl_language",
]
