"""Tests for script lookup and script membership."""

import pytest

from imetext.characters import is_whitespace
from imetext.models import Locale
from imetext.scripts import (
    InvalidScriptError,
    ScriptId,
    get_script_from_spell_checker_locale,
    is_letter_part_of_script,
    script_supports_uppercase,
)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("ru_RU", ScriptId.CYRILLIC),
        ("uk", ScriptId.CYRILLIC),
        ("bg", ScriptId.BULGARIAN),
        ("el_GR", ScriptId.GREEK),
        ("iw", ScriptId.HEBREW),
        ("he_IL", ScriptId.HEBREW),
        ("th", ScriptId.THAI),
        ("en_US", ScriptId.LATIN),
        ("xx", ScriptId.LATIN),
        ("", ScriptId.LATIN),
    ],
)
def test_get_script_from_spell_checker_locale(tag, expected):
    assert get_script_from_spell_checker_locale(Locale.parse(tag)) == expected
    assert get_script_from_spell_checker_locale(tag) == expected


@pytest.mark.parametrize(
    ("code_point", "script", "expected"),
    [
        (ord("a"), ScriptId.LATIN, True),
        (ord("é"), ScriptId.LATIN, True),
        (ord("1"), ScriptId.LATIN, False),
        (0x0430, ScriptId.LATIN, False),
        (0x0430, ScriptId.CYRILLIC, True),
        (0x0430, ScriptId.BULGARIAN, True),
        # Combining titlo is in the Cyrillic block but is not a letter.
        (0x0483, ScriptId.CYRILLIC, False),
        (ord("a"), ScriptId.CYRILLIC, False),
        (0x0627, ScriptId.ARABIC, True),
        # Arabic-Indic digits are in the block and accepted.
        (0x0660, ScriptId.ARABIC, True),
        (0xFB13, ScriptId.ARMENIAN, True),
        (0xFB1D, ScriptId.ARMENIAN, False),
        (0xFB1D, ScriptId.HEBREW, True),
        (0x03B1, ScriptId.GREEK, True),
        (0x00F2, ScriptId.GREEK, True),
        (0x1F00, ScriptId.GREEK, True),
        (0x0915, ScriptId.DEVANAGARI, True),
        (0x0C95, ScriptId.KANNADA, True),
        (0x10D0, ScriptId.GEORGIAN, True),
        (0x1780, ScriptId.KHMER, True),
        (0x0E81, ScriptId.LAO, True),
        (0x0E01, ScriptId.THAI, True),
        (0x0E81, ScriptId.THAI, False),
        (0xAA60, ScriptId.MYANMAR, True),
        (0x0D85, ScriptId.SINHALA, True),
        (0x0B85, ScriptId.TAMIL, True),
        (0x0C05, ScriptId.TELUGU, True),
        (0x0D05, ScriptId.MALAYALAM, True),
        (0x0985, ScriptId.BENGALI, True),
    ],
)
def test_is_letter_part_of_script(code_point, script, expected):
    assert is_letter_part_of_script(code_point, script) is expected


def test_unknown_script_accepts_everything():
    for code_point in (0, ord(" "), ord("a"), 0x0430, 0x4E00, 0x1F600, 0x10FFFF):
        assert is_letter_part_of_script(code_point, ScriptId.UNKNOWN)


@pytest.mark.parametrize("script_id", [19, -2, 99])
def test_invalid_script_raises(script_id):
    with pytest.raises(InvalidScriptError, match="Impossible value of script"):
        is_letter_part_of_script(ord("a"), script_id)


def test_script_supports_uppercase():
    assert script_supports_uppercase("en")
    assert script_supports_uppercase(None)
    assert not script_supports_uppercase("ka")


@pytest.mark.parametrize(
    ("code_point", "expected"),
    [
        (ord(" "), True),
        (ord("\t"), True),
        (0x1C, True),
        (0x2028, True),
        (0x3000, True),
        (0x00A0, False),
        (0x202F, False),
        (0x0085, False),
        (ord("a"), False),
    ],
)
def test_is_whitespace(code_point, expected):
    assert is_whitespace(code_point) is expected
