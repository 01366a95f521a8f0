"""Writing scripts and the letters that belong to them."""

from __future__ import annotations

from enum import IntEnum

from .characters import is_letter
from .models import Locale, canonical_language


class ScriptId(IntEnum):
    UNKNOWN = -1  # Hardware keyboards
    ARABIC = 0
    ARMENIAN = 1
    BENGALI = 2
    CYRILLIC = 3
    DEVANAGARI = 4
    GEORGIAN = 5
    GREEK = 6
    HEBREW = 7
    KANNADA = 8
    KHMER = 9
    LAO = 10
    LATIN = 11
    MALAYALAM = 12
    MYANMAR = 13
    SINHALA = 14
    TAMIL = 15
    TELUGU = 16
    THAI = 17
    BULGARIAN = 18


class InvalidScriptError(Exception):
    """Raised for a script id that is not a ScriptId member."""


LANGUAGE_GEORGIAN = "ka"

DEFAULT_SCRIPT = ScriptId.LATIN
LANGUAGE_CODE_TO_SCRIPT: dict[str, ScriptId] = {
    "ar": ScriptId.ARABIC,
    "hy": ScriptId.ARMENIAN,
    "bg": ScriptId.BULGARIAN,
    "bn": ScriptId.BENGALI,
    "sr": ScriptId.CYRILLIC,
    "ru": ScriptId.CYRILLIC,
    "ka": ScriptId.GEORGIAN,
    "el": ScriptId.GREEK,
    "iw": ScriptId.HEBREW,
    "km": ScriptId.KHMER,
    "lo": ScriptId.LAO,
    "ml": ScriptId.MALAYALAM,
    "my": ScriptId.MYANMAR,
    "si": ScriptId.SINHALA,
    "ta": ScriptId.TAMIL,
    "te": ScriptId.TELUGU,
    "th": ScriptId.THAI,
    "uk": ScriptId.CYRILLIC,
}

NON_UPPERCASE_SCRIPTS = frozenset({LANGUAGE_GEORGIAN})

# Inclusive Unicode block ranges. Cyrillic, Bulgarian and Latin are checked
# separately because they also require the code point to be a letter.
SCRIPT_RANGES: dict[ScriptId, tuple[tuple[int, int], ...]] = {
    # Arabic, Arabic Supplement and Thaana, Arabic Extended-A, and the
    # Arabic Presentation Forms A and B.
    ScriptId.ARABIC: (
        (0x600, 0x6FF),
        (0x750, 0x7BF),
        (0x8A0, 0x8FF),
        (0xFB50, 0xFDFF),
        (0xFE70, 0xFEFF),
    ),
    # Armenian block, and the Armenian part of Alphabetic Presentation Forms.
    ScriptId.ARMENIAN: ((0x530, 0x58F), (0xFB13, 0xFB17)),
    ScriptId.BENGALI: ((0x980, 0x9FF),),
    ScriptId.DEVANAGARI: ((0x900, 0x97F),),
    ScriptId.GEORGIAN: ((0x10A0, 0x10FF), (0x2D00, 0x2D2F)),
    # Greek and Coptic, Greek Extended, and 0xF2 which a few dictionary
    # words use.
    ScriptId.GREEK: ((0x370, 0x3FF), (0x1F00, 0x1FFF), (0xF2, 0xF2)),
    # Hebrew block, and the Hebrew part of Alphabetic Presentation Forms.
    ScriptId.HEBREW: ((0x590, 0x5FF), (0xFB1D, 0xFB4F)),
    ScriptId.KANNADA: ((0xC80, 0xCFF),),
    ScriptId.KHMER: ((0x1780, 0x17FF), (0x19E0, 0x19FF)),
    ScriptId.LAO: ((0xE80, 0xEFF),),
    ScriptId.MALAYALAM: ((0xD00, 0xD7F),),
    # Myanmar, Myanmar Extended-A and Myanmar Extended-B.
    ScriptId.MYANMAR: ((0x1000, 0x109F), (0xAA60, 0xAA7F), (0xA9E0, 0xA9FF)),
    ScriptId.SINHALA: ((0xD80, 0xDFF),),
    ScriptId.TAMIL: ((0xB80, 0xBFF),),
    ScriptId.TELUGU: ((0xC00, 0xC7F),),
    ScriptId.THAI: ((0xE00, 0xE7F),),
}

CYRILLIC_RANGE = (0x400, 0x52F)
# C0, C1, Latin Extended A and B and IPA Extensions sit back to back below
# this bound.
LATIN_MAX_CODE_POINT = 0x2AF


def script_supports_uppercase(language: str | None) -> bool:
    return language not in NON_UPPERCASE_SCRIPTS


def get_script_from_spell_checker_locale(locale: Locale | str) -> ScriptId:
    """Map a spell checker locale to its script, defaulting to Latin."""
    if isinstance(locale, str):
        locale = Locale.parse(locale)
    return LANGUAGE_CODE_TO_SCRIPT.get(
        canonical_language(locale.language), DEFAULT_SCRIPT
    )


def is_letter_part_of_script(code_point: int, script_id: int) -> bool:
    """Whether ``code_point`` is a letter of the given script.

    ``ScriptId.UNKNOWN`` accepts everything.

    Raises:
        InvalidScriptError: If ``script_id`` is not a ScriptId value.
    """
    try:
        script = ScriptId(script_id)
    except ValueError as e:
        raise InvalidScriptError(f"Impossible value of script: {script_id}") from e

    if script is ScriptId.UNKNOWN:
        return True
    if script in (ScriptId.CYRILLIC, ScriptId.BULGARIAN):
        low, high = CYRILLIC_RANGE
        return low <= code_point <= high and is_letter(code_point)
    if script is ScriptId.LATIN:
        return code_point <= LATIN_MAX_CODE_POINT and is_letter(code_point)
    return any(low <= code_point <= high for low, high in SCRIPT_RANGES[script])
