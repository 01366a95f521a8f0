"""Code point predicates and constants shared by the text utilities."""

from __future__ import annotations

import unicodedata

CODE_TAB = 0x09
CODE_ENTER = 0x0A
CODE_SPACE = 0x20
CODE_DOUBLE_QUOTE = ord('"')
CODE_SINGLE_QUOTE = ord("'")
CODE_PERIOD = ord(".")
CODE_SLASH = ord("/")
CODE_UNSPECIFIED = -15

MAX_CODE_POINT = 0x10FFFF
MIN_SURROGATE = 0xD800
MAX_SURROGATE = 0xDFFF

# Space separators that still count as a word-joining space.
_NON_BREAKING_SPACES = frozenset({0x00A0, 0x2007, 0x202F})
_SPACE_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})


def _category(code_point: int) -> str:
    return unicodedata.category(chr(code_point))


def is_letter(code_point: int) -> bool:
    return _category(code_point).startswith("L")


def is_upper_case(code_point: int) -> bool:
    return chr(code_point).isupper()


def is_lower_case(code_point: int) -> bool:
    return chr(code_point).islower()


def is_digit(code_point: int) -> bool:
    return _category(code_point) == "Nd"


def is_whitespace(code_point: int) -> bool:
    """Whitespace in the sense used for word boundaries.

    TAB through CR and the FS..US separators count, and so does every space,
    line or paragraph separator except the non-breaking ones. NEL does not.
    """
    if 0x09 <= code_point <= 0x0D or 0x1C <= code_point <= 0x1F:
        return True
    if code_point in _NON_BREAKING_SPACES:
        return False
    return _category(code_point) in _SPACE_CATEGORIES


def is_letter_code(code: int) -> bool:
    """Whether a key code stands for a printable character."""
    return code >= CODE_SPACE


def to_lower_case(code_point: int) -> int:
    """Lowercase one code point, ignoring locale.

    Mappings that expand to several code points keep their first one.
    """
    lowered = chr(code_point).lower()
    return ord(lowered[0]) if lowered else code_point
