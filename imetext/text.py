"""Code point and string helpers used while processing typed text.

Indices are code point offsets into Python strings, so a character outside
the BMP is always one position.
"""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterable, Sequence
from enum import IntEnum

from .casing import get_locale_used_for_title_case, to_lower_case, to_upper_case
from .characters import (
    CODE_DOUBLE_QUOTE,
    CODE_PERIOD,
    CODE_SINGLE_QUOTE,
    CODE_SLASH,
    CODE_UNSPECIFIED,
    is_digit,
    is_letter,
    is_letter_code,
    is_lower_case,
    is_upper_case,
    is_whitespace,
)
from .characters import to_lower_case as code_point_to_lower_case
from .models import Locale
from .scripts import script_supports_uppercase

EMPTY_STRING = ""
SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT = ","

LINE_BREAK_CHARACTERS = frozenset(
    {"\n", "\x0b", "\x0c", "\r", "\x85", "\u2028", "\u2029"}
)

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


class CapitalizationType(IntEnum):
    NONE = 0  # No caps, or mixed case
    FIRST = 1  # First only
    ALL = 2  # All caps


class HexFormatError(ValueError):
    """Raised when a hex string cannot be decoded to bytes."""


def code_point_count(text: str | None) -> int:
    if not text:
        return 0
    return len(text)


def new_single_code_point_string(code_point: int) -> str:
    return chr(code_point)


def copy_code_points(
    text: str, start: int = 0, end: int | None = None, *, down_case: bool = False
) -> list[int]:
    """Return the code points of ``text[start:end]``.

    With ``down_case`` every code point is lower-cased on its own, without
    regard to locale.
    """
    if end is None:
        end = len(text)
    if down_case:
        return [code_point_to_lower_case(ord(char)) for char in text[start:end]]
    return [ord(char) for char in text[start:end]]


def to_code_point_array(
    text: str, start: int = 0, end: int | None = None
) -> tuple[int, ...]:
    if not text:
        return ()
    return tuple(copy_code_points(text, start, end))


def to_sorted_code_point_array(text: str) -> tuple[int, ...]:
    return tuple(sorted(to_code_point_array(text)))


def contains_code_point(sorted_code_points: Sequence[int], code_point: int) -> bool:
    """Binary-search a sorted code point sequence."""
    index = bisect.bisect_left(sorted_code_points, code_point)
    return index < len(sorted_code_points) and sorted_code_points[index] == code_point


def get_string_from_null_terminated_code_point_array(
    code_points: Sequence[int],
) -> str:
    length = len(code_points)
    for index, code_point in enumerate(code_points):
        if code_point == 0:
            length = index
            break
    return "".join(chr(code_point) for code_point in code_points[:length])


def contains_in_array(text: str, array: Iterable[str]) -> bool:
    return any(text == element for element in array)


def contains_in_comma_splittable_text(text: str, extra_values: str | None) -> bool:
    """Whether ``text`` is one of the comma-separated ``extra_values``.

    Comma-splittable text has no escaping, so values cannot contain commas.
    """
    if not extra_values:
        return False
    return contains_in_array(
        text, extra_values.split(SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT)
    )


def remove_from_comma_splittable_text_if_exists(
    text: str, extra_values: str | None
) -> str:
    if not extra_values:
        return EMPTY_STRING
    elements = extra_values.split(SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT)
    if not contains_in_array(text, elements):
        return extra_values
    return SEPARATOR_FOR_COMMA_SPLITTABLE_TEXT.join(
        element for element in elements if element != text
    )


def remove_dupes(suggestions: list[str]) -> None:
    """Remove repeated strings in place, keeping each first occurrence."""
    seen: set[str] = set()
    index = 0
    while index < len(suggestions):
        if suggestions[index] in seen:
            del suggestions[index]
            continue
        seen.add(suggestions[index])
        index += 1


def capitalize_first_code_point(text: str, locale: Locale) -> str:
    title_locale = get_locale_used_for_title_case(locale)
    if len(text) <= 1:
        return to_upper_case(text, title_locale)
    return to_upper_case(text[:1], title_locale) + text[1:]


def capitalize_first_and_downcase_rest(text: str, locale: Locale) -> str:
    """Upper-case the first code point and lower-case the rest.

    Digraphs written as two code points, such as Dutch "ij" or Serbian "lj",
    only get their first letter capitalized.
    """
    title_locale = get_locale_used_for_title_case(locale)
    if len(text) <= 1:
        return to_upper_case(text, title_locale)
    return to_upper_case(text[:1], title_locale) + to_lower_case(text[1:], locale)


def get_capitalization_type(text: str) -> CapitalizationType:
    # If the first letter is not uppercase, then the word is either all lower
    # case or camel case, and in either case the answer is NONE.
    length = len(text)
    index = 0
    while index < length and not is_letter(ord(text[index])):
        index += 1
    if index == length:
        return CapitalizationType.NONE
    if not is_upper_case(ord(text[index])):
        return CapitalizationType.NONE
    caps_count = 1
    letter_count = 1
    for char in text[index + 1 :]:
        if caps_count != 1 and letter_count != caps_count:
            break
        code_point = ord(char)
        if is_upper_case(code_point):
            caps_count += 1
            letter_count += 1
        elif is_letter(code_point):
            # Non-letters such as the quote in "IT'S" or the dash in
            # "FULL-TIME" are part of the word but have no case.
            letter_count += 1
    if caps_count == 1:
        return CapitalizationType.FIRST
    if letter_count == caps_count:
        return CapitalizationType.ALL
    return CapitalizationType.NONE


def is_identical_after_upcase(text: str) -> bool:
    return all(
        not is_letter(ord(char)) or is_upper_case(ord(char)) for char in text
    )


def is_identical_after_downcase(text: str) -> bool:
    return all(
        not is_letter(ord(char)) or is_lower_case(ord(char)) for char in text
    )


def is_identical_after_capitalize_each_word(
    text: str, sorted_separators: Sequence[int]
) -> bool:
    needs_caps_next = True
    for char in text:
        code_point = ord(char)
        if is_letter(code_point):
            if needs_caps_next and not is_upper_case(code_point):
                return False
            if not needs_caps_next and not is_lower_case(code_point):
                return False
        needs_caps_next = contains_code_point(sorted_separators, code_point)
    return True


def capitalize_each_word(
    text: str, sorted_separators: Sequence[int], locale: Locale
) -> str:
    parts: list[str] = []
    needs_caps_next = True
    for char in text:
        if needs_caps_next:
            parts.append(to_upper_case(char, locale))
        else:
            parts.append(to_lower_case(char, locale))
        needs_caps_next = contains_code_point(sorted_separators, ord(char))
    return "".join(parts)


def last_part_looks_like_url(text: str) -> bool:
    """Guess whether the text before the cursor ends with a URL.

    Walks backward over URL-ish characters, anything from ``.`` to ``z``,
    and returns true when that run starts with "www" and has a period,
    starts with a lone slash at a word start, contains "//", or has both a
    period and a slash. "abc./def" and ".abc/def" are accepted too.
    """
    index = len(text)
    if index == 0:
        return False
    w_count = 0
    slash_count = 0
    has_slash = False
    has_period = False
    code_point = 0
    while index > 0:
        code_point = ord(text[index - 1])
        if code_point < CODE_PERIOD or code_point > ord("z"):
            break
        if code_point == CODE_PERIOD:
            has_period = True
        if code_point == CODE_SLASH:
            has_slash = True
            slash_count += 1
            if slash_count == 2:
                return True
        else:
            slash_count = 0
        if code_point == ord("w"):
            w_count += 1
        else:
            w_count = 0
        index -= 1
    if w_count >= 3 and has_period:
        return True
    if slash_count == 1 and (index == 0 or is_whitespace(code_point)):
        return True
    return has_period and has_slash


def is_inside_double_quote_or_after_digit(text: str) -> bool:
    """Whether the cursor is inside a double quote, or right after a digit.

    The previous double quote decides: followed by whitespace it closed a
    quotation, preceded by whitespace it opened one. After a digit the quote
    is read as inches or seconds, so the answer is always true.
    """
    if not text:
        return False
    code_point = ord(text[-1])
    if is_digit(code_point):
        return True
    previous_code_point = 0
    for char in reversed(text):
        code_point = ord(char)
        if code_point == CODE_DOUBLE_QUOTE and is_whitespace(previous_code_point):
            return False
        if is_whitespace(code_point) and previous_code_point == CODE_DOUBLE_QUOTE:
            return True
        previous_code_point = code_point
    return code_point == CODE_DOUBLE_QUOTE


def is_empty_string_or_white_spaces(text: str) -> bool:
    return all(is_whitespace(ord(char)) for char in text)


def get_trailing_single_quotes_count(text: str) -> int:
    last_index = len(text) - 1
    index = last_index
    while index >= 0 and ord(text[index]) == CODE_SINGLE_QUOTE:
        index -= 1
    return last_index - index


def has_line_break_character(text: str | None) -> bool:
    if not text:
        return False
    return any(char in LINE_BREAK_CHARACTERS for char in reversed(text))


def byte_array_to_hex_string(data: bytes | None) -> str:
    if not data:
        return EMPTY_STRING
    return data.hex()


def hex_string_to_byte_array(text: str | None) -> bytes:
    """Decode a hex string. The length must be even."""
    if not text:
        return b""
    if len(text) % 2 != 0:
        raise HexFormatError(
            f"Input hex string length must be an even number. Length = {len(text)}"
        )
    if not _HEX_PATTERN.fullmatch(text):
        raise HexFormatError(f"Input is not a hex string: {text!r}")
    return bytes.fromhex(text)


def to_title_case_of_key_label(label: str | None, locale: Locale) -> str | None:
    if label is None or not script_supports_uppercase(locale.language):
        return label
    return to_upper_case(label, get_locale_used_for_title_case(locale))


def to_title_case_of_key_code(code: int, locale: Locale) -> int:
    if not is_letter_code(code):
        return code
    label = to_title_case_of_key_label(new_single_code_point_string(code), locale)
    if code_point_count(label) == 1:
        return ord(label)
    return CODE_UNSPECIFIED
