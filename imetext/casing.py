"""Locale-sensitive case mapping."""

from __future__ import annotations

import unicodedata

from .models import ROOT_LOCALE, Locale

LANGUAGE_GREEK = "el"

# Upper-casing with these languages loses information, so title-casing uses
# the replacement locale instead.
CASING_LOCALE_OVERRIDES: dict[str, Locale] = {
    LANGUAGE_GREEK: ROOT_LOCALE,
}

_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})
_GREEK_ACCENTS = frozenset({0x0300, 0x0301, 0x0313, 0x0314, 0x0342})


def get_locale_used_for_title_case(locale: Locale) -> Locale:
    return CASING_LOCALE_OVERRIDES.get(locale.language, locale)


def _strip_greek_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    kept: list[str] = []
    previous_is_greek = False
    for char in decomposed:
        if previous_is_greek and ord(char) in _GREEK_ACCENTS:
            continue
        if not unicodedata.combining(char):
            previous_is_greek = unicodedata.name(char, "").startswith("GREEK")
        kept.append(char)
    return unicodedata.normalize("NFC", "".join(kept))


def to_upper_case(text: str, locale: Locale) -> str:
    """Upper-case ``text`` following the rules of ``locale``.

    Greek loses its accents, and Turkish and Azerbaijani map ``i`` to the
    dotted capital.
    """
    language = locale.language
    if language in _DOTTED_I_LANGUAGES:
        return text.replace("i", "İ").upper()
    if language == LANGUAGE_GREEK:
        return _strip_greek_accents(text).upper()
    return text.upper()


def to_lower_case(text: str, locale: Locale) -> str:
    if locale.language in _DOTTED_I_LANGUAGES:
        return text.replace("I", "ı").replace("İ", "i").lower()
    return text.lower()
