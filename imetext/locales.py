"""Locale matching on ``language[_COUNTRY[_VARIANT]]`` strings."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from enum import IntEnum

from .models import Locale, canonical_language, split_locale_tag

logger = logging.getLogger(__name__)


class MatchLevel(IntEnum):
    """How well a tested locale satisfies a reference locale.

    A better match always has a higher value. The gaps leave room for finer
    levels, such as telling a differing country apart from a missing one.
    """

    # Nothing matches.
    NO_MATCH = 0
    # Same language, but the countries differ, or the reference requires a
    # country the tested locale lacks.
    LANGUAGE_MATCH_COUNTRY_DIFFER = 3
    # Same language and country, but the variants differ, or the reference
    # requires a variant the tested locale lacks.
    LANGUAGE_AND_COUNTRY_MATCH_VARIANT_DIFFER = 6
    # The reference is empty so it accepts anything, and the tested locale
    # is not empty.
    ANY_MATCH = 10
    # Same language, and the tested locale adds a country the reference does
    # not require.
    LANGUAGE_MATCH = 15
    # Same language and country, and the tested locale adds a variant the
    # reference does not require.
    LANGUAGE_AND_COUNTRY_MATCH = 20
    # Identical locales.
    FULL_MATCH = 30


# Threshold for what callers consider a match. Use is_match() to test.
LOCALE_MATCH = MatchLevel.ANY_MATCH
# Highest match level. More than two decimal digits would break
# get_match_level_sorted_string.
MATCH_LEVEL_MAX = 30

RTL_LANGUAGE_CODES = frozenset(
    {
        "ar",  # Arabic
        "fa",  # Persian
        "iw",  # Hebrew
        "ku",  # Kurdish
        "ps",  # Pashto
        "sd",  # Sindhi
        "ug",  # Uyghur
        "ur",  # Urdu
        "yi",  # Yiddish
    }
)


def get_match_level(reference: str | None, tested: str | None) -> MatchLevel:
    """Return how well ``tested`` matches ``reference``.

    The tested locale has to agree with every part the reference specifies.
    Identical locales are a full match, a tested locale that is more specific
    is a partial match, and one that misses a required part differs.

    Examples:
        en <=> en_US => LANGUAGE_MATCH
        en_US <=> en => LANGUAGE_MATCH_COUNTRY_DIFFER
        en_US_POSIX <=> en_US_Android => LANGUAGE_AND_COUNTRY_MATCH_VARIANT_DIFFER
        en_US <=> en_US_Android => LANGUAGE_AND_COUNTRY_MATCH
        sp_US <=> en_US => NO_MATCH
        de <=> de => FULL_MATCH
        "" <=> en_US => ANY_MATCH
    """
    if not reference:
        return MatchLevel.FULL_MATCH if not tested else MatchLevel.ANY_MATCH
    if tested is None:
        return MatchLevel.NO_MATCH
    reference_parts = split_locale_tag(reference)
    tested_parts = split_locale_tag(tested)
    if reference_parts[0] != tested_parts[0]:
        return MatchLevel.NO_MATCH

    if len(reference_parts) == 1:
        if len(tested_parts) == 1:
            return MatchLevel.FULL_MATCH
        return MatchLevel.LANGUAGE_MATCH

    if len(tested_parts) == 1 or reference_parts[1] != tested_parts[1]:
        return MatchLevel.LANGUAGE_MATCH_COUNTRY_DIFFER

    if len(reference_parts) == 2:
        if len(tested_parts) == 3:
            return MatchLevel.LANGUAGE_AND_COUNTRY_MATCH
        return MatchLevel.FULL_MATCH

    if len(tested_parts) == 2 or reference_parts[2] != tested_parts[2]:
        return MatchLevel.LANGUAGE_AND_COUNTRY_MATCH_VARIANT_DIFFER
    return MatchLevel.FULL_MATCH


def get_match_level_sorted_string(level: int) -> str:
    """Return a key that sorts better matches first.

    Only valid for levels 0 to MATCH_LEVEL_MAX, which keeps it two digits.
    """
    return f"{MATCH_LEVEL_MAX - level:02d}"


def is_match(level: int) -> bool:
    return LOCALE_MATCH <= level


def find_best_match(tested: str | None, references: Iterable[str]) -> str | None:
    """Return the reference locale that ``tested`` satisfies best.

    This picks the resource or dictionary locale that best serves a user
    locale. References that are not a match are ignored, and ties keep the
    earliest one.
    """
    best: tuple[str, str] | None = None
    for candidate in references:
        level = get_match_level(candidate, tested)
        if not is_match(level):
            continue
        key = get_match_level_sorted_string(level)
        if best is None or key < best[0]:
            best = (key, candidate)
    return best[1] if best else None


def is_rtl_language(locale: Locale | str) -> bool:
    if isinstance(locale, str):
        locale = Locale.parse(locale)
    return canonical_language(locale.language) in RTL_LANGUAGE_CODES


class LocaleCache:
    """Builds Locale objects from tags and keeps them for reuse.

    One lock covers lookup and insertion, so every caller asking for the
    same tag gets the same instance.
    """

    def __init__(self) -> None:
        self._locales: dict[str, Locale] = {}
        self._lock = threading.Lock()

    def construct_locale_from_string(self, tag: str) -> Locale:
        with self._lock:
            locale = self._locales.get(tag)
            if locale is None:
                locale = Locale.parse(tag)
                self._locales[tag] = locale
                logger.debug("Cached locale %r for tag %r", locale, tag)
            return locale

    def __len__(self) -> int:
        with self._lock:
            return len(self._locales)

    def __contains__(self, tag: object) -> bool:
        with self._lock:
            return tag in self._locales


def construct_locale_from_string(tag: str, cache: LocaleCache) -> Locale:
    return cache.construct_locale_from_string(tag)
