"""Pydantic models for locales and per-locale punctuation resources."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

LOCALE_SEPARATOR = "_"
MAX_LOCALE_PARTS = 3

# Modern ISO 639 codes that the language tables know by their legacy form.
LEGACY_LANGUAGE_CODES: dict[str, str] = {"he": "iw"}


class Locale(BaseModel, frozen=True):
    """Simplified ``language[_COUNTRY[_VARIANT]]`` locale.

    An absent part is ``None``. A part that is present but empty, as the
    country in ``en__POSIX``, is kept as ``""`` so the part count survives.
    """

    language: str
    country: str | None = None
    variant: str | None = None

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Split a locale tag on ``_`` into at most three parts."""
        parts = split_locale_tag(tag)
        return cls(
            language=parts[0],
            country=parts[1] if len(parts) > 1 else None,
            variant=parts[2] if len(parts) > 2 else None,
        )

    @property
    def part_count(self) -> int:
        if self.variant is not None:
            return 3
        if self.country is not None:
            return 2
        return 1

    def __str__(self) -> str:
        parts: list[str] = [self.language]
        if self.country is not None:
            parts.append(self.country)
        if self.variant is not None:
            parts.append(self.variant)
        return LOCALE_SEPARATOR.join(parts)

    def __hash__(self) -> int:
        return hash((self.language, self.country, self.variant))


ROOT_LOCALE = Locale(language="")


def split_locale_tag(tag: str) -> list[str]:
    """Split a raw tag the way every locale operation expects it split."""
    return tag.split(LOCALE_SEPARATOR, MAX_LOCALE_PARTS - 1)


def canonical_language(language: str) -> str:
    return LEGACY_LANGUAGE_CODES.get(language, language)


class PunctuationResources(BaseModel):
    """Raw spacing and punctuation resources for one locale.

    Every symbol string is taken code point by code point, whitespace
    included, so ``" \\t"`` declares a space and a tab.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbols_preceded_by_space: str = Field(
        default="([{&", alias="symbolsPrecededBySpace"
    )
    symbols_followed_by_space: str = Field(
        default=".,;:!?)]}&", alias="symbolsFollowedBySpace"
    )
    symbols_clustering_together: str = Field(
        default="", alias="symbolsClusteringTogether"
    )
    symbols_word_connectors: str = Field(default="'-", alias="symbolsWordConnectors")
    symbols_word_separators: str = Field(
        default="\t \n\u00a0\"()[]{}*&<>+=|.,;:!?/_",
        alias="symbolsWordSeparators",
    )
    symbols_sentence_terminators: str = Field(
        default=".?!", alias="symbolsSentenceTerminators"
    )
    sentence_separator: int = Field(default=ord("."), alias="sentenceSeparator")
    abbreviation_marker: int = Field(default=ord("."), alias="abbreviationMarker")
    current_language_has_spaces: bool = Field(
        default=True, alias="currentLanguageHasSpaces"
    )
    suggested_punctuations: tuple[str, ...] = Field(
        default=("!", "?", ",", ":", ";", '"', "(", ")", "'", "-", "/", "@", "_"),
        alias="suggestedPunctuations",
    )


class PunctuationResourcesFile(BaseModel):
    """Model for a resource JSON file: locale tag to resource entry."""

    resources: dict[str, PunctuationResources]
