"""Per-locale spacing and punctuation rules."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from .characters import CODE_SPACE, is_letter
from .models import Locale, PunctuationResources
from .text import contains_code_point, to_sorted_code_point_array

LANGUAGE_ENGLISH = "en"
LANGUAGE_GERMAN = "de"


class SpacingAndPunctuations(BaseModel):
    """Immutable symbol sets and typography flags for one locale.

    The symbol sets are sorted tuples so membership is a binary search.
    """

    model_config = ConfigDict(frozen=True)

    sorted_symbols_preceded_by_space: tuple[int, ...]
    sorted_symbols_followed_by_space: tuple[int, ...]
    sorted_symbols_clustering_together: tuple[int, ...]
    sorted_word_connectors: tuple[int, ...]
    sorted_word_separators: tuple[int, ...]
    sorted_sentence_terminators: tuple[int, ...]
    sentence_separator: int
    abbreviation_marker: int
    suggested_punctuations: tuple[str, ...] = ()
    current_language_has_spaces: bool = True
    uses_american_typography: bool = False
    uses_german_rules: bool = False

    @classmethod
    def from_resources(
        cls, resources: PunctuationResources, locale: Locale
    ) -> SpacingAndPunctuations:
        # American typography is the most common across English variants.
        # German rules, not German typography, have small gotchas of their own.
        return cls(
            sorted_symbols_preceded_by_space=to_sorted_code_point_array(
                resources.symbols_preceded_by_space
            ),
            sorted_symbols_followed_by_space=to_sorted_code_point_array(
                resources.symbols_followed_by_space
            ),
            sorted_symbols_clustering_together=to_sorted_code_point_array(
                resources.symbols_clustering_together
            ),
            sorted_word_connectors=to_sorted_code_point_array(
                resources.symbols_word_connectors
            ),
            sorted_word_separators=to_sorted_code_point_array(
                resources.symbols_word_separators
            ),
            sorted_sentence_terminators=to_sorted_code_point_array(
                resources.symbols_sentence_terminators
            ),
            sentence_separator=resources.sentence_separator,
            abbreviation_marker=resources.abbreviation_marker,
            suggested_punctuations=resources.suggested_punctuations,
            current_language_has_spaces=resources.current_language_has_spaces,
            uses_american_typography=locale.language == LANGUAGE_ENGLISH,
            uses_german_rules=locale.language == LANGUAGE_GERMAN,
        )

    def with_word_separators(
        self, sorted_word_separators: Iterable[int]
    ) -> SpacingAndPunctuations:
        """Copy of this profile with its word separators replaced."""
        return self.model_copy(
            update={"sorted_word_separators": tuple(sorted(sorted_word_separators))}
        )

    @property
    def sentence_separator_and_space(self) -> str:
        return chr(self.sentence_separator) + chr(CODE_SPACE)

    def is_word_separator(self, code: int) -> bool:
        return contains_code_point(self.sorted_word_separators, code)

    def is_word_connector(self, code: int) -> bool:
        return contains_code_point(self.sorted_word_connectors, code)

    def is_word_code_point(self, code: int) -> bool:
        return is_letter(code) or self.is_word_connector(code)

    def is_usually_preceded_by_space(self, code: int) -> bool:
        return contains_code_point(self.sorted_symbols_preceded_by_space, code)

    def is_usually_followed_by_space(self, code: int) -> bool:
        return contains_code_point(self.sorted_symbols_followed_by_space, code)

    def is_clustering_symbol(self, code: int) -> bool:
        return contains_code_point(self.sorted_symbols_clustering_together, code)

    def is_sentence_terminator(self, code: int) -> bool:
        return contains_code_point(self.sorted_sentence_terminators, code)

    def is_abbreviation_marker(self, code: int) -> bool:
        return code == self.abbreviation_marker

    def is_sentence_separator(self, code: int) -> bool:
        return code == self.sentence_separator

    def dump(self) -> str:
        """Multi-line description of every field, for debugging."""
        fields = [
            ("sorted_symbols_preceded_by_space", self.sorted_symbols_preceded_by_space),
            ("sorted_symbols_followed_by_space", self.sorted_symbols_followed_by_space),
            ("sorted_word_connectors", self.sorted_word_connectors),
            ("sorted_word_separators", self.sorted_word_separators),
            ("suggested_punctuations", self.suggested_punctuations),
            ("sentence_separator", self.sentence_separator),
            ("sentence_separator_and_space", self.sentence_separator_and_space),
            ("current_language_has_spaces", self.current_language_has_spaces),
            ("uses_american_typography", self.uses_american_typography),
            ("uses_german_rules", self.uses_german_rules),
        ]
        return "\n   ".join(f"{name} = {value!r}" for name, value in fields)
