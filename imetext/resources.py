"""Built-in punctuation resources and per-locale resource selection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from .loaders import load_punctuation_resources
from .locales import LocaleCache, find_best_match
from .models import PunctuationResources
from .spacing import SpacingAndPunctuations

logger = logging.getLogger(__name__)

DEFAULT_LOCALE_TAG = ""

_NO_SPACES = PunctuationResources(current_language_has_spaces=False)

DEFAULT_RESOURCES: dict[str, PunctuationResources] = {
    DEFAULT_LOCALE_TAG: PunctuationResources(),
    # French puts a space before the two-part punctuation marks.
    "fr": PunctuationResources(
        symbols_preceded_by_space="([{&;:!?",
        symbols_clustering_together="!?",
    ),
    # Armenian ends sentences with the full stop U+0589.
    "hy": PunctuationResources(
        symbols_followed_by_space=".,;:!?)]}&\u0589\u055c\u055e",
        symbols_word_separators="\t \n\u00a0\"()[]{}*&<>+=|.,;:!?/_\u0589\u055c\u055e",
        symbols_sentence_terminators="\u0589\u055c\u055e",
        sentence_separator=0x0589,
    ),
    "km": _NO_SPACES,
    "lo": _NO_SPACES,
    "my": _NO_SPACES,
    "th": _NO_SPACES,
}


class ResourceRegistry:
    """Punctuation resource tables keyed by locale tag.

    Lookups pick the table whose tag the requested locale satisfies best,
    falling back to the default entry.
    """

    def __init__(
        self,
        resources: Mapping[str, PunctuationResources] | None = None,
        cache: LocaleCache | None = None,
    ) -> None:
        self._resources: dict[str, PunctuationResources] = dict(DEFAULT_RESOURCES)
        if resources:
            self._resources.update(resources)
        self._cache = cache if cache is not None else LocaleCache()

    @classmethod
    def from_file(
        cls, path: Path, cache: LocaleCache | None = None
    ) -> ResourceRegistry:
        return cls(load_punctuation_resources(path), cache=cache)

    @property
    def locale_tags(self) -> list[str]:
        return sorted(self._resources)

    def resolve_tag(self, locale_tag: str) -> str:
        """Return the resource tag used for ``locale_tag``."""
        tag = find_best_match(locale_tag, self._resources)
        if tag is None:
            tag = DEFAULT_LOCALE_TAG
        logger.debug("Resolved locale %r to resources %r", locale_tag, tag)
        return tag

    def resources_for(self, locale_tag: str) -> PunctuationResources:
        return self._resources.get(self.resolve_tag(locale_tag), PunctuationResources())

    def spacing_and_punctuations(self, locale_tag: str) -> SpacingAndPunctuations:
        locale = self._cache.construct_locale_from_string(locale_tag)
        return SpacingAndPunctuations.from_resources(
            self.resources_for(locale_tag), locale
        )
