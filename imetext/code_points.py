"""Random code point and word generators for tests."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .characters import MAX_CODE_POINT, MAX_SURROGATE, MIN_SURROGATE

LATIN_ALPHABETS_LOWER: tuple[int, ...] = (
    *range(ord("a"), ord("z") + 1),
    # LATIN SMALL LETTER A WITH GRAVE through Y WITH DIAERESIS, skipping the
    # division sign.
    *range(0x00E0, 0x00F7),
    *range(0x00F8, 0x0100),
)


def generate_code_point_set(size: int, rng: random.Random) -> list[int]:
    """Return ``size`` random code points above U+0020, none a surrogate."""
    code_points: list[int] = []
    while len(code_points) < size:
        candidate = rng.randint(0x21, MAX_CODE_POINT)
        if MIN_SURROGATE <= candidate <= MAX_SURROGATE:
            continue
        code_points.append(candidate)
    return code_points


def generate_word(rng: random.Random, code_points: Sequence[int]) -> str:
    """Return a random word drawn from ``code_points``.

    The length is the sum of eight draws, which biases it toward longer words
    closer to natural language.
    """
    count = 1 + sum(rng.randrange(5) for _ in range(8))
    return "".join(chr(rng.choice(code_points)) for _ in range(count))
