"""Character frequency statistics.

Used to derive a draft alphabet for languages without curated metadata.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class CharacterStats:
    """Distinct characters by descending frequency, plus their fractions."""

    characters: list[str] = field(default_factory=list)
    distribution: dict[str, float] = field(default_factory=dict)


def get_character_stats(characters: Iterable[str]) -> CharacterStats:
    """Count characters and rank them by frequency.

    Ties keep the order in which characters were first seen.

    Args:
        characters: Single-pass iterable of graphemes or phonemes.

    Returns:
        CharacterStats. Empty if the input was empty.
    """
    counts = Counter(characters)
    total = sum(counts.values())
    if total == 0:
        return CharacterStats()

    ranked = counts.most_common()
    return CharacterStats(
        characters=[character for character, _ in ranked],
        distribution={character: count / total for character, count in ranked},
    )
