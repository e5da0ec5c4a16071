"""Data structures for ipadict.

Core concept:
    - Raw word/pronunciation pairs come from an extractor, unvalidated
    - Metadata describes the valid alphabet of a language plus rewrite rules
    - A Dictionary maps each normalized word to its sorted pronunciations

Example:
    WordPronunciation("de", "de", "Bär", "/bɛːɐ̯/")
    normalizes against German metadata to ("bär", "bɛːɐ̯")
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class WordPronunciation:
    """A word and one of its pronunciations, raw or normalized."""

    source_edition: str     # Edition of the source the pair was extracted from
    language: str           # e.g., "en", "de"
    word: str
    pronunciation: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_edition": self.source_edition,
            "language": self.language,
            "word": self.word,
            "pronunciation": self.pronunciation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WordPronunciation":
        """Create from dictionary."""
        return cls(
            source_edition=data["source_edition"],
            language=data["language"],
            word=data["word"],
            pronunciation=data["pronunciation"],
        )


@dataclass(frozen=True)
class Metadata:
    """Per-language alphabet and rewrite rules.

    ``graphemes`` and ``phonemes`` are the complete alphabet that remains
    valid after the replacement rules have been applied. Both are ordered
    most-frequent first.
    """

    language: str
    description: str
    graphemes: tuple[str, ...] = ()
    phonemes: tuple[str, ...] = ()
    grapheme_replacements: tuple[tuple[str, str], ...] = ()
    phoneme_replacements: tuple[tuple[str, str], ...] = ()

    def __post_init__(self):
        # Accept lists from callers and JSON, store tuples
        object.__setattr__(self, "graphemes", tuple(self.graphemes))
        object.__setattr__(self, "phonemes", tuple(self.phonemes))
        object.__setattr__(
            self,
            "grapheme_replacements",
            tuple((p, r) for p, r in self.grapheme_replacements),
        )
        object.__setattr__(
            self,
            "phoneme_replacements",
            tuple((p, r) for p, r in self.phoneme_replacements),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "language": self.language,
            "description": self.description,
            "graphemes": list(self.graphemes),
            "phonemes": list(self.phonemes),
            "grapheme_replacements": [list(r) for r in self.grapheme_replacements],
            "phoneme_replacements": [list(r) for r in self.phoneme_replacements],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Metadata":
        """Create from dictionary."""
        return cls(
            language=data["language"],
            description=data.get("description", data["language"]),
            graphemes=data["graphemes"],
            phonemes=data["phonemes"],
            grapheme_replacements=data.get("grapheme_replacements", []),
            phoneme_replacements=data.get("phoneme_replacements", []),
        )


@dataclass(frozen=True)
class Distributions:
    """Observed grapheme and phoneme frequencies (fractions of the total)."""

    grapheme_distribution: dict[str, float] = field(default_factory=dict)
    phoneme_distribution: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "grapheme_distribution": dict(self.grapheme_distribution),
            "phoneme_distribution": dict(self.phoneme_distribution),
        }


@dataclass(frozen=True)
class Dictionary:
    """A finished pronunciation dictionary.

    ``data`` is ordered by the language's collation; each pronunciation
    tuple is duplicate-free and ordered by the reference collation.
    """

    data: dict[str, tuple[str, ...]]
    metadata: Metadata

    def count(self) -> int:
        """Get word count."""
        return len(self.data)

    def pronunciation_count(self) -> int:
        """Get total number of pronunciations across all words."""
        return sum(len(p) for p in self.data.values())

    def get(self, word: str) -> Optional[tuple[str, ...]]:
        """Get pronunciations for a normalized word."""
        return self.data.get(word)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "word_count": self.count(),
            "data": {word: list(p) for word, p in self.data.items()},
        }

    def to_tsv_lines(self) -> list[str]:
        """Render one ``word<TAB>pronunciation`` line per entry, in order."""
        return [
            f"{word}\t{pronunciation}"
            for word, pronunciations in self.data.items()
            for pronunciation in pronunciations
        ]
