"""Dictionary builder.

Resolves metadata once, normalizes every raw pair, merges pronunciations
per word and sorts the result:

    words          -> collation of the target language
    pronunciations -> fixed reference collation (same for every language)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..issues import (
    InvalidGraphemeInWordIssue,
    InvalidPhonemeInPronunciationIssue,
    Issue,
    IssueSink,
    MissingMetadataIssue,
    NullIssueSink,
)
from ..metadata import MetadataResolver
from ..normalizer import normalize_word_pronunciation
from ..schema import Dictionary, WordPronunciation
from ..text import get_collator, reference_collator, sort_strings

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    language: str = ""
    total_raw: int = 0              # Raw pairs consumed
    total_normalized: int = 0       # Normalized pairs produced
    rejected_words: int = 0
    rejected_pronunciations: int = 0
    total_words: int = 0            # Distinct words in the dictionary
    total_pronunciations: int = 0   # After deduplication
    synthesized_metadata: bool = False


class _CountingSink:
    """Forwards issues while counting them into BuildStats."""

    def __init__(self, sink: IssueSink, stats: BuildStats):
        self.sink = sink
        self.stats = stats

    def report(self, issue: Issue) -> None:
        if isinstance(issue, InvalidGraphemeInWordIssue):
            self.stats.rejected_words += 1
        elif isinstance(issue, InvalidPhonemeInPronunciationIssue):
            self.stats.rejected_pronunciations += 1
        elif isinstance(issue, MissingMetadataIssue):
            self.stats.synthesized_metadata = True
        self.sink.report(issue)


class DictionaryBuilder:
    """Builds a pronunciation dictionary from raw pairs."""

    def __init__(
        self,
        resolver: Optional[MetadataResolver] = None,
        issues: Optional[IssueSink] = None,
    ):
        """Initialize builder.

        Args:
            resolver: Metadata source. Defaults to one with no curated
                metadata and no reference inventory.
            issues: Sink for every issue raised during builds.
        """
        self.resolver = resolver if resolver is not None else MetadataResolver()
        self.issues = issues if issues is not None else NullIssueSink()
        # Stats of the most recent build() call on this builder
        self.last_stats: Optional[BuildStats] = None

    def build(
        self,
        language: str,
        word_pronunciations: Iterable[WordPronunciation],
    ) -> Dictionary:
        """Build the dictionary for one language and record last_stats.

        last_stats is shared by every call on this builder. Threads that
        build concurrently should use build_with_stats() instead.

        Raises:
            MetadataResolutionError: If metadata could not be resolved.
        """
        dictionary, self.last_stats = self.build_with_stats(
            language, word_pronunciations
        )
        return dictionary

    def build_with_stats(
        self,
        language: str,
        word_pronunciations: Iterable[WordPronunciation],
    ) -> tuple[Dictionary, BuildStats]:
        """Build the dictionary for one language.

        Args:
            language: Language code.
            word_pronunciations: Raw pairs. Consumed fully before any
                normalization, since metadata depends on all of them.

        Returns:
            Tuple of (Dictionary, BuildStats) for this call only.

        Raises:
            MetadataResolutionError: If metadata could not be resolved.
        """
        word_pronunciations = list(word_pronunciations)
        stats = BuildStats(language=language, total_raw=len(word_pronunciations))
        sink = _CountingSink(self.issues, stats)

        metadata = self.resolver.resolve(language, word_pronunciations, sink)

        # Normalized word -> pronunciations
        pronunciations_by_word: dict[str, set[str]] = {}
        for word_pronunciation in word_pronunciations:
            for normalized in normalize_word_pronunciation(
                word_pronunciation, metadata, sink
            ):
                stats.total_normalized += 1
                pronunciations_by_word.setdefault(normalized.word, set()).add(
                    normalized.pronunciation
                )

        pronunciation_collator = reference_collator()
        data = {
            word: tuple(
                sort_strings(pronunciations_by_word[word], pronunciation_collator)
            )
            for word in sort_strings(pronunciations_by_word, get_collator(language))
        }

        stats.total_words = len(data)
        stats.total_pronunciations = sum(len(p) for p in data.values())

        logger.info(
            "[%s] %d words, %d pronunciations from %d raw pairs",
            language,
            stats.total_words,
            stats.total_pronunciations,
            stats.total_raw,
        )
        return Dictionary(data=data, metadata=metadata), stats


def create_dictionary(
    language: str,
    word_pronunciations: Iterable[WordPronunciation],
    resolver: Optional[MetadataResolver] = None,
    issues: Optional[IssueSink] = None,
) -> Dictionary:
    """Convenience function to build a dictionary in one call."""
    return DictionaryBuilder(resolver=resolver, issues=issues).build(
        language, word_pronunciations
    )
