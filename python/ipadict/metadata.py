"""Metadata lookup and synthesis.

Curated metadata comes from a read-only MetadataTable. Languages without a
curated entry get draft metadata inferred from the raw pairs themselves,
which is reported as a MissingMetadataIssue so it can be reviewed and
promoted into the table.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from .issues import IssueSink, MissingMetadataIssue, NullIssueSink
from .phonetics.inventory import ReferenceEntry, ReferenceInventoryCache
from .phonetics.ipa import is_ipa_symbol
from .schema import Distributions, Metadata, WordPronunciation
from .stats import get_character_stats
from .text import iter_graphemes, language_name, lowercase

logger = logging.getLogger(__name__)

DEFAULT_METADATA_PATH = Path(__file__).parent / "data" / "metadata.json"


class MetadataTable:
    """Read-only mapping of language code to curated Metadata."""

    def __init__(self, entries: Mapping[str, Metadata] | None = None):
        self._entries: dict[str, Metadata] = dict(entries or {})

    @classmethod
    def load(cls, filepath: Path | str) -> "MetadataTable":
        """Load a table from a JSON object keyed by language code.

        Raises:
            ValueError: If an entry is missing a required field.
        """
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        entries = {}
        for language, entry in data.items():
            try:
                entries[language] = Metadata.from_dict({"language": language, **entry})
            except KeyError as e:
                raise ValueError(
                    f"Metadata for '{language}' in {filepath} is missing {e}"
                ) from e
        return cls(entries)

    @classmethod
    def default(cls) -> "MetadataTable":
        """Load the curated metadata bundled with ipadict."""
        return cls.load(DEFAULT_METADATA_PATH)

    def get(self, language: str) -> Optional[Metadata]:
        return self._entries.get(language)

    def languages(self) -> list[str]:
        return list(self._entries.keys())

    def __contains__(self, language: object) -> bool:
        return language in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _word_graphemes(
    language: str,
    word_pronunciations: Sequence[WordPronunciation],
) -> Iterator[str]:
    words = dict.fromkeys(lowercase(wp.word, language) for wp in word_pronunciations)
    for word in words:
        yield from iter_graphemes(word)


def _pronunciation_phonemes(
    word_pronunciations: Sequence[WordPronunciation],
) -> Iterator[str]:
    for wp in word_pronunciations:
        yield from (symbol for symbol in wp.pronunciation if is_ipa_symbol(symbol))


def generate_dummy_metadata(
    language: str,
    word_pronunciations: Sequence[WordPronunciation],
) -> tuple[Metadata, Distributions]:
    """Infer draft metadata from raw pairs.

    Graphemes come from the distinct lowercased words; phonemes from every
    pronunciation, keeping only recognized IPA symbols.

    Args:
        language: Language code.
        word_pronunciations: Raw pairs for the language.

    Returns:
        Tuple of (metadata, observed distributions).
    """
    grapheme_stats = get_character_stats(_word_graphemes(language, word_pronunciations))
    phoneme_stats = get_character_stats(_pronunciation_phonemes(word_pronunciations))

    metadata = Metadata(
        language=language,
        description=language_name(language) or language,
        graphemes=grapheme_stats.characters,
        phonemes=phoneme_stats.characters,
    )
    distributions = Distributions(
        grapheme_distribution=grapheme_stats.distribution,
        phoneme_distribution=phoneme_stats.distribution,
    )
    return metadata, distributions


class MetadataResolver:
    """Finds or synthesizes the metadata for a language.

    Args:
        table: Curated metadata. Defaults to an empty table.
        reference: Reference inventories attached to MissingMetadataIssue.
            Skipped if None.
    """

    def __init__(
        self,
        table: Optional[MetadataTable] = None,
        reference: Optional[ReferenceInventoryCache] = None,
    ):
        self.table = table if table is not None else MetadataTable()
        self.reference = reference

    def _reference_entry(self, language: str) -> Optional[ReferenceEntry]:
        if self.reference is None:
            return None
        return self.reference.get_entry(language)

    def resolve(
        self,
        language: str,
        word_pronunciations: Iterable[WordPronunciation],
        issues: Optional[IssueSink] = None,
    ) -> Metadata:
        """Get metadata for a language.

        Args:
            language: Language code.
            word_pronunciations: All raw pairs of the build.
            issues: Sink for MissingMetadataIssue.

        Returns:
            Curated metadata, or synthesized metadata if none is curated.

        Raises:
            MetadataResolutionError: If the reference inventory can't be loaded.
        """
        known = self.table.get(language)
        if known is not None:
            return known

        if issues is None:
            issues = NullIssueSink()

        logger.info("No curated metadata for '%s', synthesizing", language)
        metadata, distributions = generate_dummy_metadata(
            language, list(word_pronunciations)
        )
        reference_entry = self._reference_entry(language)
        issues.report(MissingMetadataIssue(metadata, distributions, reference_entry))
        return metadata

