"""Base ingestor interface for raw pronunciation sources.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading raw word/pronunciation pairs
from any source format. No normalization happens here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from ..schema import WordPronunciation


@dataclass
class IngestResult:
    """Result of ingesting a pronunciation source."""

    pairs: list[WordPronunciation]
    source_path: str
    source_edition: str
    language: str
    total_raw: int = 0          # Total non-comment lines/entries in source
    total_valid: int = 0        # Entries that yielded a pair
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.source_edition}/{self.language}: "
            f"{self.total_valid}/{self.total_raw} pairs, "
            f"{len(self.errors)} errors)"
        )


class Ingestor(ABC):
    """Base class for raw pair ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (word, pronunciation, line_number)
          tuples; a None word marks a malformed entry
        - file_extensions: list of supported extensions
    """

    file_extensions: list[str] = []

    def __init__(self, language: str, source_edition: Optional[str] = None):
        """Initialize ingestor.

        Args:
            language: Language code of the pairs (e.g., "en", "de").
            source_edition: Edition the pairs were extracted from.
                Defaults to the file stem.
        """
        self.language = language
        self.source_edition = source_edition

    @abstractmethod
    def parse(
        self, filepath: Path
    ) -> Iterator[tuple[Optional[str], Optional[str], Optional[int]]]:
        """Parse source file.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (word, pronunciation, line_number).
        """
        pass

    def get_source_edition(self, filepath: Path) -> str:
        """Get the source edition name for a file."""
        return self.source_edition or filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest raw pairs from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with raw pairs and statistics.
        """
        filepath = Path(filepath)
        edition = self.get_source_edition(filepath)

        pairs: list[WordPronunciation] = []
        errors: list[str] = []
        total_raw = 0

        for word, pronunciation, line_num in self.parse(filepath):
            total_raw += 1
            if not word or not pronunciation:
                errors.append(f"{filepath.name}:{line_num}: malformed entry")
                continue

            pairs.append(
                WordPronunciation(
                    source_edition=edition,
                    language=self.language,
                    word=word,
                    pronunciation=pronunciation,
                )
            )

        return IngestResult(
            pairs=pairs,
            source_path=str(filepath.resolve()),
            source_edition=edition,
            language=self.language,
            total_raw=total_raw,
            total_valid=len(pairs),
            errors=errors,
        )
