"""Tab-separated pair ingestor.

Format: one pair per line, word and pronunciation separated by a tab.
Supports comments with # and empty lines.

    # word<TAB>pronunciation
    Haus	/haʊ̯s/
    Bär	[bɛːɐ̯]
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import Ingestor


class TsvIngestor(Ingestor):
    """Ingestor for word<TAB>pronunciation files."""

    file_extensions = [".tsv", ".txt"]

    def __init__(
        self,
        language: str,
        source_edition: Optional[str] = None,
        comment_char: str = "#",
    ):
        super().__init__(language, source_edition)
        self.comment_char = comment_char

    def parse(
        self, filepath: Path
    ) -> Iterator[tuple[Optional[str], Optional[str], Optional[int]]]:
        """Parse a TSV pair file.

        Args:
            filepath: Path to text file.

        Yields:
            Tuples of (word, pronunciation, line_number). Lines without a
            tab yield (None, None, line_number).
        """
        with open(filepath, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")

                # Skip empty lines and comments
                if not line.strip() or line.startswith(self.comment_char):
                    continue

                if "\t" not in line:
                    yield None, None, line_num
                    continue

                word, pronunciation = line.split("\t", 1)
                yield word.strip(), pronunciation.strip(), line_num


def ingest(
    filepath: Path | str,
    language: str,
    source_edition: Optional[str] = None,
    comment_char: str = "#",
):
    """Convenience function to ingest a TSV pair file.

    Args:
        filepath: Path to TSV file.
        language: Language code.
        source_edition: Edition name (defaults to the file stem).
        comment_char: Character that starts a comment line.

    Returns:
        IngestResult with raw pairs.
    """
    ingestor = TsvIngestor(
        language=language,
        source_edition=source_edition,
        comment_char=comment_char,
    )
    return ingestor.ingest(filepath)
