"""Structured problem reports emitted while building a dictionary.

Normalization never raises on bad data. Instead each problem is handed to
an issue sink, which can collect them (IssueCollector) or log them
(LoggingIssueSink).

Usage:
    issues = IssueCollector()
    dictionary = DictionaryBuilder(issues=issues).build("de", pairs)
    for issue in issues.of_type(InvalidGraphemeInWordIssue):
        print(issue.message)
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Optional, Protocol, TypeVar

from .phonetics.inventory import ReferenceEntry
from .schema import Distributions, Metadata, WordPronunciation

T = TypeVar("T", bound="Issue")


class Issue:
    """Base class for issues."""

    kind: str = "issue"

    @property
    def message(self) -> str:
        return self.kind

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class MissingMetadataIssue(Issue):
    """No curated metadata exists; a draft was synthesized from the data."""

    metadata: Metadata
    distributions: Distributions
    reference_entry: Optional[ReferenceEntry] = None

    kind = "missing_metadata"

    @property
    def message(self) -> str:
        return (
            f"No metadata for language '{self.metadata.language}' "
            f"({self.metadata.description}); synthesized "
            f"{len(self.metadata.graphemes)} graphemes and "
            f"{len(self.metadata.phonemes)} phonemes"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "metadata": self.metadata.to_dict(),
            "distributions": self.distributions.to_dict(),
            "reference_entry": (
                self.reference_entry.to_dict() if self.reference_entry else None
            ),
        }


@dataclass(frozen=True)
class InvalidGraphemeInWordIssue(Issue):
    """A word contains a grapheme outside the language's alphabet."""

    word_pronunciation: WordPronunciation
    normalized_word: str
    invalid_grapheme: str
    metadata: Metadata

    kind = "invalid_grapheme"

    @property
    def message(self) -> str:
        return (
            f"Invalid grapheme '{self.invalid_grapheme}' in word "
            f"'{self.word_pronunciation.word}' (normalized: "
            f"'{self.normalized_word}')"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "word_pronunciation": self.word_pronunciation.to_dict(),
            "normalized_word": self.normalized_word,
            "invalid_grapheme": self.invalid_grapheme,
            "language": self.metadata.language,
        }


@dataclass(frozen=True)
class InvalidPhonemeInPronunciationIssue(Issue):
    """A pronunciation contains a phoneme outside the language's alphabet."""

    word_pronunciation: WordPronunciation
    invalid_phoneme: str
    metadata: Metadata

    kind = "invalid_phoneme"

    @property
    def message(self) -> str:
        return (
            f"Invalid phoneme '{self.invalid_phoneme}' in pronunciation "
            f"'{self.word_pronunciation.pronunciation}' of "
            f"'{self.word_pronunciation.word}'"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "word_pronunciation": self.word_pronunciation.to_dict(),
            "invalid_phoneme": self.invalid_phoneme,
            "language": self.metadata.language,
        }


class IssueSink(Protocol):
    """Anything that accepts issues."""

    def report(self, issue: Issue) -> None:
        ...


class IssueCollector:
    """Keeps every reported issue in order."""

    def __init__(self):
        self.issues: list[Issue] = []

    def report(self, issue: Issue) -> None:
        self.issues.append(issue)

    def of_type(self, issue_type: type[T]) -> list[T]:
        """Get reported issues of one type."""
        return [i for i in self.issues if isinstance(i, issue_type)]

    def counts(self) -> dict[str, int]:
        """Count issues by kind."""
        return dict(Counter(i.kind for i in self.issues))

    def __len__(self) -> int:
        return len(self.issues)


class LoggingIssueSink:
    """Logs each issue and keeps counts by kind."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("ipadict.issues")
        self.counter: Counter[str] = Counter()

    def report(self, issue: Issue) -> None:
        self.counter[issue.kind] += 1
        level = logging.INFO if isinstance(issue, MissingMetadataIssue) else logging.WARNING
        self.logger.log(level, issue.message)

    def counts(self) -> dict[str, int]:
        """Count issues by kind."""
        return dict(self.counter)


class NullIssueSink:
    """Discards issues."""

    def report(self, issue: Issue) -> None:
        pass
