"""Word and pronunciation normalization.

Turns one raw (word, pronunciation) pair into zero or more pairs that only
use the alphabet of the language's metadata:

    word:          lowercase -> grapheme replacements -> alphabet check
    pronunciation: strip /.../ or [...] -> drop prosodic marks
                   -> phoneme replacements -> expand (optional) parts
                   -> alphabet check per alternative
"""

import re
from typing import Optional

from .issues import (
    InvalidGraphemeInWordIssue,
    InvalidPhonemeInPronunciationIssue,
    IssueSink,
    NullIssueSink,
)
from .phonetics.ipa import strip_non_essential
from .schema import Metadata, WordPronunciation
from .text import iter_graphemes, lowercase

OPTIONAL_PATTERN = re.compile(r"\((.*?)\)")

DELIMITERS = (("/", "/"), ("[", "]"))


def apply_replacements(text: str, replacements) -> str:
    """Apply (pattern, replacement) regex rules in order, each globally."""
    for pattern, replacement in replacements:
        text = re.sub(pattern, replacement, text)
    return text


def strip_delimiters(pronunciation: str) -> str:
    """Remove one layer of surrounding /.../ or [...]."""
    for opening, closing in DELIMITERS:
        if (
            len(pronunciation) >= 2
            and pronunciation.startswith(opening)
            and pronunciation.endswith(closing)
        ):
            return pronunciation[1:-1]
    return pronunciation


def get_alternatives(pronunciation: str) -> list[str]:
    """Expand optional (x) parts into a minimal and a maximal variant.

    Returns:
        [pronunciation] if there is nothing optional, else [minimal, maximal].
    """
    minimal = OPTIONAL_PATTERN.sub("", pronunciation)
    maximal = OPTIONAL_PATTERN.sub(r"\1", pronunciation)
    if minimal == maximal:
        return [minimal]
    return [minimal, maximal]


def normalize_word(
    word_pronunciation: WordPronunciation,
    metadata: Metadata,
    issues: Optional[IssueSink] = None,
) -> Optional[str]:
    """Normalize the word of a raw pair.

    Args:
        word_pronunciation: Raw pair.
        metadata: Metadata of the pair's language.
        issues: Sink for InvalidGraphemeInWordIssue.

    Returns:
        Normalized word or None if it contains an invalid grapheme.
    """
    if issues is None:
        issues = NullIssueSink()

    # Honors language-specific casing, e.g. Turkish "I" -> "ı"
    normalized = lowercase(word_pronunciation.word, metadata.language)
    normalized = apply_replacements(normalized, metadata.grapheme_replacements)

    valid = set(metadata.graphemes)
    for grapheme in iter_graphemes(normalized):
        if grapheme not in valid:
            issues.report(
                InvalidGraphemeInWordIssue(
                    word_pronunciation, normalized, grapheme, metadata
                )
            )
            return None

    return normalized


def normalize_pronunciation(
    word_pronunciation: WordPronunciation,
    metadata: Metadata,
    issues: Optional[IssueSink] = None,
) -> list[str]:
    """Normalize the pronunciation of a raw pair.

    Args:
        word_pronunciation: Raw pair.
        metadata: Metadata of the pair's language.
        issues: Sink for InvalidPhonemeInPronunciationIssue.

    Returns:
        Valid alternatives (zero, one or two).
    """
    if issues is None:
        issues = NullIssueSink()

    normalized = strip_delimiters(word_pronunciation.pronunciation)
    normalized = strip_non_essential(normalized)
    normalized = apply_replacements(normalized, metadata.phoneme_replacements)

    valid = set(metadata.phonemes)
    result = []
    for alternative in get_alternatives(normalized):
        invalid = next((p for p in alternative if p not in valid), None)
        if invalid is not None:
            issues.report(
                InvalidPhonemeInPronunciationIssue(
                    word_pronunciation, invalid, metadata
                )
            )
            continue
        result.append(alternative)

    return result


def normalize_word_pronunciation(
    word_pronunciation: WordPronunciation,
    metadata: Metadata,
    issues: Optional[IssueSink] = None,
) -> list[WordPronunciation]:
    """Normalize a raw pair into zero or more valid pairs.

    The pronunciation is not looked at if the word is rejected.
    """
    word = normalize_word(word_pronunciation, metadata, issues)
    if word is None:
        return []

    return [
        WordPronunciation(
            source_edition=word_pronunciation.source_edition,
            language=word_pronunciation.language,
            word=word,
            pronunciation=pronunciation,
        )
        for pronunciation in normalize_pronunciation(
            word_pronunciation, metadata, issues
        )
    ]
