"""Locale-aware text helpers backed by ICU.

Python's own ``str.lower`` and ``sorted`` know nothing about locales, so
lowercasing (Turkish dotted/dotless i), collation and language names go
through PyICU. Grapheme clusters are split with the ``regex`` module.
"""

from typing import Iterator, Optional

import icu
import regex

from .cache import LazyCache

GRAPHEME_PATTERN = regex.compile(r"\X")

# Pronunciations are ordered the same way whatever the target language is
REFERENCE_LOCALE = "en"

_COLLATORS: LazyCache[str, "icu.Collator"] = LazyCache()


def lowercase(text: str, language: str) -> str:
    """Lowercase text using the casing rules of a language.

    Args:
        text: Text to lowercase.
        language: Language code (e.g., "tr", "de").

    Returns:
        Lowercased text.
    """
    return str(icu.UnicodeString(text).toLower(icu.Locale(language)))


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of text."""
    for match in GRAPHEME_PATTERN.finditer(text):
        yield match.group()


def language_name(language: str) -> Optional[str]:
    """Get the English name of a language, or None if ICU doesn't know it."""
    name = str(icu.Locale(language).getDisplayLanguage(icu.Locale.getEnglish()))
    if not name or name == language:
        return None
    return name


def iso639_3(language: str) -> Optional[str]:
    """Map a language code to its ISO 639-3 form.

    Three-letter codes are returned as-is.
    """
    if len(language) == 3:
        return language
    code = str(icu.Locale(language).getISO3Language())
    return code or None


def _parse_locale(language: str) -> Optional["icu.Locale"]:
    try:
        locale = icu.Locale.forLanguageTag(language)
    except icu.ICUError:
        return None
    if not locale.getLanguage():
        return None
    return locale


def _create_collator(language: str) -> "icu.Collator":
    locale = _parse_locale(language)
    if locale is None:
        return icu.Collator.createInstance(icu.Locale.getRoot())
    try:
        return icu.Collator.createInstance(locale)
    except icu.ICUError:
        return icu.Collator.createInstance(icu.Locale.getRoot())


def get_collator(language: str) -> "icu.Collator":
    """Get the (cached) collator for a language.

    Falls back to the locale-neutral root collator if the code is not a
    usable locale identifier.
    """
    return _COLLATORS.get_or_create(language, lambda: _create_collator(language))


def reference_collator() -> "icu.Collator":
    """Get the collator used for ordering pronunciations."""
    return get_collator(REFERENCE_LOCALE)


def sort_strings(strings, collator: "icu.Collator") -> list[str]:
    """Sort strings with an ICU collator."""
    return sorted(strings, key=collator.getSortKey)
