"""ipadict - Pronunciation dictionary builder.

Builds a per-language pronunciation dictionary from raw word/pronunciation
pairs extracted from a wiki-style source.

Core concepts:
    - Metadata lists the valid graphemes and phonemes of a language
    - Raw pairs are lowercased, rewritten and checked against that alphabet
    - Optional parts of a transcription, e.g. "rʌn(s)", expand to two readings
    - Languages without curated metadata get a synthesized draft

Example:
    ("Run", "/rʌn/") + ("run", "rʌn(s)")
    -> {"run": ["rʌn", "rʌns"]}

Usage:
    from ipadict.builder import DictionaryBuilder
    from ipadict.issues import IssueCollector
    from ipadict.metadata import MetadataResolver, MetadataTable

    issues = IssueCollector()
    builder = DictionaryBuilder(
        resolver=MetadataResolver(MetadataTable.default()),
        issues=issues,
    )
    dictionary = builder.build("en", raw_pairs)
"""

__version__ = "0.1.0"
