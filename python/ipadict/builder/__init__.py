"""Dictionary builder module.

Builds sorted, deduplicated pronunciation dictionaries from raw pairs.
"""

from .dictionary import BuildStats, DictionaryBuilder, create_dictionary

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
    "create_dictionary",
]
