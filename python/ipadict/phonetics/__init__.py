"""Phonetics module for ipadict.

Provides the IPA symbol tables used during normalization and the PHOIBLE
reference inventories attached to metadata diagnostics.

Usage:
    from ipadict.phonetics import IPA_SYMBOLS, ReferenceInventoryCache

    cache = ReferenceInventoryCache.from_file("sources/phoible.csv")
    entry = cache.get_entry("de")
"""

from .ipa import (
    IPA_SYMBOLS,
    NON_ESSENTIAL_IPA_SYMBOLS,
    is_ipa_symbol,
    strip_non_essential,
)
from .inventory import (
    PHOIBLE_URL,
    ReferenceEntry,
    ReferenceInventoryCache,
    download_phoible,
    load_phoible_csv,
)

__all__ = [
    "IPA_SYMBOLS",
    "NON_ESSENTIAL_IPA_SYMBOLS",
    "is_ipa_symbol",
    "strip_non_essential",
    "PHOIBLE_URL",
    "ReferenceEntry",
    "ReferenceInventoryCache",
    "download_phoible",
    "load_phoible_csv",
]
