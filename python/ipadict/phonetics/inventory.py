"""Reference phoneme inventories from PHOIBLE.

PHOIBLE (https://phoible.org) publishes one CSV row per phoneme per
inventory. Entries are grouped by ISO 639-3 code and only used to give
curators something to compare a synthesized alphabet against.

Usage:
    cache = ReferenceInventoryCache.from_url(PHOIBLE_URL, cache_dir="./sources")
    entry = cache.get_entry("de")   # -> ReferenceEntry for "deu" or None
"""

import csv
import logging
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

from ..cache import LazyCache
from ..errors import MetadataResolutionError
from ..text import iso639_3

logger = logging.getLogger(__name__)

PHOIBLE_URL = "https://raw.githubusercontent.com/phoible/dev/master/data/phoible.csv"


@dataclass
class ReferenceEntry:
    """All PHOIBLE inventories for one language."""

    iso6393: str
    language_names: list[str] = field(default_factory=list)
    inventories: dict[str, list[str]] = field(default_factory=dict)  # "Source-ID" -> phonemes

    def all_phonemes(self) -> set[str]:
        """Union of the phonemes of every inventory."""
        phonemes: set[str] = set()
        for inventory in self.inventories.values():
            phonemes.update(inventory)
        return phonemes

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "iso6393": self.iso6393,
            "language_names": list(self.language_names),
            "inventories": {k: list(v) for k, v in self.inventories.items()},
        }


def load_phoible_csv(filepath: Path | str) -> dict[str, ReferenceEntry]:
    """Parse a PHOIBLE CSV export.

    Args:
        filepath: Path to phoible.csv.

    Returns:
        Dict mapping ISO 639-3 code to ReferenceEntry.
    """
    entries: dict[str, ReferenceEntry] = {}
    with open(filepath, "r", encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            iso = (row.get("ISO6393") or "").strip()
            phoneme = row.get("Phoneme") or ""
            if not iso or not phoneme:
                continue

            entry = entries.get(iso)
            if entry is None:
                entry = entries[iso] = ReferenceEntry(iso6393=iso)

            name = row.get("LanguageName") or ""
            if name and name not in entry.language_names:
                entry.language_names.append(name)

            key = f"{row.get('Source', '')}-{row.get('InventoryID', '')}"
            entry.inventories.setdefault(key, []).append(phoneme)

    logger.debug("Loaded PHOIBLE inventories for %d languages", len(entries))
    return entries


def download_phoible(
    url: str,
    cache_dir: Path | str,
    force: bool = False,
) -> Path:
    """Download the PHOIBLE CSV if not cached.

    Args:
        url: Source URL.
        cache_dir: Directory to cache the file in.
        force: Force re-download even if cached.

    Returns:
        Path to cached file.
    """
    cache_dir = Path(cache_dir)
    cached_path = cache_dir / url.split("/")[-1]

    if cached_path.exists() and not force:
        logger.info("Using cached: %s", cached_path)
        return cached_path

    cache_dir.mkdir(parents=True, exist_ok=True)

    # Only a complete download may land at cached_path
    partial_path = cached_path.with_suffix(cached_path.suffix + ".part")
    logger.info("Downloading from: %s", url)
    try:
        urllib.request.urlretrieve(url, partial_path)
        partial_path.replace(cached_path)
    finally:
        partial_path.unlink(missing_ok=True)
    logger.info("Saved to: %s", cached_path)

    return cached_path


class ReferenceInventoryCache:
    """Loads reference inventories once and serves lookups from memory.

    The loader is only called on first use. Concurrent first calls share
    a single load; a failed load is not cached.
    """

    _KEY = "entries"

    def __init__(self, loader: Callable[[], dict[str, ReferenceEntry]]):
        self._loader = loader
        self._cache: LazyCache[str, dict[str, ReferenceEntry]] = LazyCache()

    @classmethod
    def from_file(cls, filepath: Path | str) -> "ReferenceInventoryCache":
        """Create a cache backed by a local PHOIBLE CSV."""
        return cls(lambda: load_phoible_csv(filepath))

    @classmethod
    def from_url(
        cls,
        url: str,
        cache_dir: Path | str,
        force: bool = False,
    ) -> "ReferenceInventoryCache":
        """Create a cache that downloads PHOIBLE on first use."""
        return cls(lambda: load_phoible_csv(download_phoible(url, cache_dir, force)))

    def _load(self) -> dict[str, ReferenceEntry]:
        try:
            return self._loader()
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise MetadataResolutionError(
                f"Could not load reference phoneme inventories: {e}"
            ) from e

    def get(self) -> dict[str, ReferenceEntry]:
        """Get all entries, loading them on first call."""
        return self._cache.get_or_create(self._KEY, self._load)

    def get_entry(self, language: str) -> Optional[ReferenceEntry]:
        """Get the entry for a language, or None if PHOIBLE has none.

        Args:
            language: ISO 639-1 or 639-3 code.
        """
        iso = iso639_3(language)
        if iso is None:
            return None
        return self.get().get(iso)

    @property
    def loaded(self) -> bool:
        """Whether the inventories have been loaded."""
        return self._KEY in self._cache
