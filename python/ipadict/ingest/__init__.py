"""Raw pair ingestion module.

Provides pluggable ingestors for raw word/pronunciation sources:
- Tab-separated word<TAB>pronunciation files
- Custom formats

Usage:
    from ipadict.ingest import get_ingestor, tsv

    result = tsv.ingest("path/to/pairs.tsv", language="de")
    result = get_ingestor("tsv")(language="de").ingest("path/to/pairs.tsv")
"""

from pathlib import Path

from .base import Ingestor, IngestResult
from . import tsv

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "tsv": tsv.TsvIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def ingestor_for_path(filepath: Path | str) -> str:
    """Get the registered ingestor name for a file by its extension."""
    suffix = Path(filepath).suffix.lower()
    for name, ingestor_cls in INGESTORS.items():
        if suffix in ingestor_cls.file_extensions:
            return name
    raise ValueError(
        f"No ingestor for extension {suffix!r}. Available: {list(INGESTORS.keys())}"
    )


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


__all__ = [
    "Ingestor",
    "IngestResult",
    "tsv",
    "get_ingestor",
    "ingestor_for_path",
    "register_ingestor",
    "INGESTORS",
]
