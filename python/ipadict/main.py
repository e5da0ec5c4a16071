"""ipadict CLI - Pronunciation dictionary builder.

Usage:
    python -m ipadict.main --language de --input pairs.tsv
    python -m ipadict.main --language xx --input pairs.tsv --format json --no-reference
    python -m ipadict.main --language de --input pairs.dat --source-format tsv
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import config as cfg
from .builder import DictionaryBuilder
from .errors import MetadataResolutionError
from .ingest import INGESTORS, get_ingestor, ingestor_for_path
from .issues import LoggingIssueSink
from .metadata import MetadataResolver, MetadataTable
from .phonetics.inventory import ReferenceInventoryCache

logger = logging.getLogger("ipadict")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)
    project_root = Path(__file__).parent.parent.parent

    parser = argparse.ArgumentParser(
        description="ipadict - Pronunciation dictionary builder"
    )
    parser.add_argument(
        "--language",
        "-l",
        type=str,
        default=defaults.get("language", "en"),
        help=f"Language code (default: {defaults.get('language', 'en')})",
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="File of raw word/pronunciation pairs",
    )
    parser.add_argument(
        "--source-format",
        "-s",
        choices=list(INGESTORS.keys()),
        default=None,
        help="Input format (default: detected from the input extension)",
    )
    parser.add_argument(
        "--edition",
        type=str,
        default=None,
        help="Source edition name (default: input file stem)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["tsv", "json"],
        default=defaults.get("format", "tsv"),
        help="Output format written to stdout",
    )
    parser.add_argument(
        "--metadata",
        "-m",
        type=Path,
        default=defaults.get("metadata_path"),
        help="Curated metadata JSON (default: bundled table)",
    )
    parser.add_argument(
        "--cache-dir",
        "-c",
        type=Path,
        default=project_root / defaults.get("cache_dir", "sources"),
        help="Cache directory for the PHOIBLE download",
    )
    parser.add_argument(
        "--no-reference",
        action="store_true",
        default=not defaults.get("reference_inventory", True),
        help="Don't load PHOIBLE reference inventories",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=defaults.get("verbose", False),
        help="Debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        table = (
            MetadataTable.load(args.metadata) if args.metadata
            else MetadataTable.default()
        )
        source_format = args.source_format or ingestor_for_path(args.input)
        ingestor = get_ingestor(source_format)(
            language=args.language, source_edition=args.edition
        )
        result = ingestor.ingest(args.input)
    except (OSError, ValueError) as e:
        logger.error("ERROR - %s", e)
        return 1

    logger.info("Loaded %r", result)
    for error in result.errors:
        logger.debug(error)

    reference = None
    if not args.no_reference:
        reference = ReferenceInventoryCache.from_url(
            cfg.default_phoible_url(), cache_dir=args.cache_dir
        )

    issues = LoggingIssueSink()
    builder = DictionaryBuilder(
        resolver=MetadataResolver(table, reference),
        issues=issues,
    )

    try:
        dictionary, stats = builder.build_with_stats(args.language, result.pairs)
    except MetadataResolutionError as e:
        logger.error("ERROR - %s", e)
        return 1

    if args.format == "json":
        json.dump(dictionary.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        for line in dictionary.to_tsv_lines():
            sys.stdout.write(line + "\n")

    logger.info("Words: %d", stats.total_words)
    logger.info("Pronunciations: %d", stats.total_pronunciations)
    for kind, count in sorted(issues.counts().items()):
        logger.info("  %s: %d", kind, count)

    return 0


if __name__ == "__main__":
    sys.exit(main())
