"""Configuration loader for ipadict.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

from .phonetics.inventory import PHOIBLE_URL

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "language": "en",
    "format": "tsv",
    "cache_dir": "sources",
    "metadata_path": None,
    "phoible_url": PHOIBLE_URL,
    "reference_inventory": True,
    "verbose": False,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/ipadict -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the loaded configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_language() -> str:
    return get_default("language", FALLBACK_DEFAULTS["language"])


def default_format() -> str:
    return get_default("format", FALLBACK_DEFAULTS["format"])


def default_cache_dir() -> str:
    return get_default("cache_dir", FALLBACK_DEFAULTS["cache_dir"])


def default_metadata_path() -> str | None:
    return get_default("metadata_path", FALLBACK_DEFAULTS["metadata_path"])


def default_phoible_url() -> str:
    return get_default("phoible_url", FALLBACK_DEFAULTS["phoible_url"])


def default_reference_inventory() -> bool:
    return get_default("reference_inventory", FALLBACK_DEFAULTS["reference_inventory"])
