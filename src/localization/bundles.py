"""Message bundles for the storefront templates.

Bundles live in ``locales/<tag>.json``. A locality is matched exactly first
(case-insensitive, ``_`` and ``-`` interchangeable), then by its primary
language subtag, then falls back to the default locality. Keys missing from
a bundle are filled from the default bundle.
"""

import json
import os
from functools import lru_cache
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"


def default_locality() -> str:
    return os.getenv("DEFAULT_LOCALITY", "en-US")


def normalise_locality(locality: str) -> str:
    return locality.strip().replace("_", "-").lower()


@lru_cache(maxsize=None)
def available_bundles() -> dict[str, dict[str, str]]:
    """Load every bundle once, keyed by normalised tag."""
    bundles = {}
    for path in sorted(LOCALES_DIR.glob("*.json")):
        with path.open(encoding="utf-8") as fh:
            messages = json.load(fh)
        messages.setdefault("locale", path.stem)
        bundles[normalise_locality(path.stem)] = messages
    return bundles


def match_locality(locality: str | None) -> str:
    """Return the bundle tag that best serves ``locality``."""
    bundles = available_bundles()
    fallback = normalise_locality(default_locality())

    if not locality:
        return fallback

    wanted = normalise_locality(locality)
    if wanted in bundles:
        return wanted

    language = wanted.split("-", 1)[0]
    for tag in bundles:
        if tag.split("-", 1)[0] == language:
            return tag

    logger.debug("No bundle for locality, using default", locality=locality, default=fallback)
    return fallback


def bundle_for(locality: str | None) -> dict[str, str]:
    bundles = available_bundles()
    default = bundles.get(normalise_locality(default_locality()), {})
    return {**default, **bundles.get(match_locality(locality), {})}
