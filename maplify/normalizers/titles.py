"""Title normalization for cross-source matching."""

import re
from collections.abc import Mapping

from loguru import logger

# Multi-representation titles, in matching priority order
TITLE_VARIANT_KEYS = ("english", "romaji", "native")

MAX_TITLE_LENGTH = 99

QUALIFIER_PATTERN = re.compile(
    r" *(\(dub\)|\(sub\)|\(uncensored\)|\(uncut\)|\(subbed\)|\(dubbed\))",
    flags=re.IGNORECASE,
)
AUDIO_QUALIFIER_PATTERN = re.compile(r" *\([^)]+audio\)", flags=re.IGNORECASE)
BD_MARKER_PATTERN = re.compile(r" BD( |$)", flags=re.IGNORECASE)

Title = str | Mapping[str, str | None]


def _canonicalize(title: str) -> str:
    title = title.lower()
    title = QUALIFIER_PATTERN.sub("", title)
    title = AUDIO_QUALIFIER_PATTERN.sub("", title)
    title = BD_MARKER_PATTERN.sub("", title)
    title = title.strip()
    return title[:MAX_TITLE_LENGTH]


def normalize_title(title: str | None) -> str | None:
    """Canonicalize a title string for comparison.

    Applies the following transformations:
    - Converts to lowercase
    - Removes (dub), (sub), (uncensored), (uncut), (subbed), (dubbed)
    - Removes parentheticals ending in "audio", e.g. (English Audio)
    - Removes a standalone or trailing " BD" marker
    - Strips whitespace and truncates to 99 characters

    The steps are repeated until the result stops changing, so
    normalize_title(normalize_title(x)) == normalize_title(x).

    Args:
        title: The title to normalize

    Returns:
        Normalized title, or None (logged) if the input is empty/None
    """
    if not title:
        logger.warning(f"Received undefined or empty title: {title!r}")
        return None

    result = _canonicalize(title)
    while True:
        again = _canonicalize(result)
        if again == result:
            return result
        result = again


def title_variants(title: Title | None) -> list[str]:
    """Raw representations of a title in priority order, empty ones skipped."""
    if not title:
        return []
    if isinstance(title, str):
        return [title]
    if isinstance(title, Mapping):
        return [title[key] for key in TITLE_VARIANT_KEYS if isinstance(title.get(key), str) and title[key]]
    # Numeric ids used as titles by some APIs
    return [str(title)]


def normalize_title_variants(title: Title | None) -> list[str]:
    """Normalize every present representation of a title.

    Args:
        title: A plain title, or a mapping with "english", "romaji" and/or
            "native" spellings

    Returns:
        One normalized string per present representation, in priority order
    """
    normalized = (normalize_title(variant) for variant in title_variants(title))
    return [value for value in normalized if value is not None]


def primary_title(title: Title | None) -> str | None:
    """Highest-priority normalized representation, used for candidate lists."""
    variants = normalize_title_variants(title)
    return variants[0] if variants else None
