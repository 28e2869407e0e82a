"""Dispatch a fetched payload to the extractor matching its source kind."""

from typing import Any

from maplify.errors import ExtractionError
from maplify.extractors.html import extract_html_entries
from maplify.extractors.json_payload import DEFAULT_MAX_DEPTH, Entry, extract_api_entries
from maplify.sources import SourceConfig


def extract_entries(
    payload: Any,
    config: SourceConfig,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Entry]:
    """
    Turn one source's raw payload into its ordered entries.

    Args:
        payload: Decoded JSON (API sources) or HTML text
        config: The source the payload was fetched from
        max_depth: Depth guard for the JSON array search

    Raises:
        ExtractionError: For API payloads without an array of titled items
            or HTML sources with a malformed selector, carrying the source URL
    """
    if config.is_api:
        try:
            return extract_api_entries(payload, items_path=config.items_path, max_depth=max_depth)
        except ExtractionError as e:
            e.url = e.url or config.url
            raise

    if not isinstance(payload, str):
        raise ExtractionError(
            f"HTML source returned {type(payload).__name__} instead of markup",
            url=config.url,
        )
    try:
        return extract_html_entries(payload, config.selectors)
    except ExtractionError as e:
        e.url = e.url or config.url
        raise
