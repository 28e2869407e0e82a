"""
Response extractors.

These modules turn raw source payloads into uniform lists of entries:
- json_payload: first-array discovery in REST / GraphQL responses
- html: CSS-selector extraction from pages
"""

from maplify.extractors.entries import extract_entries
from maplify.extractors.html import extract_html_entries
from maplify.extractors.json_payload import (
    Entry,
    extract_api_entries,
    find_first_array,
    resolve_items_path,
)

__all__ = [
    "Entry",
    "extract_entries",
    "extract_api_entries",
    "extract_html_entries",
    "find_first_array",
    "resolve_items_path",
]
