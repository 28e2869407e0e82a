"""
Entry extraction for REST and GraphQL payloads.

API responses come in arbitrary shapes ({"data": {"Page": {"media": [...]}}},
{"results": [...]}, a bare list, ...). Unless the source names the path to
its entries explicitly, the first array found by a depth-first, pre-order
walk in key order is taken as the entry list.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from maplify.errors import ExtractionError

Entry = dict[str, Any]

DEFAULT_MAX_DEPTH = 64


def find_first_array(payload: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> list | None:
    """
    Find the first list in a decoded JSON value.

    Mappings are searched depth-first in key order; the first list
    encountered wins, however deep it sits. Subtrees nested deeper than
    max_depth are not searched.

    Args:
        payload: Decoded JSON value
        max_depth: Maximum number of mappings to descend through

    Returns:
        The first list found, or None
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, Mapping):
        return None

    # Explicit stack instead of recursion; children pushed in reverse keep key order
    stack: list[tuple[Any, int]] = [(payload, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, list):
            return node
        if not isinstance(node, Mapping):
            continue
        if depth >= max_depth:
            logger.debug(f"Array search stopped at depth {depth}")
            continue
        for value in reversed(list(node.values())):
            stack.append((value, depth + 1))

    return None


def resolve_items_path(payload: Any, path: str) -> Any:
    """
    Follow a dotted path ("data.Page.media", "results.0.items") into a payload.

    Integer segments index into lists.

    Raises:
        ExtractionError: If a segment does not exist
    """
    node = payload
    for segment in path.split("."):
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and segment.lstrip("-").isdigit():
            try:
                node = node[int(segment)]
            except IndexError:
                raise ExtractionError(f"Items path '{path}': index {segment} out of range") from None
        else:
            raise ExtractionError(f"Items path '{path}': segment '{segment}' not found")
    return node


def extract_api_entries(
    payload: Any,
    items_path: str | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Entry]:
    """
    Extract entries from a REST or GraphQL payload.

    Args:
        payload: Decoded JSON response
        items_path: Optional explicit dotted path to the entries array
        max_depth: Depth guard for the array search

    Returns:
        The array's items, each an object with a title

    Raises:
        ExtractionError: If no array is found or an item has no title
    """
    if items_path:
        items = resolve_items_path(payload, items_path)
        if not isinstance(items, list):
            raise ExtractionError(f"Items path '{items_path}' does not point to an array")
    else:
        items = find_first_array(payload, max_depth=max_depth)
        if items is None:
            raise ExtractionError("REST API or GraphQL response should contain an array property")

    entries: list[Entry] = []
    for position, item in enumerate(items):
        if not isinstance(item, Mapping) or not item.get("title"):
            raise ExtractionError(
                f"Each item in the array should contain a title property (item {position} has none)"
            )
        entries.append(dict(item))

    return entries
