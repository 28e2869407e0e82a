"""
BeautifulSoup-based entry extraction for HTML sources.
"""

from bs4 import BeautifulSoup, Tag
from loguru import logger
from soupsieve import SelectorSyntaxError

from maplify.errors import ExtractionError
from maplify.extractors.json_payload import Entry
from maplify.sources import FieldSelector, SelectorSet


def extract_html_entries(html: str, selectors: SelectorSet | None = None) -> list[Entry]:
    """
    Extract one entry per element matching the main selector.

    Each named field reads the first descendant matching its selector: the
    named attribute for "selector@attribute" fields, otherwise the trimmed
    text. Fields with no matching descendant are empty strings.

    Args:
        html: Page markup
        selectors: Selector set; defaults to a single "body" entry with no fields

    Returns:
        Entries in document order

    Raises:
        ExtractionError: If a selector is not valid CSS
    """
    selectors = selectors or SelectorSet()
    fields = selectors.fields()

    soup = BeautifulSoup(html, "html.parser")

    try:
        elements = soup.select(selectors.main_selector)
        entries: list[Entry] = []
        for element in elements:
            entries.append({key: _extract_field(element, field) for key, field in fields.items()})
    except SelectorSyntaxError as e:
        raise ExtractionError(f"Malformed CSS selector: {e}") from e

    logger.debug(f"Selector '{selectors.main_selector}' matched {len(entries)} elements")
    return entries


def _extract_field(element: Tag, field: FieldSelector) -> str:
    if not field.selector:
        return ""

    node = element.select_one(field.selector)
    if node is None:
        return ""

    if field.attribute:
        value = node.get(field.attribute)
        if value is None:
            return ""
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    return node.get_text().strip()
