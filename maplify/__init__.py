"""
Maplify - map titles of the same item across REST, GraphQL and HTML sources.

Architecture:
- connectors: validate a source and fetch its raw payload
- extractors: turn JSON or HTML payloads into ordered entries
- normalizers: canonicalize titles for comparison
- matching: Dice-similarity best match and cross-source match groups
- coordinator: concurrent fetch, ordered extraction, one mapping pass
"""

from maplify.coordinator import Maplify, SearchResult
from maplify.errors import ConfigurationError, ExtractionError, MaplifyError, TransportError
from maplify.matching import (
    MatchGroup,
    MatchResult,
    compare_two_strings,
    find_best_match,
    find_best_match_by_titles,
    map_titles,
)
from maplify.normalizers import normalize_title, normalize_title_variants
from maplify.sources import FieldSelector, SelectorSet, SourceConfig, SourceKind, load_source_configs

__version__ = "1.0.0"

__all__ = [
    "Maplify",
    "SearchResult",
    "SourceConfig",
    "SourceKind",
    "SelectorSet",
    "FieldSelector",
    "load_source_configs",
    "MatchGroup",
    "MatchResult",
    "map_titles",
    "find_best_match_by_titles",
    "compare_two_strings",
    "find_best_match",
    "normalize_title",
    "normalize_title_variants",
    "MaplifyError",
    "ConfigurationError",
    "TransportError",
    "ExtractionError",
]
