"""
Title matching pipeline components.

These modules identify entries from different sources that describe the same
item and group them with a confidence score.
"""

from maplify.matching.mapper import MatchGroup, map_titles
from maplify.matching.matcher import NO_MATCH, MatchResult, find_best_match_by_titles
from maplify.matching.similarity import BestMatch, Rating, compare_two_strings, find_best_match

__all__ = [
    "BestMatch",
    "MatchGroup",
    "MatchResult",
    "NO_MATCH",
    "Rating",
    "compare_two_strings",
    "find_best_match",
    "find_best_match_by_titles",
    "map_titles",
]
