"""
String similarity scoring.

Sørensen–Dice coefficient over character bigrams, compatible with the
"string-similarity" package used by title-mapping tools: whitespace is
ignored, identical strings score 1.0 and strings shorter than two
characters cannot share a bigram.
"""

import re
from collections import Counter
from dataclasses import dataclass

WHITESPACE_PATTERN = re.compile(r"\s+")


@dataclass(frozen=True)
class Rating:
    """Score of one candidate against the query string."""

    target: str
    rating: float


@dataclass(frozen=True)
class BestMatch:
    """Outcome of scoring a query against a candidate list."""

    ratings: list[Rating]
    best_match: Rating
    best_match_index: int


def _bigrams(text: str) -> Counter:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def compare_two_strings(first: str, second: str) -> float:
    """
    Dice similarity of two strings in [0, 1].

    Comparison is case-insensitive and ignores all whitespace.
    """
    first = WHITESPACE_PATTERN.sub("", first).lower()
    second = WHITESPACE_PATTERN.sub("", second).lower()

    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    first_bigrams = _bigrams(first)
    second_bigrams = _bigrams(second)
    intersection = sum((first_bigrams & second_bigrams).values())

    return (2.0 * intersection) / (len(first) + len(second) - 2)


def find_best_match(main_string: str, target_strings: list[str]) -> BestMatch:
    """
    Score every target against main_string and pick the best one.

    Ties go to the earliest target.

    Args:
        main_string: Query string
        target_strings: Non-empty list of candidate strings

    Returns:
        BestMatch with all ratings, the winner and its index

    Raises:
        ValueError: If there are no targets
    """
    if not target_strings:
        raise ValueError("find_best_match needs at least one target string")

    ratings = [Rating(target=target, rating=compare_two_strings(main_string, target)) for target in target_strings]

    best_index = 0
    for index, rating in enumerate(ratings):
        if rating.rating > ratings[best_index].rating:
            best_index = index

    return BestMatch(ratings=ratings, best_match=ratings[best_index], best_match_index=best_index)
