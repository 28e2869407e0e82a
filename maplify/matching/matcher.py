"""
Best-match selection of one title against another source's entries.

Every representation of the source title (english, romaji, native, or the
single string) votes for its closest candidate. The candidate with the most
votes wins, ties going to the earliest representation, and the score is the
one recorded at the winner's first vote.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import reduce
from typing import Any, NamedTuple

from loguru import logger

from maplify.matching.similarity import find_best_match
from maplify.normalizers import Title, normalize_title_variants, primary_title


@dataclass(frozen=True)
class MatchResult:
    """Best candidate for a title; index -1 means no match."""

    target_title: str | None
    index: int
    score: float

    @property
    def matched(self) -> bool:
        return self.index != -1


NO_MATCH = MatchResult(target_title=None, index=-1, score=0.0)


class _Vote(NamedTuple):
    count: int
    score: float
    order: int


def _tally(votes: Mapping[str, _Vote], match: tuple[str, float]) -> dict[str, _Vote]:
    target, score = match
    previous = votes.get(target)
    if previous is None:
        return {**votes, target: _Vote(count=1, score=score, order=len(votes))}
    return {**votes, target: previous._replace(count=previous.count + 1)}


def normalized_candidates(entries: Sequence[Mapping[str, Any]]) -> list[str | None]:
    """Normalized candidate titles aligned with entries; None where unusable."""
    return [primary_title(entry.get("title")) for entry in entries]


def find_best_match_by_titles(
    title: Title | None,
    entries: Sequence[Mapping[str, Any]],
) -> MatchResult:
    """
    Find the entry whose title best matches the given title.

    Args:
        title: Plain title or a mapping of english/romaji/native spellings
        entries: Candidate entries from exactly one other source

    Returns:
        MatchResult with the winning normalized title, its index in entries
        and its similarity score
    """
    variants = normalize_title_variants(title)
    if not variants:
        logger.warning("Received undefined or empty title, returning no match")
        return NO_MATCH

    candidates = normalized_candidates(entries)
    scorable = [candidate for candidate in candidates if candidate is not None]
    if not scorable:
        logger.debug("No candidate titles to match against")
        return NO_MATCH

    matches = []
    for variant in variants:
        best = find_best_match(variant, scorable).best_match
        matches.append((best.target, best.rating))

    votes = reduce(_tally, matches, {})
    target, vote = max(votes.items(), key=lambda item: (item[1].count, -item[1].order))

    return MatchResult(
        target_title=target,
        index=candidates.index(target),
        score=vote.score,
    )
