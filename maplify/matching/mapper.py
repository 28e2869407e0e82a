"""
Cross-source mapping of base-source entries into match groups.

Matching is not one-to-one: two base entries may both pick the same entry
of another source, and both groups are kept.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from maplify.extractors import Entry
from maplify.matching.matcher import find_best_match_by_titles


@dataclass
class MatchGroup:
    """
    Entries from different sources judged to describe the same item.

    The score is the weakest of the cross-source links, not their average.
    """

    base: Entry
    matches: dict[str, Entry] = field(default_factory=dict)
    score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"data": {"base": self.base, **self.matches}, "score": self.score}


def map_titles(
    extracted_data: Sequence[Sequence[Entry]],
    source_ids: Sequence[str] | None = None,
    min_score: float = 0.0,
) -> list[MatchGroup]:
    """
    Match every base-source entry against every other source.

    Args:
        extracted_data: Entries per source; index 0 is the base source
        source_ids: Identifiers for every source, aligned with extracted_data
            (defaults to "source1", "source2", ...)
        min_score: Matches scoring below this are ignored

    Returns:
        Match groups in base-entry order, only those matched by another source
    """
    if source_ids is None:
        source_ids = [f"source{i + 1}" for i in range(len(extracted_data))]

    if not extracted_data:
        return []

    groups: list[MatchGroup] = []

    for base_entry in extracted_data[0]:
        title = base_entry.get("title") if base_entry else None
        if not title:
            logger.warning(f"Skipping item with undefined or empty title: {base_entry!r}")
            continue

        group = MatchGroup(base=base_entry)
        lowest_score: float | None = None

        for index in range(1, len(extracted_data)):
            other_entries = extracted_data[index]
            result = find_best_match_by_titles(title, other_entries)

            if not result.matched or result.score < min_score:
                continue

            group.matches[source_ids[index]] = other_entries[result.index]
            lowest_score = result.score if lowest_score is None else min(lowest_score, result.score)

        if group.matches:
            group.score = lowest_score
            groups.append(group)

    logger.debug(f"Mapped {len(groups)} of {len(extracted_data[0])} base entries")
    return groups
