"""
Deterministic Overlap Resolver.

Selects a non-overlapping subset of issue matches:
1. Earliest start wins
2. Same start → first registration wins (stable sort keeps registration order)

Later matches overlapping an accepted one are dropped, never reported.
"""
from typing import List

from autolinker.models.issue_match import IssueMatch


def resolve_overlaps(matches: List[IssueMatch]) -> List[IssueMatch]:
    """
    Filter matches down to an ordered, non-overlapping list.

    Args:
        matches: All matches from find_issue_matches (may overlap).

    Returns:
        Accepted matches sorted by start, with
        ``accepted[i].end <= accepted[i + 1].start``.
    """
    if not matches:
        return []

    # sorted() is stable: equal starts keep registration order
    ordered = sorted(matches, key=lambda m: m.start)

    accepted: List[IssueMatch] = []
    last_end = 0

    for match in ordered:
        if match.start >= last_end:
            accepted.append(match)
            last_end = match.end

    return accepted
