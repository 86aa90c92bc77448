"""
Segment Reconstruction — rebuilds a text span as plain and link runs.

Reference output for "see ABC-123 now":

    [TextSegment("see "),
     LinkSegment("ABC-123", "https://example.atlassian.net/browse/ABC-123", "ABC"),
     TextSegment(" now")]
"""
from typing import List

from autolinker.config.constants import BROWSE_PATH
from autolinker.models.issue_match import IssueMatch
from autolinker.models.segment import LinkSegment, Segment, TextSegment


def browse_url(base_url: str, issue_key: str) -> str:
    """Return the tracker URL of *issue_key*, casing preserved."""
    return f"{base_url}{BROWSE_PATH}{issue_key}"


def build_segments(text: str, matches: List[IssueMatch]) -> List[Segment]:
    """
    Turn *text* plus accepted matches into an ordered segment list.

    Args:
        text: Original text; never mutated.
        matches: Accepted matches, ordered by start and non-overlapping.

    Returns:
        Segments whose texts concatenate back to *text*. With no matches
        this is a single TextSegment holding the whole text.
    """
    if not matches:
        return [TextSegment(text)]

    segments: List[Segment] = []
    cursor = 0

    for match in matches:
        if match.start > cursor:
            segments.append(TextSegment(text[cursor:match.start]))

        segments.append(
            LinkSegment(
                text=match.matched_text,
                href=browse_url(match.registration.base_url, match.matched_text),
                prefix=match.registration.prefix,
            )
        )
        cursor = match.end

    if cursor < len(text):
        segments.append(TextSegment(text[cursor:]))

    return segments
