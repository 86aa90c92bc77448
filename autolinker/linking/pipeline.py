"""
Link Resolver Pipeline — orchestrates Matcher + Overlap Resolver + Reconstructor.

Pipeline:
    1. Find issue keys for every registration
    2. Resolve overlaps (earliest start, then first registration)
    3. Rebuild the text as plain and link segments

Pure function of its inputs: no state survives a call.
"""
import logging
from typing import List, Optional, Sequence

from autolinker.linking.matcher import find_issue_matches
from autolinker.linking.overlap_resolver import resolve_overlaps
from autolinker.linking.reconstructor import build_segments
from autolinker.models.registration import Registration
from autolinker.models.segment import Segment

logger = logging.getLogger(__name__)


def link_issue_keys(
    text: str,
    registrations: Sequence[Registration],
) -> Optional[List[Segment]]:
    """
    Full linking pipeline for one text span.

    Args:
        text: Text content of a single node.
        registrations: Read-only registration snapshot, in priority order.

    Returns:
        None when nothing was linked (caller leaves the node untouched),
        otherwise the segment list replacing the text.
    """
    # 1. Find
    found = find_issue_matches(text, registrations)
    if not found:
        return None

    # 2. Resolve overlaps
    accepted = resolve_overlaps(found)

    # 3. Rebuild
    segments = build_segments(text, accepted)

    logger.debug(
        "Linked %d issue key(s) (%d candidate(s), %d overlap(s) dropped)",
        len(accepted),
        len(found),
        len(found) - len(accepted),
    )
    return segments
