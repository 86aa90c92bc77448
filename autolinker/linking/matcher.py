"""
Issue Key Matcher — locates `<prefix>-<digits>` occurrences in a text span.

One pattern per registration, matched case-insensitively between word
boundaries. Hits from all registrations are returned as one flat list in
registration order; overlaps are left for the overlap resolver.

Word boundaries and digits use ASCII semantics, as the browser regex of the
original plugin did.
"""
import logging
import re
from typing import List, Optional, Sequence

from autolinker.models.issue_match import IssueMatch
from autolinker.models.registration import Registration

logger = logging.getLogger(__name__)

_PATTERN_FLAGS = re.IGNORECASE | re.ASCII


def build_issue_pattern(prefix: str) -> Optional["re.Pattern[str]"]:
    """
    Compile the word-bounded issue key pattern for *prefix*.

    Returns None for an empty or blank prefix, which would otherwise
    degenerate into a bare `-<digits>` pattern.
    """
    if not prefix or not prefix.strip():
        return None
    return re.compile(rf"\b{re.escape(prefix)}-[0-9]+\b", _PATTERN_FLAGS)


def find_issue_matches(
    text: str,
    registrations: Sequence[Registration],
) -> List[IssueMatch]:
    """
    Find every issue key occurrence for every registration.

    Args:
        text: Text content of a single node.
        registrations: Ordered registrations; order decides tie-breaks later.

    Returns:
        Flat list of IssueMatch, grouped by registration in the given order,
        positions ascending within each group. May contain overlaps.
    """
    matches: List[IssueMatch] = []
    if not text:
        return matches

    for registration in registrations:
        pattern = build_issue_pattern(registration.prefix)
        if pattern is None:
            logger.debug("Skipping registration with empty prefix: %r", registration)
            continue

        for match in pattern.finditer(text):
            matches.append(
                IssueMatch(
                    start=match.start(),
                    end=match.end(),
                    matched_text=match.group(0),
                    registration=registration,
                )
            )

    return matches
