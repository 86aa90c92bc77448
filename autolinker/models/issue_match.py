"""
IssueMatch — a located issue key, tagged with the registration that found it.
"""
from dataclasses import dataclass

from autolinker.models.registration import Registration


@dataclass
class IssueMatch:
    """A single `<prefix>-<digits>` occurrence in a text span."""

    start: int
    end: int                # exclusive
    matched_text: str       # original casing from the source text
    registration: Registration
