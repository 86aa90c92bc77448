"""
Segments — the reconstructed output of a linked text span.

A text span is rebuilt as an ordered mix of plain runs (TextSegment) and
link runs (LinkSegment). Concatenating every segment's ``text`` yields the
original span verbatim.
"""
from dataclasses import dataclass
from typing import Union

from autolinker.config.constants import LINK_REL, LINK_TARGET


@dataclass(frozen=True)
class TextSegment:
    """Verbatim run of the source text."""

    text: str


@dataclass(frozen=True)
class LinkSegment:
    """Issue key rendered as a link that opens in a new context."""

    text: str
    href: str
    prefix: str             # prefix of the registration that produced the link
    target: str = LINK_TARGET
    rel: str = LINK_REL


Segment = Union[TextSegment, LinkSegment]
