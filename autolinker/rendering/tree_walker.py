"""
Tree Walker — applies the link resolver to a rendered BeautifulSoup tree.

Visits every prose text node once, in document order, and replaces the
nodes that contain issue keys with a ``<span>`` holding plain strings and
``<a>`` tags. Elements in SKIPPED_TAGS (links, code, preformatted text,
images, vector graphics, rendered math) are not entered at all.
"""
import logging
from typing import Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from autolinker.config.constants import SKIPPED_TAGS, WRAPPER_TAG
from autolinker.config.settings import HTML_PARSER
from autolinker.linking.pipeline import link_issue_keys
from autolinker.models.registration import Registration
from autolinker.models.segment import LinkSegment, Segment
from autolinker.rendering.metrics import (
    record_links_created,
    record_node_rewrite,
    record_skipped_element,
)

logger = logging.getLogger(__name__)


def should_skip(element: Tag) -> bool:
    """True if *element* must be neither processed nor recursed into."""
    return (element.name or "").lower() in SKIPPED_TAGS


def link_issue_keys_in_tree(
    element: Tag,
    registrations: Sequence[Registration],
) -> int:
    """
    Link issue keys in every prose text node below *element*.

    Args:
        element: Root of the rendered tree (a Tag or a BeautifulSoup object).
        registrations: Registration snapshot used for the whole walk.

    Returns:
        Number of text nodes replaced.
    """
    if not registrations:
        return 0
    return _process_node(element, registrations, _owner_document(element))


def link_issue_keys_in_html(
    html: str,
    registrations: Sequence[Registration],
    parser: Optional[str] = None,
) -> str:
    """Parse an HTML fragment, link issue keys, and serialize it back."""
    soup = BeautifulSoup(html, parser or HTML_PARSER)
    rewritten = link_issue_keys_in_tree(soup, registrations)
    if not rewritten:
        return html
    return str(soup)


# ======================================================================
# Internal helpers
# ======================================================================

def _process_node(
    node: PageElement,
    registrations: Sequence[Registration],
    document: BeautifulSoup,
) -> int:
    if isinstance(node, Tag):
        if should_skip(node):
            record_skipped_element(node.name.lower())
            return 0
        # Snapshot: replacing a child must not disturb the iteration
        return sum(
            _process_node(child, registrations, document)
            for child in list(node.children)
        )

    # Comments, CDATA, doctype, processing instructions are not prose
    if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
        return 0

    text = str(node)
    if not text:
        return 0

    segments = link_issue_keys(text, registrations)
    if segments is None:
        return 0

    node.replace_with(_build_wrapper(segments, document))
    record_node_rewrite()
    return 1


def _build_wrapper(segments: Sequence[Segment], document: BeautifulSoup) -> Tag:
    wrapper = document.new_tag(WRAPPER_TAG)

    for segment in segments:
        if isinstance(segment, LinkSegment):
            anchor = document.new_tag(
                "a",
                attrs={"href": segment.href, "target": segment.target, "rel": segment.rel},
            )
            anchor.string = segment.text
            wrapper.append(anchor)
            record_links_created(segment.prefix)
        else:
            wrapper.append(NavigableString(segment.text))

    return wrapper


def _owner_document(element: PageElement) -> BeautifulSoup:
    """Return the BeautifulSoup object owning *element* (used as tag factory)."""
    root = element
    while root.parent is not None:
        root = root.parent
    if isinstance(root, BeautifulSoup):
        return root
    # Detached tag: any document can create tags for it
    return BeautifulSoup("", HTML_PARSER)
