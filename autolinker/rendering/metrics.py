"""
Prometheus Metrics — linker observability.

Exposes counters and a histogram for:
- Issue links inserted into rendered content
- Text nodes rewritten
- Elements skipped by the scope filter
- Tree processing latency

Usage
-----
    from autolinker.rendering.metrics import timed_tree, record_links_created

    with timed_tree("element"):
        rewritten = link_issue_keys_in_tree(element, registrations)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Issue links inserted, labelled by project key prefix.
LINKS_CREATED: Counter = Counter(
    "autolinker_links_created_total",
    "Issue links inserted into rendered content",
    ["prefix"],
)

# Text nodes replaced by a linked span.
NODES_REWRITTEN: Counter = Counter(
    "autolinker_text_nodes_rewritten_total",
    "Text nodes replaced by a span holding issue links",
)

# Elements the scope filter refused to enter.
ELEMENTS_SKIPPED: Counter = Counter(
    "autolinker_elements_skipped_total",
    "Elements skipped by the scope filter",
    ["tag"],
)

# Whole-tree processing latency (seconds).
TREE_LATENCY: Histogram = Histogram(
    "autolinker_tree_processing_seconds",
    "Processing time of one rendered element tree in seconds",
    ["source"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_links_created(prefix: str, count: int = 1) -> None:
    """Increment the link counter for *prefix*."""
    LINKS_CREATED.labels(prefix=prefix).inc(count)


def record_node_rewrite() -> None:
    NODES_REWRITTEN.inc()


def record_skipped_element(tag: str) -> None:
    """Increment the scope-filter counter for *tag*."""
    ELEMENTS_SKIPPED.labels(tag=tag).inc()


@contextmanager
def timed_tree(source: str) -> Generator[None, None, None]:
    """
    Context manager that records tree processing latency.

    Usage::

        with timed_tree("html"):
            html = link_issue_keys_in_html(html, registrations)
    """
    with TREE_LATENCY.labels(source=source).time():
        yield
