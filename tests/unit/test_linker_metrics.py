"""
Unit tests for autolinker.rendering.metrics.
"""
from __future__ import annotations

from bs4 import BeautifulSoup
from prometheus_client import REGISTRY


def _sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricHelpers:
    def test_all_public_helpers_present(self):
        from autolinker.rendering import metrics as m
        for name in (
            "record_links_created",
            "record_node_rewrite",
            "record_skipped_element",
            "timed_tree",
            "LINKS_CREATED",
            "NODES_REWRITTEN",
            "ELEMENTS_SKIPPED",
            "TREE_LATENCY",
        ):
            assert hasattr(m, name), f"Missing public symbol: {name}"

    def test_record_links_created(self):
        from autolinker.rendering.metrics import record_links_created
        before = _sample("autolinker_links_created_total", {"prefix": "ZZZ"})
        record_links_created("ZZZ", 2)
        assert _sample("autolinker_links_created_total", {"prefix": "ZZZ"}) == before + 2

    def test_timed_tree_observes(self):
        from autolinker.rendering.metrics import timed_tree
        before = _sample("autolinker_tree_processing_seconds_count", {"source": "unit"})
        with timed_tree("unit"):
            pass
        assert _sample("autolinker_tree_processing_seconds_count", {"source": "unit"}) == before + 1

    def test_timed_tree_does_not_suppress_exceptions(self):
        import pytest
        from autolinker.rendering.metrics import timed_tree
        with pytest.raises(ValueError, match="test error"):
            with timed_tree("unit"):
                raise ValueError("test error")


class TestWalkerRecordsMetrics:
    def test_rewrite_and_skip_counted(self, abc_registration):
        from autolinker.rendering.tree_walker import link_issue_keys_in_tree

        rewritten_before = _sample("autolinker_text_nodes_rewritten_total")
        links_before = _sample("autolinker_links_created_total", {"prefix": "ABC"})
        skipped_before = _sample("autolinker_elements_skipped_total", {"tag": "code"})

        soup = BeautifulSoup("<p>abc-1 ABC-2 <code>ABC-3</code></p>", "html.parser")
        link_issue_keys_in_tree(soup, [abc_registration])

        assert _sample("autolinker_text_nodes_rewritten_total") == rewritten_before + 1
        assert _sample("autolinker_links_created_total", {"prefix": "ABC"}) == links_before + 2
        assert _sample("autolinker_elements_skipped_total", {"tag": "code"}) == skipped_before + 1

    def test_links_counted_under_registration_prefix(self):
        from autolinker.models.registration import Registration
        from autolinker.rendering.tree_walker import link_issue_keys_in_tree

        registration = Registration(prefix="FOO-BAR", base_url="https://foo.atlassian.net")
        before = _sample("autolinker_links_created_total", {"prefix": "FOO-BAR"})
        short_before = _sample("autolinker_links_created_total", {"prefix": "FOO"})

        soup = BeautifulSoup("<p>FOO-BAR-1 and foo-bar-2</p>", "html.parser")
        link_issue_keys_in_tree(soup, [registration])

        assert _sample("autolinker_links_created_total", {"prefix": "FOO-BAR"}) == before + 2
        assert _sample("autolinker_links_created_total", {"prefix": "FOO"}) == short_before
