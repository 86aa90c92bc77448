"""
Shared test fixtures for the auto-linker test suite.
"""
import json

import pytest

from autolinker.models.registration import Registration


# ==========================================================================
# Registrations
# ==========================================================================

@pytest.fixture
def abc_registration():
    return Registration(prefix="ABC", base_url="https://example.atlassian.net")


@pytest.fixture
def registrations(abc_registration):
    return (
        abc_registration,
        Registration(prefix="OPS", base_url="https://ops.atlassian.net"),
    )


@pytest.fixture
def nested_registrations():
    """Two prefixes where one is a prefix of the other ('AB' / 'ABC')."""
    return (
        Registration(prefix="AB", base_url="https://ab.atlassian.net"),
        Registration(prefix="ABC", base_url="https://abc.atlassian.net"),
    )


@pytest.fixture
def duplicate_registrations():
    """Same prefix registered twice for different instances."""
    return (
        Registration(prefix="ABC", base_url="https://first.atlassian.net"),
        Registration(prefix="abc", base_url="https://second.atlassian.net"),
    )


# ==========================================================================
# Settings files
# ==========================================================================

@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps(
            {
                "registrations": [
                    {"projectKey": "ABC", "baseUrl": "https://example.atlassian.net"},
                    {"projectKey": "OPS", "baseUrl": "https://ops.atlassian.net"},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def missing_settings_file(tmp_path):
    return tmp_path / "missing" / "data.json"


# ==========================================================================
# Rendered HTML
# ==========================================================================

@pytest.fixture
def rendered_note_html():
    return (
        "<div>"
        "<p>Fixed in ABC-12 and OPS-7.</p>"
        "<ul><li>follow-up abc-13</li><li>nothing here</li></ul>"
        '<p>See <a href="https://example.atlassian.net/browse/ABC-1">ABC-1</a> already linked.</p>'
        "<pre><code>ABC-99 in code</code></pre>"
        "<p>Inline <code>ABC-98</code> too.</p>"
        '<img alt="ABC-97">'
        "</div>"
    )
