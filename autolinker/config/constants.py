"""
Constants used across the linker.
Pinned so that matching and validation stay deterministic.
"""
from typing import FrozenSet

# =============================================================================
# Registration validation (enforced at the settings boundary only)
# =============================================================================
PROJECT_KEY_PATTERN: str = r"^[A-Za-z][A-Za-z0-9]{1,9}$"
JIRA_BASE_URL_PATTERN: str = r"^https://[A-Za-z0-9.-]+\.atlassian\.net$"

INVALID_PROJECT_KEY_MESSAGE: str = (
    "Invalid project key. It must be 2-10 letters or numbers, starting with a letter."
)
INVALID_BASE_URL_MESSAGE: str = (
    "Invalid Jira URL. It must be the base URL of your Jira instance without a path "
    "(e.g., https://example.atlassian.net)."
)

# =============================================================================
# Link output
# =============================================================================
BROWSE_PATH: str = "/browse/"
LINK_TARGET: str = "_blank"
LINK_REL: str = "noopener noreferrer"
WRAPPER_TAG: str = "span"

# =============================================================================
# Scope filter: elements never processed nor recursed into
# =============================================================================
SKIPPED_TAGS: FrozenSet[str] = frozenset({
    "a",
    "code",
    "pre",
    "img",
    "svg",
    "mjx-container",
    "script",
    "style",
})
