"""
Issue Link Post-Processor — host-facing glue around the link resolver.

Lifecycle mirrors a markdown renderer plugin:
    1. load()             – read settings once on start-up
    2. process(element)   – called for each rendered block
    3. add/remove         – settings changes publish a new snapshot that
                            the following process() calls pick up
"""
import logging
from pathlib import Path
from typing import Optional, Union

from bs4.element import Tag

from autolinker.config.settings import AUTOLINKER_SETTINGS_FILE
from autolinker.registry.store import SettingsSnapshot, SettingsStore
from autolinker.rendering.metrics import timed_tree
from autolinker.rendering.tree_walker import (
    link_issue_keys_in_html,
    link_issue_keys_in_tree,
)

logger = logging.getLogger(__name__)


class IssueLinkPostProcessor:
    """
    Rewrites issue keys in rendered content using the stored registrations.

    Args:
        store: Settings store. Defaults to AUTOLINKER_SETTINGS_FILE.
    """

    def __init__(self, store: Optional[SettingsStore] = None) -> None:
        self.store = store or SettingsStore(AUTOLINKER_SETTINGS_FILE)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "IssueLinkPostProcessor":
        return cls(SettingsStore(path))

    @property
    def settings(self) -> SettingsSnapshot:
        return self.store.snapshot

    def load(self) -> SettingsSnapshot:
        snapshot = self.store.load()
        logger.info(
            "Post-processor ready with prefixes: %s",
            ", ".join(r.prefix for r in snapshot.registrations) or "(none)",
        )
        return snapshot

    def process(self, element: Tag) -> int:
        """Link issue keys inside *element* in place; returns nodes rewritten."""
        registrations = self.settings.registrations
        with timed_tree("element"):
            rewritten = link_issue_keys_in_tree(element, registrations)
        logger.debug("Post-processed <%s>: %d text node(s) rewritten", element.name, rewritten)
        return rewritten

    def process_html(self, html: str) -> str:
        """Link issue keys in an HTML fragment and return the new markup."""
        registrations = self.settings.registrations
        with timed_tree("html"):
            return link_issue_keys_in_html(html, registrations)

    def add_registration(self, project_key: str, base_url: str) -> SettingsSnapshot:
        snapshot = self.store.add_registration(project_key, base_url)
        logger.info("Registered project %s → %s", project_key, base_url)
        return snapshot

    def remove_registration(self, index: int) -> SettingsSnapshot:
        removed = self.settings.registrations[index:index + 1]
        snapshot = self.store.remove_registration(index)
        logger.info("Removed registration %r", removed[0])
        return snapshot
