"""
Registration — a project key prefix mapped to its Jira instance.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Registration:
    """Immutable (prefix, base URL) pair handed to the resolver."""

    prefix: str             # e.g. "ABC"
    base_url: str           # e.g. "https://example.atlassian.net", no path

    def to_dict(self) -> dict:
        return {
            "projectKey": self.prefix,
            "baseUrl": self.base_url,
        }

    def __repr__(self) -> str:
        return f"Registration('{self.prefix}', {self.base_url})"
