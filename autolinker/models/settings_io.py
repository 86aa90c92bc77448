"""
Typed Pydantic models for the settings boundary.

Values entered by the user (or read back from the settings file) are
validated here before they become Registration objects; the matching
engine itself never re-validates.
"""
from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autolinker.config.constants import (
    INVALID_BASE_URL_MESSAGE,
    INVALID_PROJECT_KEY_MESSAGE,
    JIRA_BASE_URL_PATTERN,
    PROJECT_KEY_PATTERN,
)
from autolinker.models.registration import Registration

_PROJECT_KEY_RE = re.compile(PROJECT_KEY_PATTERN)
_BASE_URL_RE = re.compile(JIRA_BASE_URL_PATTERN)


class RegistrationInput(BaseModel):
    """
    A registration as entered in the settings form or stored on disk.

    Field aliases match the stored document (``projectKey`` / ``baseUrl``);
    the Python names are accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    project_key: str = Field(..., alias="projectKey", description="Jira project key, e.g. 'ABC'.")
    base_url: str = Field(..., alias="baseUrl", description="Jira Cloud base URL without a path.")

    @field_validator("project_key")
    @classmethod
    def validate_project_key(cls, v: str) -> str:
        if not _PROJECT_KEY_RE.fullmatch(v):
            raise ValueError(INVALID_PROJECT_KEY_MESSAGE)
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not _BASE_URL_RE.fullmatch(v):
            raise ValueError(INVALID_BASE_URL_MESSAGE)
        return v

    def to_registration(self) -> Registration:
        return Registration(prefix=self.project_key, base_url=self.base_url)

