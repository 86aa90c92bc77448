"""
Settings Store — persisted list of project registrations.

Settings are exposed as immutable snapshots: adding or removing a
registration writes the file and produces a new SettingsSnapshot, which the
resolver consumes on its next call. A snapshot in use is never mutated.

File format (same shape as the original plugin's data file)
-----------------------------------------------------------
    {
      "registrations": [
        {"projectKey": "ABC", "baseUrl": "https://example.atlassian.net"}
      ]
    }
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from jsonschema import ValidationError as JSchemaError
from jsonschema import validate
from pydantic import ValidationError

from autolinker.config.schemas import SETTINGS_SCHEMA
from autolinker.models.registration import Registration
from autolinker.models.settings_io import RegistrationInput

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Custom exceptions
# ---------------------------------------------------------------------------

class InvalidRegistrationError(ValueError):
    """Raised when a project key or base URL fails validation."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = errors
        super().__init__(" ".join(errors))


class SettingsLoadError(Exception):
    """Raised when the settings file cannot be parsed or has the wrong shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load settings from '{path}': {reason}")


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SettingsSnapshot:
    """Immutable view of the configured registrations, in priority order."""

    registrations: Tuple[Registration, ...] = ()

    def with_registration(self, registration: Registration) -> "SettingsSnapshot":
        return SettingsSnapshot(self.registrations + (registration,))

    def without_registration(self, index: int) -> "SettingsSnapshot":
        if not 0 <= index < len(self.registrations):
            raise IndexError(f"No registration at position {index}")
        return SettingsSnapshot(
            self.registrations[:index] + self.registrations[index + 1:]
        )

    def to_dict(self) -> dict:
        return {"registrations": [r.to_dict() for r in self.registrations]}


DEFAULT_SETTINGS = SettingsSnapshot()


def validate_registration(project_key: str, base_url: str) -> Registration:
    """
    Validate user input and build a Registration.

    Raises:
        InvalidRegistrationError: With the user-facing message(s), project
            key errors first.
    """
    try:
        entry = RegistrationInput(project_key=project_key, base_url=base_url)
    except ValidationError as exc:
        raise InvalidRegistrationError(_error_messages(exc)) from exc
    return entry.to_registration()


def _error_messages(exc: ValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        msg = str(err.get("msg", ""))
        # pydantic prefixes messages raised from validators
        messages.append(msg.removeprefix("Value error, "))
    return messages


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class SettingsStore:
    """
    JSON-file backed settings store.

    Usage::

        store = SettingsStore("data.json")
        snapshot = store.add_registration("ABC", "https://example.atlassian.net")
        link_issue_keys("see ABC-1", snapshot.registrations)
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._snapshot: Optional[SettingsSnapshot] = None

    @property
    def snapshot(self) -> SettingsSnapshot:
        """Latest snapshot; the file is read on first access."""
        if self._snapshot is None:
            self._snapshot = self.load()
        return self._snapshot

    def load(self) -> SettingsSnapshot:
        """
        Read the settings file.

        A missing file yields DEFAULT_SETTINGS. Stored entries that no
        longer pass validation are skipped with a warning.

        Raises:
            SettingsLoadError: Malformed JSON (including non UTF-8 bytes)
                or wrong document shape.
        """
        if not self.path.exists():
            logger.info("No settings file at %s, using defaults", self.path)
            self._snapshot = DEFAULT_SETTINGS
            return self._snapshot

        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SettingsLoadError(self.path, f"invalid JSON: {e}") from e

        if raw is None:
            raw = {}
        try:
            validate(instance=raw, schema=SETTINGS_SCHEMA)
        except JSchemaError as e:
            raise SettingsLoadError(self.path, f"schema violation: {e.message}") from e

        registrations: List[Registration] = []
        for position, item in enumerate(raw.get("registrations", [])):
            try:
                registrations.append(RegistrationInput.model_validate(item).to_registration())
            except ValidationError as e:
                logger.warning(
                    "Skipping stored registration #%d (%s): %s",
                    position,
                    item.get("projectKey", "?"),
                    "; ".join(_error_messages(e)),
                )

        self._snapshot = SettingsSnapshot(tuple(registrations))
        logger.info("Loaded %d registration(s) from %s", len(registrations), self.path)
        return self._snapshot

    def save(self, snapshot: SettingsSnapshot) -> None:
        """
        Write *snapshot* to disk and make it the current snapshot.

        The document is written to a temporary file in the same directory and
        moved over the settings file, so a failed write keeps the old file.
        """
        tmp_path: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = f.name
                json.dump(snapshot.to_dict(), f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except Exception as e:
            logger.error("Failed to save settings to %s: %s", self.path, e)
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        self._snapshot = snapshot
        logger.info("Saved %d registration(s) to %s", len(snapshot.registrations), self.path)

    def add_registration(self, project_key: str, base_url: str) -> SettingsSnapshot:
        """Validate, append and persist a registration; returns the new snapshot."""
        registration = validate_registration(project_key, base_url)
        updated = self.snapshot.with_registration(registration)
        self.save(updated)
        return updated

    def remove_registration(self, index: int) -> SettingsSnapshot:
        """Drop the registration at *index* and persist; returns the new snapshot."""
        updated = self.snapshot.without_registration(index)
        self.save(updated)
        return updated
