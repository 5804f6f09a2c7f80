# akamai_watch/tracker/models.py
"""
Data models for the AkamaiWatch tracker.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class PageData:
    """Holds the requested URL and the text body of a 200 response."""

    url: str
    content: str


@dataclass(slots=True)
class ScriptArtifact:
    """One fetched version of the bot-detection script, alive for a single run."""

    url: str
    body: str
    fingerprint: str
    version_tag: str = ""


@dataclass(slots=True, frozen=True)
class ScriptChange:
    """Result record handed to the caller when the script changed."""

    host: str
    fingerprint: str
    script_url: str
    version_tag: str
    saved_to: Optional[Path] = None

    def as_payload(self) -> dict[str, str]:
        """Payload shape expected by notifiers (webhooks etc.)."""
        return {
            "host": self.host,
            "hash": self.fingerprint,
            "akamaiURL": self.script_url,
            "topIdentifier": self.version_tag,
        }


class RunStatus(str, Enum):
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    PAGE_FETCH_FAILED = "page_fetch_failed"
    LOCATE_FAILED = "locate_failed"
    SCRIPT_FETCH_FAILED = "script_fetch_failed"
    HASH_FAILED = "hash_failed"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class RunOutcome:
    """Tagged result of one pipeline run; ``change`` is set only for CHANGED."""

    status: RunStatus
    change: Optional[ScriptChange] = None

    @property
    def changed(self) -> bool:
        return self.status is RunStatus.CHANGED
