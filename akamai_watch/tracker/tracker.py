# === FILE: akamai_watch/tracker/tracker.py ===
"""Per-site tracker of the Akamai 2.0 bot-detection script.

One :class:`Tracker` watches one site. Each :meth:`Tracker.run` walks the
pipeline

    page fetch -> script locate -> script fetch -> hash -> diff
               -> (on change) top identifier -> persist

and stops at the first empty step. The only state kept between runs is the
last seen hash and script URL, held in memory on the instance.

A tracker must not be re-entered: awaiting two ``run()`` calls of the same
instance concurrently lets both see the old hash and both report a change.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol
from urllib.parse import urlsplit

from akamai_watch.logger import logger
from akamai_watch.parser.identifier import extract_top_identifier
from akamai_watch.parser.script_locator import locate_script_url
from akamai_watch.storage import ScriptStore
from akamai_watch.tracker.hasher import script_fingerprint
from akamai_watch.tracker.models import (
    PageData,
    RunOutcome,
    RunStatus,
    ScriptArtifact,
    ScriptChange,
)

__all__ = ["Tracker", "TrackerState"]


class SupportsFetch(Protocol):
    async def fetch(self, url: str) -> Optional[PageData]: ...


class TrackerState(str, Enum):
    UNSEEN = "unseen"
    KNOWN = "known"


class Tracker:
    """Tracks script changes on a single site."""

    def __init__(self, target_url: str, fetcher: SupportsFetch, store: ScriptStore) -> None:
        host = urlsplit(target_url).netloc
        if not host:
            raise ValueError(f"Not an absolute URL: {target_url!r}")
        self._target_url = target_url
        self._host = host
        self.fetcher = fetcher
        self.store = store
        self.last_known_hash = ""
        self.last_known_script_url = ""

    @property
    def target_url(self) -> str:
        return self._target_url

    @property
    def host(self) -> str:
        return self._host

    @property
    def state(self) -> TrackerState:
        return TrackerState.KNOWN if self.last_known_hash else TrackerState.UNSEEN

    def __repr__(self) -> str:
        return f"Tracker({self._target_url!r}, state={self.state.value})"

    # ------------------------------------------------------------------ #
    # Pipeline steps                                                      #
    # ------------------------------------------------------------------ #

    def detect(self, new_hash: str) -> bool:
        """Return True and remember *new_hash* if it differs from the last one."""
        if new_hash == self.last_known_hash:
            logger.info("Same hash for %s: %s", self._host, self.last_known_hash)
            return False
        previous = self.last_known_hash
        self.last_known_hash = new_hash
        logger.info(
            "Script change found on %s: %s -> %s", self._host, previous or "<none>", new_hash
        )
        return True

    def _persist(self, artifact: ScriptArtifact) -> ScriptChange:
        saved_to = self.store.save(
            self._host, artifact.version_tag, artifact.fingerprint, artifact.body
        )
        return ScriptChange(
            host=self._host,
            fingerprint=artifact.fingerprint,
            script_url=artifact.url,
            version_tag=artifact.version_tag,
            saved_to=saved_to,
        )

    async def _check(self) -> RunOutcome:
        page = await self.fetcher.fetch(self._target_url)
        if page is None or not page.content:
            return RunOutcome(RunStatus.PAGE_FETCH_FAILED)

        script_url = locate_script_url(page.content, self._host)
        if not script_url:
            return RunOutcome(RunStatus.LOCATE_FAILED)
        self.last_known_script_url = script_url

        script = await self.fetcher.fetch(script_url)
        if script is None or not script.content:
            return RunOutcome(RunStatus.SCRIPT_FETCH_FAILED)

        try:
            fingerprint = script_fingerprint(script.content)
        except (UnicodeError, ValueError) as exc:
            logger.error("Could not hash script from %s: %s", script_url, exc)
            return RunOutcome(RunStatus.HASH_FAILED)

        if not self.detect(fingerprint):
            return RunOutcome(RunStatus.UNCHANGED)

        artifact = ScriptArtifact(
            url=script_url,
            body=script.content,
            fingerprint=fingerprint,
            version_tag=extract_top_identifier(script.content),
        )
        return RunOutcome(RunStatus.CHANGED, self._persist(artifact))

    # ------------------------------------------------------------------ #
    # Public API                                                          #
    # ------------------------------------------------------------------ #

    async def check(self) -> RunOutcome:
        """Run the pipeline once and report how it ended. Never raises."""
        try:
            outcome = await self._check()
        except Exception:
            logger.exception("Tracker for %s failed", self._host)
            return RunOutcome(RunStatus.ERROR)
        logger.debug("Run for %s finished: %s", self._host, outcome.status.value)
        return outcome

    async def run(self) -> Optional[ScriptChange]:
        """Run the pipeline once; return the change record, or None if nothing new."""
        return (await self.check()).change
