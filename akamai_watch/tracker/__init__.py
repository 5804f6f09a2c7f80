# akamai_watch/tracker/__init__.py
"""Per-site tracking pipeline: fetch, locate, hash, diff and persist."""
from akamai_watch.tracker.models import RunOutcome, RunStatus, ScriptArtifact, ScriptChange
from akamai_watch.tracker.tracker import Tracker, TrackerState

__all__ = [
    "RunOutcome",
    "RunStatus",
    "ScriptArtifact",
    "ScriptChange",
    "Tracker",
    "TrackerState",
]
