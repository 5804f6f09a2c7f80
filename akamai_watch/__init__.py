# akamai_watch/__init__.py
"""
AkamaiWatch package initializer.
Defines package version and exposes the per-site tracker.

CLI lives in :mod:`akamai_watch.cli` (``python -m akamai_watch.cli``).
"""
__version__ = "0.1.0"

from akamai_watch.tracker import RunOutcome, RunStatus, ScriptChange, Tracker

__all__ = ["__version__", "RunOutcome", "RunStatus", "ScriptChange", "Tracker"]
