# File: akamai_watch/report/__init__.py
"""akamai_watch.report: сохранение результатов проверки для CLI."""

from akamai_watch.report.json_report import render_json

__all__ = ["render_json"]
