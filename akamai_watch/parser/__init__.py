# akamai_watch/parser/__init__.py
"""Markup and script-body parsing helpers."""
from akamai_watch.parser.identifier import UNPARSABLE_IDENTIFIER, extract_top_identifier
from akamai_watch.parser.script_locator import locate_script_url

__all__ = ["UNPARSABLE_IDENTIFIER", "extract_top_identifier", "locate_script_url"]
