# akamai_watch/parser/identifier.py
"""
Top identifier extraction.

The script carries no version number, so the name of the first variable
declared by its IIFE wrapper is used as a readable label:

    (function(){var _cf={}; ...  ->  "_cf"

The label is for file names and notifications only. A new build may reuse
an old name, so change detection always relies on the content hash.
"""
from __future__ import annotations

import re

IDENTIFIER_PREFIX = "(function(){var "
IDENTIFIER_SUFFIX = "={}"
UNPARSABLE_IDENTIFIER = "Could not parse the name of top identifier."

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*")


def extract_top_identifier(body: str) -> str:
    """Return the top identifier name or :data:`UNPARSABLE_IDENTIFIER`."""
    _, found, rest = body.partition(IDENTIFIER_PREFIX)
    if not found:
        return UNPARSABLE_IDENTIFIER
    name, found, _ = rest.partition(IDENTIFIER_SUFFIX)
    if not found or not _IDENTIFIER_RE.fullmatch(name):
        return UNPARSABLE_IDENTIFIER
    return name
