# === FILE: akamai_watch/parser/script_locator.py ===
"""Locating the bot-detection script inside a page.

The script is *usually* the last ``<script>`` element of the document. Some
sites append the ``sec-cpt`` challenge script after it, in which case the
second-to-last element is taken instead.

Known limitation
----------------
If a page orders its scripts differently from these two cases the locator
returns the wrong URL. That is accepted behaviour: the heuristic is kept
exactly as is rather than replaced with pattern matching over script bodies.

The chosen ``src`` is assumed host-relative (``/abc/def``) and is resolved
by prefixing ``https://`` and the tracked host, without further URL joining.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from akamai_watch.logger import logger

__all__: Sequence[str] = ("SEC_CPT_MARKER", "locate_script_url")

SEC_CPT_MARKER = "sec-cpt"


def _src_of(tag: object) -> Optional[str]:
    if not isinstance(tag, Tag):
        return None
    src = tag.get("src")
    if not isinstance(src, str) or not src:
        return None
    return src


def locate_script_url(markup: str, host: str) -> Optional[str]:
    """Return the absolute URL of the bot-detection script, or None.

    Parameters
    ----------
    markup
        Raw HTML of the monitored page.
    host
        Host (``netloc``) of the monitored page, used as the URL prefix.
    """
    try:
        soup = BeautifulSoup(markup, "html.parser")
        scripts = soup.find_all("script")
    except Exception as exc:
        logger.error("Could not parse markup from %s: %s", host, exc)
        return None

    if not scripts:
        logger.warning("No <script> elements found on %s", host)
        return None

    src = _src_of(scripts[-1])
    if src is not None and SEC_CPT_MARKER in src:
        if len(scripts) < 2:
            logger.warning("Only a sec-cpt script found on %s", host)
            return None
        src = _src_of(scripts[-2])

    if src is None:
        logger.warning("Selected <script> on %s has no src attribute", host)
        return None

    url = "https://" + host + src
    logger.debug("Located script on %s: %s", host, url)
    return url
