# akamai_watch/tracker/fetcher.py
"""
Fetcher module: plain HTTP GET with a browser User-Agent and a per-request timeout.
Used for both the monitored page and the script it references.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from akamai_watch.config import DEFAULT_USER_AGENT
from akamai_watch.logger import logger
from akamai_watch.tracker.models import PageData


class Fetcher:
    """Fetches text bodies; anything but HTTP 200 counts as no result."""

    def __init__(
        self,
        session: ClientSession,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ) -> None:
        self.session = session
        self.user_agent = user_agent
        self._timeout = ClientTimeout(total=timeout)

    async def fetch(self, url: str) -> Optional[PageData]:
        """
        GET *url* once.

        Returns PageData on status 200, or None on any other status,
        transport error or timeout. Retrying is left to the caller.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            async with self.session.get(
                url, headers=headers, timeout=self._timeout, raise_for_status=False
            ) as resp:
                if resp.status != 200:
                    logger.warning("GET %s returned status %s", url, resp.status)
                    return None
                text = await resp.text(errors="replace")
                return PageData(url, text)
        except asyncio.TimeoutError:
            logger.warning("GET %s timed out", url)
            return None
        except ClientError as exc:
            logger.warning("GET %s failed: %s", url, exc)
            return None
