# File: akamai_watch/engine.py
"""akamai_watch.engine: один проход всех трекеров из конфига."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from aiohttp import ClientSession

from akamai_watch.config import TrackerConfig
from akamai_watch.logger import logger
from akamai_watch.storage import ScriptStore
from akamai_watch.tracker.fetcher import Fetcher
from akamai_watch.tracker.models import RunOutcome, ScriptChange
from akamai_watch.tracker.tracker import Tracker

__all__ = ["Engine", "check_sites"]


class Engine:
    """Фасад для CLI и тестов: держит по одному Tracker на каждый URL из конфига и общую HTTP-сессию."""

    def __init__(self, config: TrackerConfig) -> None:
        self.config = config
        self.trackers: Dict[str, Tracker] = {}
        self._session: Optional[ClientSession] = None

    async def __aenter__(self) -> "Engine":
        self._session = ClientSession()
        fetcher = Fetcher(self._session, self.config.user_agent, self.config.timeout)
        store = ScriptStore(self.config.storage_dir, self.config.script_extension)
        for site in self.config.sites:
            url = str(site.site)
            if url in self.trackers:
                logger.warning("Duplicate site %s ignored", url)
                continue
            self.trackers[url] = Tracker(url, fetcher, store)
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def run_once(self) -> List[RunOutcome]:
        """Запускает по одному проходу каждого трекера параллельно и ждёт все."""
        if self._session is None:
            raise RuntimeError("Engine must be used as an async context manager")
        logger.info("Checking %d site(s)…", len(self.trackers))
        return list(await asyncio.gather(*(t.check() for t in self.trackers.values())))


async def check_sites(config: TrackerConfig) -> List[ScriptChange]:
    """Один проход по всем сайтам конфига; возвращает только найденные изменения."""
    async with Engine(config) as engine:
        outcomes = await engine.run_once()
    return [o.change for o in outcomes if o.change is not None]
