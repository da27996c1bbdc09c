"""
Ties the pipeline together: window -> fetch -> hazard filter -> ordering -> diff against the store.
"""
import logging
from datetime import date
from typing import Callable

import aiohttp

from config import Settings
from models import TrackedObject
from pipeline.detector import merge
from pipeline.hazards import select_hazardous
from pipeline.ordering import flatten
from pipeline.window import date_span
from providers.base import BaseAdapter
from store import ObservedStore

logger = logging.getLogger(__name__)


class NeoWatcher:
    """
    Reports hazardous objects approaching settings.orbiting_body that were never reported before.
    One fetch at a time: the store is not locked.
    """

    def __init__(
        self,
        adapter: BaseAdapter,
        store: ObservedStore,
        settings: Settings,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.adapter = adapter
        self.store = store
        self.settings = settings
        self._today = today

    async def fetch_novel_hazards(
        self,
        session: aiohttp.ClientSession,
        offset: int,
    ) -> list[TrackedObject]:
        """
        Fetch the window at offset days from today and return the hazardous objects not seen before,
        earliest approach first. The store is updated only if every step succeeds.
        """
        start, end = date_span(offset, self._today())
        logger.info("checking near-Earth objects from %s to %s", start, end)
        batch = await self.adapter.fetch_objects(session, start, end)
        candidates = flatten(select_hazardous(batch, self.settings.orbiting_body))
        logger.info("found %d potentially dangerous objects out of %d", len(candidates), len(batch))
        previous = self.store.load()
        merged, novel = merge(previous, candidates)
        if novel:
            self.store.save(merged)
        logger.info("%d new dangerous objects, %d observed in total", len(novel), len(merged))
        return novel

    async def first_fetch(self, session: aiohttp.ClientSession) -> list[TrackedObject]:
        """Fetch with the first offset."""
        return await self.fetch_novel_hazards(session, self.settings.first_offset)

    async def fetch(self, session: aiohttp.ClientSession) -> list[TrackedObject]:
        """Fetch with the regular offset."""
        return await self.fetch_novel_hazards(session, self.settings.offset)
