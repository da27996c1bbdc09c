"""
NASA NeoWs adapter: fetches /feed for a date span and normalizes it to TrackedObjects.
https://api.nasa.gov/#NeoWS
"""

import asyncio
import json
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from errors import RateLimitError, UpstreamError
from models import FeedPage, TrackedObject
from providers.base import BaseAdapter

logger = logging.getLogger(__name__)

RATE_LIMIT_MARKER = "OVER_RATE_LIMIT"
RATE_LIMIT_MESSAGE = "http get rate limit reached, wait or use a proper key instead of the default one"


class NeoWsAdapter(BaseAdapter):
    """Fetch and normalize the NeoWs feed."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.nasa.gov/neo/rest/v1",
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def fetch_page(
        self,
        session: aiohttp.ClientSession,
        start_date: str,
        end_date: str,
    ) -> FeedPage:
        """GET feed for [start_date, end_date]; map rate limiting and failures to watcher errors."""
        url = f"{self.base_url}/feed"
        params = {"api_key": self.api_key, "start_date": start_date, "end_date": end_date}
        try:
            async with session.get(url, params=params, timeout=self.timeout) as resp:
                status = resp.status
                raw = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamError(f"feed request failed: {e.__class__.__name__}") from e
        if status == 429:
            raise RateLimitError(RATE_LIMIT_MESSAGE)
        try:
            body = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UpstreamError(f"feed response is not utf-8: {e.reason}", status=status) from e
        if RATE_LIMIT_MARKER in body:
            raise RateLimitError(RATE_LIMIT_MESSAGE)
        if status >= 400:
            raise UpstreamError(f"feed request failed with status {status}", status=status)
        try:
            return FeedPage(**json.loads(body))
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            raise UpstreamError(f"feed response is not a valid feed page: {e}", status=status) from e

    def _normalize_to_objects(self, page: FeedPage) -> list[TrackedObject]:
        """Flatten the per-date lists, earliest date first. Records that fail validation are skipped."""
        objects: list[TrackedObject] = []
        for day in sorted(page.near_earth_objects):
            records: list[Any] = page.near_earth_objects[day] or []
            for record in records:
                if not isinstance(record, dict):
                    logger.warning("skipping malformed record on %s: %r is not an object", day, record)
                    continue
                try:
                    objects.append(TrackedObject(**record))
                except ValidationError as e:
                    logger.warning("skipping malformed record on %s: %s", day, e.errors()[0].get("msg"))
        return objects

    async def fetch_objects(
        self,
        session: aiohttp.ClientSession,
        start_date: str,
        end_date: str,
    ) -> list[TrackedObject]:
        """Fetch the feed page and return normalized objects."""
        page = await self.fetch_page(session, start_date, end_date)
        objects = self._normalize_to_objects(page)
        logger.debug("feed %s..%s returned %d objects", start_date, end_date, len(objects))
        return objects


if __name__ == "__main__":
    import asyncio
    from datetime import date

    from config import load_config
    from pipeline.window import date_span

    async def main() -> None:
        cfg = load_config()
        start, end = date_span(cfg.offset, date.today())
        async with aiohttp.ClientSession() as session:
            adapter = NeoWsAdapter(cfg.api_key, cfg.base_url)
            objects = await adapter.fetch_objects(session, start, end)
        for o in objects:
            print(o.model_dump_json())

    asyncio.run(main())
