"""
Near-Earth object watcher: poll the NeoWs feed, detect new hazardous objects, print alerts.
"""
import asyncio
import logging
import random

import aiohttp

from alert_log import append_alerts
from config import Settings, load_config
from errors import DateParseError, FetchWindowError, RateLimitError, StoreError, UpstreamError
from models import TrackedObject
from pipeline.formatter import format_alert
from pipeline.orchestrator import NeoWatcher
from providers.neows import NeoWsAdapter
from store import ObservedStore

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def emit(novel: list[TrackedObject], settings: Settings) -> None:
    """Print one alert per object, waiting a random delay before each unless debugging."""
    for obj in novel:
        if not settings.debug:
            await asyncio.sleep(random.uniform(0, settings.pacing_max_seconds))
        message = format_alert(obj, settings.orbiting_body)
        print(message)
        append_alerts([(obj, message)])


async def run_once(
    session: aiohttp.ClientSession,
    watcher: NeoWatcher,
    first: bool,
) -> None:
    """One poll. Failures that a later poll may recover from are logged, not raised."""
    try:
        if first:
            novel = await watcher.first_fetch(session)
        else:
            novel = await watcher.fetch(session)
    except RateLimitError as e:
        logger.warning("%s", e)
        return
    except (UpstreamError, StoreError, DateParseError) as e:
        logger.error("fetch failed: %s", e)
        return
    await emit(novel, watcher.settings)


async def main() -> None:
    cfg = load_config()
    setup_logging(cfg.log_level)
    if cfg.has_default_key:
        logger.warning("NASA_API_KEY not set, using the rate limited demo key")
    adapter = NeoWsAdapter(cfg.api_key, cfg.base_url)
    watcher = NeoWatcher(adapter, ObservedStore(cfg.store_path), cfg)

    polls = 0
    async with aiohttp.ClientSession() as session:
        while cfg.max_polls is None or polls < cfg.max_polls:
            try:
                await run_once(session, watcher, first=polls == 0)
            except FetchWindowError as e:
                logger.error("invalid configuration: %s", e)
                return
            polls += 1
            if cfg.max_polls is None or polls < cfg.max_polls:
                await asyncio.sleep(cfg.poll_interval)


if __name__ == "__main__":
    asyncio.run(main())
