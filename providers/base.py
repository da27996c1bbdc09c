"""
Abstract interface for near-Earth object feeds.
"""

from abc import ABC, abstractmethod

import aiohttp

from models import TrackedObject


class BaseAdapter(ABC):
    """
    Base class for all feeds.
    """

    @abstractmethod
    async def fetch_objects(
        self,
        session: "aiohttp.ClientSession",
        start_date: str,
        end_date: str,
    ) -> list[TrackedObject]:
        """
        Fetch every object with a close approach between start_date and end_date (YYYY-MM-DD, inclusive).
        Raises RateLimitError when the quota is exhausted and UpstreamError on any other failure.
        """
        pass
