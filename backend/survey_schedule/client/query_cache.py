"""Shared read cache for view data"""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Dict

logger = logging.getLogger(__name__)

PROJECTS_KEY = "projects"


class QueryCache:
    """
    Async cache keyed by resource name.

    Concurrent reads of the same key share one in-flight fetch. Cancelling
    one reader leaves the shared fetch running for the others. A write
    calls invalidate(), after which the next read fetches again; a fetch
    that was already running when the key was invalidated still answers
    its waiters but is not stored.
    """

    def __init__(self):
        self._data: Dict[str, Any] = {}
        self._inflight: Dict[str, asyncio.Future] = {}
        self._generations: Dict[str, int] = {}

    async def fetch(self, key: str, fetcher: Callable[[], Awaitable[Any]]) -> Any:
        """Return cached data for key, loading it with fetcher when missing"""
        if key in self._data:
            return self._data[key]

        task = self._inflight.get(key)
        if task is None:
            logger.debug(f"Fetching {key}")
            generation = self._generations.get(key, 0)
            task = asyncio.ensure_future(fetcher())
            self._inflight[key] = task
            task.add_done_callback(functools.partial(self._on_done, key, generation))

        # A cancelled reader must not cancel the fetch other readers share
        return await asyncio.shield(task)

    def invalidate(self, key: str) -> None:
        """Drop cached data so the next fetch reloads it"""
        self._data.pop(key, None)
        self._inflight.pop(key, None)
        self._generations[key] = self._generations.get(key, 0) + 1
        logger.debug(f"Invalidated {key}")

    def is_cached(self, key: str) -> bool:
        return key in self._data

    def _on_done(self, key: str, generation: int, task: asyncio.Future) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if task.cancelled() or task.exception() is not None:
            return
        if self._generations.get(key, 0) == generation:
            self._data[key] = task.result()
