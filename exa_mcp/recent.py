"""Bounded FIFO of recent upstream responses, kept for read-back only."""
import asyncio
import logging
from collections import deque
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List

from .config import RECENT_SEARCHES_MAX

logger = logging.getLogger(__name__)


@dataclass
class CachedSearch:
    query: str
    tool: str
    response: Dict[str, Any]
    timestamp: str


class RecentSearches:
    """Newest-first buffer; the oldest entry is dropped past ``maxlen``.

    Writers go through a lock so concurrent tool calls insert one at a time.
    Nothing reads this to decide the outcome of a call.
    """

    def __init__(self, maxlen: int = RECENT_SEARCHES_MAX):
        self.maxlen = maxlen
        self._items: Deque[CachedSearch] = deque()
        self._lock = asyncio.Lock()

    async def add(self, query: str, tool: str, response: Dict[str, Any]) -> None:
        entry = CachedSearch(
            query=query,
            tool=tool,
            response=response,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        async with self._lock:
            self._items.appendleft(entry)
            while len(self._items) > self.maxlen:
                self._items.pop()
        logger.debug(f"Recent searches: {len(self._items)}/{self.maxlen}")

    def snapshot(self) -> List[dict]:
        return [asdict(item) for item in self._items]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


recent_searches = RecentSearches()
