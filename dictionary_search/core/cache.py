"""Bounded LRU cache of projected result pages."""

import threading
from collections import OrderedDict
from typing import Hashable, List, Optional, Tuple

from ..models.response import WordResponse

CacheKey = Tuple[Hashable, ...]


class QueryCache:
    """LRU cache invalidated wholesale whenever the corpus version changes."""

    def __init__(self, max_entries: int = 1024) -> None:
        self._max_entries = max_entries
        self._entries: "OrderedDict[CacheKey, Tuple[WordResponse, ...]]" = OrderedDict()
        self._version: Optional[int] = None
        self._lock = threading.RLock()

    def get(self, key: CacheKey, version: int) -> Optional[List[WordResponse]]:
        """Cached page for ``key``, or None on a miss or a stale corpus."""
        with self._lock:
            self._sync_version(version)
            page = self._entries.get(key)
            if page is None:
                return None
            self._entries.move_to_end(key)
            return list(page)

    def put(self, key: CacheKey, version: int, page: List[WordResponse]) -> None:
        with self._lock:
            self._sync_version(version)
            self._entries[key] = tuple(page)
            self._trim()

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._version = None

    def __len__(self) -> int:
        return len(self._entries)

    def _sync_version(self, version: int) -> None:
        if self._version != version:
            self._entries.clear()
            self._version = version

    def _trim(self) -> None:
        if self._max_entries <= 0:
            self._entries.clear()
            return

        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)
