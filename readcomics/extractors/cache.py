"""
Hot Updates Cache

Accumulates hot-update records across repeated parses. Every parse appends
to the cache and returns its full contents; nothing is evicted until
clear() is called.
"""

import threading
from typing import Iterable, List

from readcomics.models.comic import ComicUpdate


class HotUpdatesCache:
    """Append-only store of hot updates with an explicit reset."""

    def __init__(self):
        self._updates: List[ComicUpdate] = []
        self._lock = threading.Lock()

    def extend(self, updates: Iterable[ComicUpdate]) -> List[ComicUpdate]:
        """Append updates and return a snapshot of everything accumulated so far."""
        with self._lock:
            self._updates.extend(updates)
            return list(self._updates)

    def snapshot(self) -> List[ComicUpdate]:
        with self._lock:
            return list(self._updates)

    def clear(self) -> None:
        with self._lock:
            self._updates.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._updates)
