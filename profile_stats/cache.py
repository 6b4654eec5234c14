"""In-memory TTL cache for aggregated profile stats."""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional

from .github_base import CACHE_TTL
from .models import ProfileStats


class StatsCache:
    """Per-process cache of ProfileStats keyed by username.

    Entries are never evicted; an expired entry is simply overwritten by the
    next successful aggregation. Nothing survives a restart.
    """

    def __init__(self, ttl: float = CACHE_TTL, clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self.clock = clock
        self._entries: dict[str, tuple[ProfileStats, float]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key_for(username: str) -> str:
        return f"github-stats-{username}"

    def get(self, key: str) -> Optional[ProfileStats]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        stats, expiry = entry
        if self.clock() < expiry:
            return stats
        return None

    def put(self, key: str, stats: ProfileStats, ttl: Optional[float] = None) -> None:
        expiry = self.clock() + (self.ttl if ttl is None else ttl)
        with self._lock:
            self._entries[key] = (stats, expiry)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
