# backend/services/cache.py
"""
In-process result cache for health scores.

Keys are content-addressed: customer id + a full serialization of the metrics,
so any change in the input is a miss and nothing ever needs invalidating.
Entries expire after a fixed TTL. When the cache is full, the half with the
earliest expiry is dropped before the next insert (approximate LRU).
"""

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from ..config import CACHE_MAX_ENTRIES, CACHE_TTL_SECONDS
from ..models import CustomerMetrics, HealthScoreResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def fingerprint(metrics: CustomerMetrics) -> str:
    """Stable serialization of the whole metrics payload."""
    return json.dumps(metrics.to_dict(), sort_keys=True, separators=(",", ":"), default=repr)


def make_key(customer_id: str, metrics: CustomerMetrics) -> str:
    return f"{customer_id}_{fingerprint(metrics)}"


@dataclass(frozen=True)
class CacheEntry:
    result: HealthScoreResult
    expires_at: datetime


class HealthScoreCache:
    def __init__(
        self,
        ttl: timedelta = timedelta(seconds=CACHE_TTL_SECONDS),
        max_entries: int = CACHE_MAX_ENTRIES,
        clock: Clock = utcnow,
    ):
        self.ttl = ttl
        self.max_entries = max_entries
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: str) -> Optional[HealthScoreResult]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self.clock() > entry.expires_at:
                del self._entries[key]
                logger.debug("cache entry expired: %s", key)
                return None
            return entry.result

    def set(self, key: str, result: HealthScoreResult) -> None:
        with self._lock:
            self._evict_locked()
            self._entries[key] = CacheEntry(result=result, expires_at=self.clock() + self.ttl)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _evict_locked(self) -> None:
        if len(self._entries) < self.max_entries:
            return
        by_expiry = sorted(self._entries.items(), key=lambda kv: kv[1].expires_at)
        doomed = by_expiry[: max(1, self.max_entries // 2)]
        for key, _ in doomed:
            del self._entries[key]
        logger.info("health score cache full (%d entries), evicted %d", self.max_entries, len(doomed))
