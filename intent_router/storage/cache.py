"""In-memory cache for classification results."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from intent_router.inference.classification.result import Classification

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60
DEFAULT_MAX_ENTRIES = 10_000


@dataclass
class CacheEntry:
    result: Classification
    timestamp: float


@dataclass(frozen=True)
class CacheStats:
    entries: int
    hits: int
    misses: int
    max_entries: int
    ttl_seconds: float

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ResultCache:
    """TTL-bounded, capacity-bounded cache keyed by caller-built strings.

    Eviction is first-in-first-out: when full, the entry inserted earliest is
    dropped. Reads do not reorder entries, so this is not an LRU cache. Expired
    entries are removed lazily when read (or by ``purge_expired``).

    All operations hold one lock, which keeps evict-then-insert atomic for
    concurrent callers.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.time,
    ):
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")

        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        # dict preserves insertion order; the first key is the eviction candidate
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.timestamp > self._ttl_seconds

    def get(self, key: str) -> Classification | None:
        """Get a cached result, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None

            if self._is_expired(entry, self._clock()):
                del self._entries[key]
                self._misses += 1
                return None

            self._hits += 1
            return entry.result

    def set(self, key: str, value: Classification) -> None:
        """Store a result, evicting the oldest entry if the cache is full.

        Overwriting a key refreshes its timestamp and moves it to the back of
        the eviction order without evicting anything else.
        """
        with self._lock:
            if key in self._entries:
                del self._entries[key]
            elif len(self._entries) >= self._max_entries:
                oldest_key = next(iter(self._entries))
                del self._entries[oldest_key]
                logger.debug("Evicted cache entry %r", oldest_key)

            self._entries[key] = CacheEntry(result=value, timestamp=self._clock())

    def has(self, key: str) -> bool:
        """Check for a live entry without touching hit/miss counters."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            if self._is_expired(entry, self._clock()):
                del self._entries[key]
                return False
            return True

    def delete(self, key: str) -> bool:
        """Remove an entry. Returns True if it existed."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Remove all entries and reset counters. Returns count of removed."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            return removed

    def purge_expired(self) -> int:
        """Remove expired entries. Returns count of removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if self._is_expired(e, now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Purged %d expired cache entries", len(expired))
        return len(expired)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                entries=len(self._entries),
                hits=self._hits,
                misses=self._misses,
                max_entries=self._max_entries,
                ttl_seconds=self._ttl_seconds,
            )
