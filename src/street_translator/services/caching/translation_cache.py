"""Translation cache - normalized-key store with time-based expiry and snapshot persistence."""

import json
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from street_translator.services.caching.key_value_storage import KeyValueStorage
from street_translator.services.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached translation. `created_at` is epoch milliseconds."""

    value: str
    created_at: float


@dataclass(frozen=True)
class CacheStats:
    """Size of the cache and the creation time of its oldest entry."""

    size: int
    oldest_timestamp: Optional[float]


class TranslationCache:
    """
    Translation cache backed by a KeyValueStorage slot.

    The whole store is serialized as a JSON array of `[key, entry]` pairs
    and written back after every mutation. Entries older than the TTL are
    evicted lazily when read.

    Persistence failures never reach the caller: the first one is logged
    and the cache keeps working in memory for the rest of the session.
    """

    SLOT_NAME = "bitssun_translations_v1"
    TTL_MS = 30 * 24 * 60 * 60 * 1000  # 30 days

    def __init__(
        self,
        storage: KeyValueStorage,
        slot: str = SLOT_NAME,
        ttl_ms: float = TTL_MS,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._storage = storage
        self._slot = slot
        self._ttl_ms = ttl_ms
        self._clock = clock or (lambda: time.time() * 1000)
        self._entries: dict[str, CacheEntry] = {}
        self._persistent = True
        self._load()

    @property
    def is_persistent(self) -> bool:
        """False once the backing storage has failed this session."""
        return self._persistent

    def get(self, key: str) -> Optional[str]:
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() - entry.created_at > self._ttl_ms:
            del self._entries[key]
            self._save()
            return None

        return entry.value

    def set(self, key: str, value: str) -> None:
        """Store or overwrite an entry and persist the snapshot."""
        self._entries[key] = CacheEntry(value=value, created_at=self._clock())
        self._save()

    def clear(self) -> None:
        """Drop every entry from memory and from the backing storage."""
        self._entries = {}
        # Also in memory-only mode: the medium may still hold an older snapshot.
        try:
            self._storage.remove(self._slot)
            logger.info("Translation cache cleared")
        except PersistenceError as e:
            self._disable_persistence(e)

    def stats(self) -> CacheStats:
        oldest = min((e.created_at for e in self._entries.values()), default=None)
        return CacheStats(size=len(self._entries), oldest_timestamp=oldest)

    def __len__(self) -> int:
        return len(self._entries)

    def _load(self) -> None:
        """Load a prior snapshot; anything unreadable starts an empty cache."""
        try:
            raw = self._storage.read(self._slot)
        except PersistenceError as e:
            self._disable_persistence(e)
            return

        if raw is None:
            return

        try:
            pairs = json.loads(raw)
            entries = {}
            for key, data in pairs:
                value, timestamp = data["value"], float(data["timestamp"])
                if not isinstance(key, str) or not isinstance(value, str):
                    raise TypeError(f"Invalid cache entry for {key!r}")
                if not math.isfinite(timestamp):
                    raise ValueError(f"Invalid timestamp for {key!r}")
                entries[key] = CacheEntry(value=value, created_at=timestamp)
        except (json.JSONDecodeError, TypeError, ValueError, KeyError) as e:
            logger.error("Failed to load translation cache: %s", e)
            return

        self._entries = entries
        logger.info("Loaded %d cached translations", len(entries))

    def _save(self) -> None:
        if not self._persistent:
            return
        pairs = [
            [key, {"value": entry.value, "timestamp": entry.created_at}]
            for key, entry in self._entries.items()
        ]
        try:
            self._storage.write(self._slot, json.dumps(pairs, ensure_ascii=False))
        except PersistenceError as e:
            self._disable_persistence(e)

    def _disable_persistence(self, error: PersistenceError) -> None:
        logger.error(
            "Translation cache storage failed, continuing in memory only: %s", error
        )
        self._persistent = False
