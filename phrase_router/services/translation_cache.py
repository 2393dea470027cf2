"""
In-memory TTL cache for remote translations.

Entries are keyed by (trimmed source text, source language, target language)
and expire lazily: every read first purges what is already stale. Memory is
bounded only by the number of distinct keys seen. An optional CacheSweeper can
purge on a timer for long-lived processes without changing read semantics.
"""

import asyncio
import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from phrase_router.models.internal_models import CacheEntry, Language

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600

CacheKey = Tuple[str, Language, Language]


class TranslationCache:
    """
    Thread-safe TTL map from (text, source, target) to translated text.

    Concurrent writers for the same key are allowed; the last one wins.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize the cache.

        Args:
            ttl_seconds: Maximum entry age before it is treated as absent
            clock: Time source in seconds, injectable for tests
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[CacheKey, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(text: str, source_lang: Language, target_lang: Language) -> CacheKey:
        return (text.strip(), Language(source_lang), Language(target_lang))

    def get(self, text: str, source_lang: Language, target_lang: Language) -> Optional[str]:
        """
        Get a fresh cached translation.

        Args:
            text: Source text
            source_lang: Source language
            target_lang: Target language

        Returns:
            Cached translation or None if absent or expired
        """
        key = self.make_key(text, source_lang, target_lang)
        with self._lock:
            self._purge_locked(self._clock())
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                logger.debug(f"Cache miss for key: {key}")
                return None
            self._hits += 1
            logger.debug(f"Cache hit for key: {key}")
            return entry.translated_text

    def put(self, text: str, source_lang: Language, target_lang: Language, translated: str) -> None:
        """Insert or overwrite a translation stamped with the current time."""
        key = self.make_key(text, source_lang, target_lang)
        with self._lock:
            self._entries[key] = CacheEntry(translated_text=translated, created_at=self._clock())
        logger.debug(f"Cache set for key: {key}")

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Translation cache cleared ({count} entries)")

    def purge_expired(self) -> int:
        """
        Drop every expired entry.

        Returns:
            Number of entries removed
        """
        with self._lock:
            return self._purge_locked(self._clock())

    def stats(self) -> dict:
        """Size, live keys and hit/miss counts, after purging stale entries."""
        with self._lock:
            self._purge_locked(self._clock())
            return {
                "size": len(self._entries),
                "keys": [f"{text}_{src.value}_{dst.value}" for text, src, dst in self._entries],
                "hits": self._hits,
                "misses": self._misses,
                "ttl_seconds": self.ttl_seconds,
            }

    def _purge_locked(self, now: float) -> int:
        expired = [
            key for key, entry in self._entries.items()
            if entry.is_expired(now, self.ttl_seconds)
        ]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Purged {len(expired)} expired cache entries")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CacheSweeper:
    """
    Periodic purge of expired cache entries.

    Purely a memory bound for long-running processes; reads already ignore
    stale entries on their own.
    """

    def __init__(self, cache: TranslationCache, interval_seconds: float):
        self.cache = cache
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            logger.warning("Cache sweeper already running, skipping")
            return
        self._task = asyncio.create_task(self._run())
        logger.info(f"Cache sweeper started with {self.interval_seconds}s interval")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        finally:
            self._task = None
        logger.info("Cache sweeper stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            removed = self.cache.purge_expired()
            if removed:
                logger.info(f"Cache sweep removed {removed} expired entries")
