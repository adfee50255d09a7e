import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from marketplace.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class CacheLookup:
    value: Any
    cached: bool
    age_seconds: int


class AggregateCache:
    """
    In-process TTL cache for expensive rollups (e.g. job titles with counts).
    Writers that change the underlying rows call invalidate(); readers must
    tolerate a value up to ttl_seconds stale.
    """

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[CacheLookup]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, value = entry
            if now - stored_at >= self.ttl_seconds:
                self._entries.pop(key, None)
                return None
        return CacheLookup(value=value, cached=True, age_seconds=int(now - stored_at))

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), value)

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> CacheLookup:
        hit = self.get(key)
        if hit is not None:
            logger.debug(f"Cache hit for {key}")
            return hit

        logger.debug(f"Cache miss for {key}, loading")
        value = loader()
        self.set(key, value)
        return CacheLookup(value=value, cached=False, age_seconds=0)

    def invalidate(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)
        logger.info(f"Cache invalidated: {key or 'all keys'}")


category_cache = AggregateCache(ttl_seconds=settings.CATEGORY_CACHE_TTL_SECONDS)
