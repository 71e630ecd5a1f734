"""
Dictionary-based in-memory cache implementation

Entries live as long as the owning cache object: there is no TTL and no
size limit. Useful as a per-instance memo in front of slower cache layers.
"""

import logging
from typing import Any, Dict, Optional

from .interface import CacheInterface
from .types import K, V

logger = logging.getLogger(__name__)


class DictCache(CacheInterface[K, V]):
    """
    Process-lifetime memo backed by a plain dict

    Not thread-safe: the owner is expected to use it from a single flow.

    Example:
        >>> memo = DictCache[str, dict]()
        >>> await memo.set("key", {"a": 1})
        >>> await memo.get("key")
        {'a': 1}
    """

    def __init__(self):
        self._storage: Dict[K, V] = {}
        self._hits = 0
        self._misses = 0

    async def get(self, key: K) -> Optional[V]:
        if key in self._storage:
            self._hits += 1
            logger.debug(f"Memory cache hit for key: {key}")
            return self._storage[key]

        self._misses += 1
        logger.debug(f"Memory cache miss for key: {key}")
        return None

    async def set(self, key: K, value: V) -> bool:
        self._storage[key] = value
        return True

    def clear(self) -> None:
        self._storage.clear()
        logger.debug("Cleared memory cache")

    def getStats(self) -> Dict[str, Any]:
        """Get cache statistics (entries count, hits and misses)"""
        return {
            "entries": len(self._storage),
            "hits": self._hits,
            "misses": self._misses,
        }
