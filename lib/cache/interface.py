"""
Abstract cache interface for lib.cache

This module defines the generic CacheInterface that all cache implementations
must follow.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional

from .types import K, V


class CacheInterface(ABC, Generic[K, V]):
    """
    Generic cache interface for any key-value storage

    Type Parameters:
        K: The key type (any hashable type)
        V: The value type (any type)

    Example:
        >>> cache = DictCache[str, dict]()
        >>> await cache.set("0a1b2c.en", {"main": {"temp": 21.5}})
        >>> record = await cache.get("0a1b2c.en")
        >>> stats = cache.getStats()
    """

    @abstractmethod
    async def get(self, key: K) -> Optional[V]:
        """
        Get cached value by key

        Args:
            key: The cache key to retrieve

        Returns:
            Optional[V]: The cached value if found, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, key: K, value: V) -> bool:
        """
        Store value in cache, overwriting any previous value for the key

        Args:
            key: The cache key to store the value under
            value: The value to cache

        Returns:
            bool: True if the value was successfully stored, False otherwise
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """
        Clear all cached data
        """
        pass

    @abstractmethod
    def getStats(self) -> Dict[str, Any]:
        """
        Get cache statistics

        Returns:
            Dict[str, Any]: Implementation-specific statistics
        """
        pass
