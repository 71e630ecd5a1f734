"""
Layered read-through weather cache

Resolution order for a location: in-memory memo, then on-disk cache
(TTL-gated), then remote fetch. A remote fetch is written back to disk
(if TTL > 0) and to the memo. Icons use a separate permanent disk cache.
"""

import logging
from typing import Optional

from lib.cache import DictCache, KeyGenerator, Md5KeyGenerator

from .client import OpenWeatherMapClient
from .config import WeatherCacheConfig
from .disk_cache import DiskWeatherCache
from .models import WeatherRecord

logger = logging.getLogger(__name__)


class WeatherCacheStore:
    """
    Read-through cache for weather payloads keyed by location name

    Owns the memo and the cache directory namespace. Not safe for concurrent
    use: two concurrent misses for one location both hit the API and the last
    disk write wins.

    Example usage:
        config = validateConfig(apiKey, "/var/cache/weather")
        store = WeatherCacheStore(config)

        record = await store.resolve("Berlin")  # API request, written to disk
        record = await store.resolve("Berlin")  # served from memory
    """

    def __init__(
        self,
        config: WeatherCacheConfig,
        client: Optional[OpenWeatherMapClient] = None,
        keyGenerator: Optional[KeyGenerator[str]] = None,
    ):
        """
        Initialize weather cache store

        Args:
            config: Validated configuration
            client: API client (default: OpenWeatherMapClient built from config)
            keyGenerator: Location key generator (default: Md5KeyGenerator)
        """
        self.config = config
        self.client = (
            client
            if client is not None
            else OpenWeatherMapClient(
                apiKey=config.apiKey,
                units=config.units,
                language=config.language,
                requestTimeout=config.requestTimeout,
            )
        )
        self.keyGenerator: KeyGenerator[str] = keyGenerator if keyGenerator is not None else Md5KeyGenerator()
        self.memo: DictCache[str, WeatherRecord] = DictCache()
        self.disk = DiskWeatherCache(config.cacheDir, language=config.language, ttl=config.cacheTime)

    async def resolve(self, location: str) -> WeatherRecord:
        """
        Get weather payload for location from the fastest available layer

        Args:
            location: Free-text location name, used verbatim

        Returns:
            Weather payload

        Raises:
            CorruptCacheError: If fresh cache file can not be parsed (no refetch fallback)
            UpstreamUnavailableError: If remote fetch is needed and fails
            CacheWriteError: If fetched payload can not be written to disk
        """
        key = self.keyGenerator.generateKey(location)
        # Memo uses same stem as the disk file, so it can't mix languages
        memoKey = f"{key}.{self.config.language}"

        cachedData = await self.memo.get(memoKey)
        if cachedData is not None:
            logger.debug(f"Memory cache hit for location: {location}")
            return cachedData

        data = self.disk.getWeather(key)
        if data is None:
            logger.debug(f"Cache miss for location {location}, requesting API")
            data = await self.client.fetchWeather(location)
            self.disk.setWeather(key, data)

        await self.memo.set(memoKey, data)
        return data

    async def getIconBytes(self, iconId: str) -> bytes:
        """
        Get icon image bytes, downloading it once if not cached yet

        Icons are never expired: an existing icon file is always reused.

        Raises:
            UpstreamUnavailableError: If icon download fails
            CacheWriteError: If icon can not be written to disk
            CorruptCacheError: If icon file can not be read
        """
        if not self.disk.hasIcon(iconId):
            logger.debug(f"Icon {iconId} not cached, downloading")
            self.disk.setIcon(iconId, await self.client.fetchIcon(iconId))

        return self.disk.getIcon(iconId)

    def clear(self) -> int:
        """
        Delete all weather and icon files from cache directory

        Memory memo is left untouched: records already resolved by this
        store are still served from memory.

        Returns:
            Number of deleted files
        """
        return self.disk.clear()
