"""
Filesystem cache for weather payloads and icon images

Layout inside the cache directory (flat, no subdirectories):
    <key>.<language>.json  - pretty-printed weather payload, valid while younger than TTL
    <iconId>.png           - raw icon image, never expires

File modification time is the only freshness marker, nothing is stored
inside the payload itself.
"""

import logging
from pathlib import Path
from typing import Optional

import lib.utils as utils
from lib.cache import JsonValueConverter

from .exceptions import CacheWriteError, CorruptCacheError
from .models import WeatherRecord

logger = logging.getLogger(__name__)

CACHE_FILE_PATTERNS = ("*.json", "*.png")


class DiskWeatherCache:
    """
    TTL-gated JSON cache and permanent icon cache in one directory

    Args:
        cacheDir: Existing writable directory
        language: Language code, part of weather cache file names
        ttl: Max age of weather files in seconds, 0 disables weather files

    Example:
        >>> disk = DiskWeatherCache("/var/cache/weather/", language="en", ttl=3600)
        >>> disk.setWeather(key, record)
        >>> disk.getWeather(key)  # record while file is younger than 1 hour
    """

    def __init__(self, cacheDir: str, language: str, ttl: int):
        self.cacheDir = Path(cacheDir)
        self.language = language
        self.ttl = ttl
        self._converter: JsonValueConverter[WeatherRecord] = JsonValueConverter(indent=4)

    def weatherPath(self, key: str) -> Path:
        """Get weather cache file path for given cache key"""
        return self.cacheDir / f"{key}.{self.language}.json"

    def iconPath(self, iconId: str) -> Path:
        """Get icon file path for given icon ID"""
        return self.cacheDir / f"{iconId}.png"

    def getWeather(self, key: str) -> Optional[WeatherRecord]:
        """
        Get cached weather payload if present and fresh

        Args:
            key: Cache key (location hash)

        Returns:
            Weather payload, or None if caching is disabled, file is missing or stale

        Raises:
            CorruptCacheError: If file is fresh but can not be read or parsed
        """
        if self.ttl == 0:
            return None

        filePath = self.weatherPath(key)
        if not filePath.is_file():
            logger.debug(f"Disk cache miss for weather key: {key}")
            return None

        try:
            age = utils.getFileAgeInSecs(filePath)
        except FileNotFoundError:
            # File was deleted between exists check and stat
            return None

        if age >= self.ttl:
            logger.debug(f"Disk cache entry is stale for weather key: {key} (age: {age:.0f}s)")
            return None

        try:
            data = self._converter.decode(filePath.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read weather cache file {filePath}: {e}")
            raise CorruptCacheError(f"Cache file {filePath} can not be parsed: {e}", originalError=e)

        if not isinstance(data, dict):
            logger.error(f"Weather cache file {filePath} does not contain JSON object")
            raise CorruptCacheError(f"Cache file {filePath} does not contain JSON object")

        logger.debug(f"Disk cache hit for weather key: {key}")
        return data  # type: ignore[return-value]

    def setWeather(self, key: str, data: WeatherRecord) -> None:
        """
        Store weather payload, overwriting previous file. No-op if TTL is 0.

        Raises:
            CacheWriteError: If cache directory is missing or file can not be written
        """
        if self.ttl == 0:
            return

        filePath = self.weatherPath(key)
        self._write(filePath, self._converter.encode(data).encode("utf-8"))
        logger.debug(f"Stored weather data to {filePath}")

    def hasIcon(self, iconId: str) -> bool:
        """Check if icon is already cached"""
        return self.iconPath(iconId).is_file()

    def getIcon(self, iconId: str) -> bytes:
        """
        Read cached icon bytes

        Raises:
            CorruptCacheError: If icon file can not be read
        """
        filePath = self.iconPath(iconId)
        try:
            return filePath.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read icon file {filePath}: {e}")
            raise CorruptCacheError(f"Icon file {filePath} can not be read: {e}", originalError=e)

    def setIcon(self, iconId: str, data: bytes) -> None:
        """
        Store icon bytes

        Raises:
            CacheWriteError: If cache directory is missing or file can not be written
        """
        filePath = self.iconPath(iconId)
        self._write(filePath, data)
        logger.debug(f"Stored icon {iconId} to {filePath}")

    def clear(self) -> int:
        """
        Delete all weather and icon files from cache directory

        Returns:
            Number of deleted files
        """
        deleted = 0
        for pattern in CACHE_FILE_PATTERNS:
            for filePath in self.cacheDir.glob(pattern):
                if not filePath.is_file():
                    continue
                try:
                    filePath.unlink()
                    deleted += 1
                except FileNotFoundError:
                    # File was deleted between glob and unlink
                    pass

        logger.info(f"Cleared {deleted} cache files from {self.cacheDir}")
        return deleted

    def _write(self, filePath: Path, data: bytes) -> None:
        if not self.cacheDir.is_dir():
            logger.error(f"Cache directory {self.cacheDir} does not exist")
            raise CacheWriteError(f"Folder {self.cacheDir} not exists")

        try:
            filePath.write_bytes(data)
        except OSError as e:
            logger.error(f"Failed to write cache file {filePath}: {e}")
            raise CacheWriteError(f"Failed to write cache file {filePath}: {e}", originalError=e)
