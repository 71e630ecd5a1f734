"""
Configuration validation for OpenWeatherMap cache

Validates and normalizes construction-time parameters once. The resulting
WeatherCacheConfig is immutable, so language and unit system can not change
during the lifetime of a cache instance.
"""

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet

from .exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

API_KEY_LENGTH = 32
DEFAULT_LANGUAGE = "en"
DEFAULT_CACHE_TIME = 3600  # 1 hour
DEFAULT_REQUEST_TIMEOUT = 10

UNITS_METRIC = "metric"
UNITS_IMPERIAL = "imperial"

# https://openweathermap.org/current#multi
SUPPORTED_LANGUAGES: FrozenSet[str] = frozenset(
    [
        "af", "al", "ar", "az", "bg", "ca", "cz", "da", "de", "el",
        "en", "eu", "fa", "fi", "fr", "gl", "he", "hi", "hr", "hu",
        "id", "it", "ja", "kr", "la", "lt", "mk", "no", "nl", "pl",
        "pt", "pt_br", "ro", "ru", "sv", "se", "sk", "sl", "sp", "es",
        "sr", "th", "tr", "ua", "uk", "vi", "zh_cn", "zh_tw", "zu",
    ]
)  # fmt: skip


@dataclass(frozen=True)
class WeatherCacheConfig:
    """
    Validated weather cache configuration.

    Attributes:
        apiKey: OpenWeatherMap API key (32 characters)
        cacheDir: Existing writable directory, always ends with path separator
        language: Language code for weather descriptions
        cacheTime: Max age of on-disk weather data in seconds, 0 disables disk weather cache
        units: Unit system, "metric" or "imperial"
        requestTimeout: HTTP request timeout in seconds
    """

    apiKey: str
    cacheDir: str
    language: str = DEFAULT_LANGUAGE
    cacheTime: int = DEFAULT_CACHE_TIME
    units: str = UNITS_METRIC
    requestTimeout: float = DEFAULT_REQUEST_TIMEOUT

    def __repr__(self) -> str:
        # Keep API key out of logs and tracebacks
        return (
            f"WeatherCacheConfig(apiKey='***', cacheDir={self.cacheDir!r}, language={self.language!r}, "
            f"cacheTime={self.cacheTime}, units={self.units!r}, requestTimeout={self.requestTimeout})"
        )


def normalizeCacheDir(cacheDir: str | os.PathLike) -> str:
    """Return cache directory path which always ends with path separator"""
    path = os.fspath(cacheDir)
    if not path.endswith(os.sep):
        path += os.sep
    return path


def validateConfig(
    apiKey: str,
    cacheDir: str | os.PathLike,
    language: str = DEFAULT_LANGUAGE,
    cacheTime: int = DEFAULT_CACHE_TIME,
    metric: bool = True,
    requestTimeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> WeatherCacheConfig:
    """
    Validate and normalize weather cache parameters

    Args:
        apiKey: OpenWeatherMap API key, must be exactly 32 characters
        cacheDir: Directory for cache files, must exist and be writable
        language: Language code, must be one of SUPPORTED_LANGUAGES
        cacheTime: Cache TTL in seconds, must be >= 0 (0 means always refetch)
        metric: Use metric units if True, imperial otherwise (must be bool)
        requestTimeout: HTTP request timeout in seconds, must be > 0

    Returns:
        WeatherCacheConfig with normalized values

    Raises:
        InvalidConfigError: If any parameter is invalid
    """
    if not isinstance(apiKey, str) or len(apiKey) != API_KEY_LENGTH:
        raise InvalidConfigError("Invalid key")

    cacheDirPath = normalizeCacheDir(cacheDir)
    if not os.path.isdir(cacheDirPath) or not os.access(cacheDirPath, os.W_OK):
        raise InvalidConfigError(
            f"Cache Location is required to set, exists and be writable. Given location: {cacheDirPath}"
        )

    # bool is a subclass of int, but True is not a meaningful TTL
    if isinstance(cacheTime, bool) or not isinstance(cacheTime, int):
        raise InvalidConfigError(f"Cache Time must be an integer, got {type(cacheTime).__name__}")
    if cacheTime < 0:
        raise InvalidConfigError("Cache Time must be higher than 0. Use 0 for deactivate caching")

    if language not in SUPPORTED_LANGUAGES:
        raise InvalidConfigError(f"Language {language} is not supported.")

    if isinstance(requestTimeout, bool) or not isinstance(requestTimeout, (int, float)) or requestTimeout <= 0:
        raise InvalidConfigError(f"Request timeout must be a positive number, got {requestTimeout!r}")

    if not isinstance(metric, bool):
        raise InvalidConfigError(f"Metric flag must be a boolean, got {metric!r}")

    config = WeatherCacheConfig(
        apiKey=apiKey,
        cacheDir=cacheDirPath,
        language=language,
        cacheTime=cacheTime,
        units=UNITS_METRIC if metric else UNITS_IMPERIAL,
        requestTimeout=requestTimeout,
    )
    logger.debug(f"Weather cache configured: {config}")
    return config
