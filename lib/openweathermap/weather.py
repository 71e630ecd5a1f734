"""
OpenWeatherMap facade

Public entry point of the library: validates configuration once and exposes
named getters for weather fields plus cache clearing.
"""

import logging
import os
from typing import Any, Dict, Optional

import httpx

from .client import OpenWeatherMapClient
from .config import DEFAULT_CACHE_TIME, DEFAULT_LANGUAGE, DEFAULT_REQUEST_TIMEOUT, validateConfig
from .exceptions import InvalidConfigError
from .projector import FieldProjector, WeatherField
from .store import WeatherCacheStore

logger = logging.getLogger(__name__)


class OpenWeatherMap:
    """
    Cached OpenWeatherMap current weather by location name

    Example usage:
        weather = OpenWeatherMap(
            apiKey="0123456789abcdef0123456789abcdef",
            cacheDir="/var/cache/weather",
            language="de",
            cacheTime=1800,
        )

        print(await weather.getWeather("Berlin"))  # "Klarer Himmel"
        print(await weather.getTemperature("Berlin"))  # "21.5"
        html = f'<img src="{await weather.getIcon("Berlin")}">'

        weather.clearCache()
    """

    def __init__(
        self,
        apiKey: str,
        cacheDir: str | os.PathLike,
        language: str = DEFAULT_LANGUAGE,
        cacheTime: int = DEFAULT_CACHE_TIME,
        metric: bool = True,
        requestTimeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize OpenWeatherMap cache

        Args:
            apiKey: OpenWeatherMap API key (32 characters)
            cacheDir: Existing writable directory for cache files
            language: Language code for weather descriptions (default: "en")
            cacheTime: Max age of cached weather in seconds, 0 disables disk weather cache (default: 1 hour)
            metric: Use metric units if True, imperial otherwise
            requestTimeout: HTTP request timeout (seconds)
            transport: Optional custom httpx transport

        Raises:
            InvalidConfigError: If any parameter is invalid
        """
        self.config = validateConfig(
            apiKey=apiKey,
            cacheDir=cacheDir,
            language=language,
            cacheTime=cacheTime,
            metric=metric,
            requestTimeout=requestTimeout,
        )
        client = OpenWeatherMapClient(
            apiKey=self.config.apiKey,
            units=self.config.units,
            language=self.config.language,
            requestTimeout=self.config.requestTimeout,
            transport=transport,
        )
        self.store = WeatherCacheStore(self.config, client=client)
        self.projector = FieldProjector(self.store)

    @classmethod
    def fromConfig(
        cls, config: Dict[str, Any], transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "OpenWeatherMap":
        """
        Create instance from [openweathermap] configuration section

        Args:
            config: Dict with keys: api-key, cache-dir (required), language,
                cache-time, metric, request-timeout (optional)
            transport: Optional custom httpx transport

        Raises:
            InvalidConfigError: If required keys are missing or values are invalid
        """
        for requiredKey in ("api-key", "cache-dir"):
            if requiredKey not in config:
                raise InvalidConfigError(f"Missing required openweathermap option: {requiredKey}")

        return cls(
            apiKey=config["api-key"],
            cacheDir=config["cache-dir"],
            language=config.get("language", DEFAULT_LANGUAGE),
            cacheTime=config.get("cache-time", DEFAULT_CACHE_TIME),
            metric=config.get("metric", True),
            requestTimeout=config.get("request-timeout", DEFAULT_REQUEST_TIMEOUT),
            transport=transport,
        )

    async def getField(self, field: WeatherField | str, location: str) -> str:
        """Get any supported field for location, see FieldProjector.project()"""
        return await self.projector.project(field, location)

    async def getWeather(self, location: str) -> str:
        """Get weather description (e.g. "clear sky")"""
        return await self.projector.project(WeatherField.WEATHER, location)

    async def getFeelsLike(self, location: str) -> str:
        """Get "feels like" temperature"""
        return await self.projector.project(WeatherField.FEELS_LIKE, location)

    async def getTemperature(self, location: str) -> str:
        """Get current temperature"""
        return await self.projector.project(WeatherField.TEMPERATURE, location)

    async def getIcon(self, location: str) -> str:
        """Get weather icon as inline "data:image/png;base64, ..." string"""
        return await self.projector.project(WeatherField.ICON, location)

    def clearCache(self) -> None:
        """
        Delete all cached weather and icon files

        Already resolved locations are still served from memory by this instance.
        """
        self.store.clear()
