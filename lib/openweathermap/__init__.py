"""
OpenWeatherMap Cached Client Library

This module provides an async read-through cache for OpenWeatherMap current
weather data keyed by free-text location name. Lookups go through an
in-memory memo, a TTL-gated on-disk JSON cache and finally the API.
Weather icons are cached on disk permanently and returned as inline base64.

Example usage:
    from lib.openweathermap import OpenWeatherMap

    weather = OpenWeatherMap(
        apiKey="your_32_characters_api_key_here_",
        cacheDir="/var/cache/weather",
        language="en",
        cacheTime=3600,  # 1 hour
        metric=True,
    )

    print(await weather.getWeather("Berlin"))  # "clear sky"
    print(await weather.getTemperature("Berlin"))  # "21.5" (memory hit, no API call)
    print(await weather.getIcon("Berlin"))  # "data:image/png;base64, iVBORw0..."

    # Or build from config.toml [openweathermap] section:
    # from internal.config.manager import ConfigManager
    # weather = OpenWeatherMap.fromConfig(ConfigManager("config.toml").getOpenWeatherMapConfig())
"""

from .client import OpenWeatherMapClient
from .config import SUPPORTED_LANGUAGES, WeatherCacheConfig, validateConfig
from .disk_cache import DiskWeatherCache
from .exceptions import (
    CacheWriteError,
    CorruptCacheError,
    InvalidConfigError,
    MalformedUpstreamDataError,
    UnknownFieldError,
    UpstreamUnavailableError,
    WeatherCacheError,
)
from .models import MainWeather, WeatherCondition, WeatherRecord
from .projector import FieldProjector, WeatherField
from .store import WeatherCacheStore
from .weather import OpenWeatherMap

__all__ = [
    # Models
    "WeatherCondition",
    "MainWeather",
    "WeatherRecord",
    # Config
    "SUPPORTED_LANGUAGES",
    "WeatherCacheConfig",
    "validateConfig",
    # Exceptions
    "WeatherCacheError",
    "InvalidConfigError",
    "UpstreamUnavailableError",
    "CorruptCacheError",
    "CacheWriteError",
    "MalformedUpstreamDataError",
    "UnknownFieldError",
    # Components
    "OpenWeatherMapClient",
    "DiskWeatherCache",
    "WeatherCacheStore",
    "WeatherField",
    "FieldProjector",
    "OpenWeatherMap",
]
