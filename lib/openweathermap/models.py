"""
Data models for OpenWeatherMap cache

This module defines TypedDict classes for the current weather API response.
Only fields used by the cache are declared; the provider may return more
and those are passed through untouched.

https://openweathermap.org/current#fields_json
"""

from typing import Any, Dict, List, TypedDict


class WeatherCondition(TypedDict, total=False):
    """Weather condition entry"""

    # https://openweathermap.org/weather-conditions
    id: int  # Weather condition ID
    main: str  # Weather group (Rain, Snow, Clear, etc.)
    description: str  # Weather description (in requested language)
    icon: str  # Icon ID (e.g. "01d")


class MainWeather(TypedDict, total=False):
    """Main measurements"""

    temp: float  # Temperature (Celsius for metric, Fahrenheit for imperial)
    feels_like: float  # Feels like temperature
    temp_min: float
    temp_max: float
    pressure: int  # Atmospheric pressure (hPa)
    humidity: int  # Humidity percentage


class WeatherRecord(TypedDict, total=False):
    """Current weather response, as returned by the provider"""

    coord: Dict[str, float]
    weather: List[WeatherCondition]
    main: MainWeather
    name: str  # City name
    dt: int  # Unix timestamp
    cod: Any  # Response code (int or str, depends on endpoint)
