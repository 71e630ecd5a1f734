"""
Shared fixtures for OpenWeatherMap cache tests.

All fixtures follow camelCase naming convention.
"""

import tempfile
from typing import Any, Dict

import pytest

from lib.openweathermap.config import WeatherCacheConfig, validateConfig
from lib.openweathermap.test_helpers import TEST_API_KEY, FakeOpenWeatherMapApi


@pytest.fixture
def cacheDir():
    """Create a temporary cache directory."""
    with tempfile.TemporaryDirectory() as tmpDir:
        yield tmpDir


@pytest.fixture
def sampleWeatherResponse() -> Dict[str, Any]:
    """Sample current weather API response."""
    return {
        "coord": {"lon": 13.4105, "lat": 52.5244},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 21.5, "feels_like": 20.9, "pressure": 1015, "humidity": 48},
        "name": "Berlin",
        "cod": 200,
    }


@pytest.fixture
def fakeApi(sampleWeatherResponse) -> FakeOpenWeatherMapApi:
    """Fake API serving sampleWeatherResponse and a PNG icon."""
    return FakeOpenWeatherMapApi(sampleWeatherResponse)


@pytest.fixture
def weatherConfig(cacheDir) -> WeatherCacheConfig:
    """Validated config with default TTL (1 hour)."""
    return validateConfig(TEST_API_KEY, cacheDir)
