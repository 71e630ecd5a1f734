"""
OpenWeatherMap Async Client

This module provides the OpenWeatherMapClient class which performs the
outbound requests of the weather cache: current weather by location name
and raw icon images. It holds no cache state and never retries.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from .config import DEFAULT_LANGUAGE, DEFAULT_REQUEST_TIMEOUT, UNITS_METRIC
from .exceptions import UpstreamUnavailableError
from .models import WeatherRecord

logger = logging.getLogger(__name__)


class OpenWeatherMapClient:
    """
    Async client for OpenWeatherMap current weather API and icon host

    Creates a new HTTP session for each request to support proper concurrent requests.

    Example usage:
        client = OpenWeatherMapClient(
            apiKey="0123456789abcdef0123456789abcdef",
            units="metric",
            language="en",
        )

        # Get weather payload
        record = await client.fetchWeather("Berlin")
        print(record["main"]["temp"])

        # Get icon image bytes
        png = await client.fetchIcon(record["weather"][0]["icon"])
    """

    WEATHER_API = "https://api.openweathermap.org/data/2.5/weather"
    ICON_URL = "https://openweathermap.org/img/w/{iconId}.png"

    def __init__(
        self,
        apiKey: str,
        units: str = UNITS_METRIC,
        language: str = DEFAULT_LANGUAGE,
        requestTimeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize OpenWeatherMap client

        Args:
            apiKey: OpenWeatherMap API key
            units: Unit system ("metric" or "imperial")
            language: Language for weather descriptions
            requestTimeout: HTTP request timeout (seconds)
            transport: Optional custom httpx transport (e.g. httpx.MockTransport)
        """
        self.apiKey = apiKey
        self.units = units
        self.language = language
        self.requestTimeout = requestTimeout
        self.transport = transport

    async def fetchWeather(self, location: str) -> WeatherRecord:
        """
        Get current weather by location name

        Uses: https://api.openweathermap.org/data/2.5/weather

        Args:
            location: Free-text location name (e.g. "Berlin", "London,GB"), sent verbatim

        Returns:
            Parsed weather payload, passed through as returned by the API

        Raises:
            UpstreamUnavailableError: If request failed or response is empty or not a JSON object
        """
        params = {
            "q": location,
            "APPID": self.apiKey,
            "units": self.units,
            "lang": self.language,
        }

        response = await self._makeRequest(self.WEATHER_API, params)
        if not response.content:
            logger.error(f"Empty weather response for: {location}")
            raise UpstreamUnavailableError(f"Cannot access api: empty response for {location}")

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to parse weather response for {location}: {e}")
            raise UpstreamUnavailableError(f"Cannot access api: invalid JSON for {location}", originalError=e)

        if not isinstance(data, dict):
            logger.error(f"Unexpected weather response type for {location}: {type(data).__name__}")
            raise UpstreamUnavailableError(f"Cannot access api: unexpected response for {location}")

        logger.debug(f"Got weather for {location}: {data}")
        return data  # type: ignore[return-value]

    async def fetchIcon(self, iconId: str) -> bytes:
        """
        Get weather icon image

        Uses: https://openweathermap.org/img/w/<iconId>.png

        Args:
            iconId: Icon ID from weather condition (e.g. "01d")

        Returns:
            Raw PNG bytes

        Raises:
            UpstreamUnavailableError: If request failed or response is empty
        """
        response = await self._makeRequest(self.ICON_URL.format(iconId=iconId))
        if not response.content:
            logger.error(f"Empty icon response for: {iconId}")
            raise UpstreamUnavailableError(f"Cannot access icon {iconId}: empty response")

        logger.debug(f"Got icon {iconId}: {len(response.content)} bytes")
        return response.content

    async def _makeRequest(self, url: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """
        Make HTTP GET request

        Creates a new session for each request to support proper concurrent requests.

        Args:
            url: Endpoint URL
            params: Optional query parameters (URL-encoded by httpx)

        Returns:
            Response with status code 200

        Raises:
            UpstreamUnavailableError: On network error, timeout or non-200 status
        """
        safeParams = {k: ("***" if k == "APPID" else v) for k, v in (params or {}).items()}
        logger.debug(f"Making request to {url} with params: {safeParams}")

        try:
            async with httpx.AsyncClient(timeout=self.requestTimeout, transport=self.transport) as session:
                response = await session.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {url}")
            raise UpstreamUnavailableError(f"Request timeout: {url}", originalError=e)
        except httpx.HTTPError as e:
            logger.error(f"Network error: {e}")
            raise UpstreamUnavailableError(f"Network error: {e}", originalError=e)

        if response.status_code == 200:
            logger.debug(f"API request successful: {response.status_code}")
            return response
        elif response.status_code == 401:
            logger.error("Invalid API key")
        elif response.status_code == 404:
            logger.warning(f"Not found: {url} {safeParams}")
        elif response.status_code == 429:
            logger.error("Rate limit exceeded")
        else:
            logger.error(f"API request failed: {response.status_code}")

        raise UpstreamUnavailableError(f"API request failed with status {response.status_code}: {url}")
