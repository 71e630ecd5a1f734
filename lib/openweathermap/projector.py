"""
Field projection from weather payloads

Maps a closed set of logical fields onto paths inside the weather payload.
The icon field additionally goes through the icon cache and is returned as
inline base64 image data.
"""

import base64
import logging
import re
from enum import StrEnum
from typing import Any, Sequence

from .exceptions import MalformedUpstreamDataError, UnknownFieldError
from .models import WeatherRecord
from .store import WeatherCacheStore

logger = logging.getLogger(__name__)

ICON_DATA_PREFIX = "data:image/png;base64, "
ICON_ID_RE = re.compile(r"[0-9A-Za-z_-]+")


class WeatherField(StrEnum):
    """Fields which can be projected from weather payload"""

    WEATHER = "weather"
    FEELS_LIKE = "feels_like"
    TEMPERATURE = "temperature"
    ICON = "icon"


DESCRIPTION_PATH = ("weather", 0, "description")
ICON_ID_PATH = ("weather", 0, "icon")
FEELS_LIKE_PATH = ("main", "feels_like")
TEMPERATURE_PATH = ("main", "temp")


def formatPath(path: Sequence[str | int]) -> str:
    """Format path as `weather[0].description`"""
    ret = ""
    for part in path:
        if isinstance(part, int):
            ret += f"[{part}]"
        else:
            ret += f".{part}" if ret else part
    return ret


def extractPath(record: WeatherRecord, path: Sequence[str | int]) -> Any:
    """
    Get nested value from weather payload

    Args:
        record: Weather payload
        path: Sequence of dict keys (str) and list indices (int)

    Returns:
        Value found at path

    Raises:
        MalformedUpstreamDataError: If any part of the path is missing, has unexpected type or the value is null
    """
    value: Any = record
    for part in path:
        if isinstance(part, int):
            isPresent = isinstance(value, list) and -len(value) <= part < len(value)
        else:
            isPresent = isinstance(value, dict) and part in value

        if not isPresent:
            pathStr = formatPath(path)
            logger.error(f"Field {pathStr} is missing in weather data")
            raise MalformedUpstreamDataError(f"Field {pathStr} is missing in weather data", path=pathStr)
        value = value[part]

    if value is None:
        pathStr = formatPath(path)
        logger.error(f"Field {pathStr} is null in weather data")
        raise MalformedUpstreamDataError(f"Field {pathStr} is null in weather data", path=pathStr)

    return value


class FieldProjector:
    """
    Resolves weather payload for location and extracts one field from it

    Example usage:
        projector = FieldProjector(store)
        description = await projector.project(WeatherField.WEATHER, "Berlin")  # "clear sky"
        temp = await projector.project("temperature", "Berlin")  # "21.5"
    """

    def __init__(self, store: WeatherCacheStore):
        self.store = store

    async def project(self, field: WeatherField | str, location: str) -> str:
        """
        Get requested field for location as string

        Args:
            field: WeatherField or its string value
            location: Free-text location name

        Returns:
            Field value. Numbers are converted with str(), icon is returned
            as "data:image/png;base64, <data>" string

        Raises:
            UnknownFieldError: If field is not a WeatherField (checked before any lookup)
            MalformedUpstreamDataError: If payload lacks the field
            CorruptCacheError, UpstreamUnavailableError, CacheWriteError: From cache layers
        """
        try:
            weatherField = WeatherField(field)
        except ValueError:
            logger.error(f"Unknown field requested: {field}")
            raise UnknownFieldError(f"Unknown data requested: {field}")

        record = await self.store.resolve(location)

        match weatherField:
            case WeatherField.WEATHER:
                return str(extractPath(record, DESCRIPTION_PATH))
            case WeatherField.FEELS_LIKE:
                return str(extractPath(record, FEELS_LIKE_PATH))
            case WeatherField.TEMPERATURE:
                return str(extractPath(record, TEMPERATURE_PATH))
            case WeatherField.ICON:
                iconId = str(extractPath(record, ICON_ID_PATH))
                if not ICON_ID_RE.fullmatch(iconId):
                    logger.error(f"Invalid icon id in weather data: {iconId!r}")
                    raise MalformedUpstreamDataError(f"Invalid icon id: {iconId!r}", path=formatPath(ICON_ID_PATH))
                iconBytes = await self.store.getIconBytes(iconId)
                return ICON_DATA_PREFIX + base64.b64encode(iconBytes).decode("ascii")
