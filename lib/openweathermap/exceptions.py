"""
OpenWeatherMap cache exceptions

This module defines the exception hierarchy for the weather cache.
All errors inherit from WeatherCacheError base class. None of them is
retried internally: each one is terminal for the call that raised it.
"""


class WeatherCacheError(Exception):
    """
    Base exception for all weather cache errors.

    Catch this to handle any weather cache error generically.

    Args:
        message: Description of the error
        originalError: The original exception that caused this error (optional)
    """

    def __init__(self, message: str, originalError: Exception | None = None):
        super().__init__(message)
        self.originalError = originalError


class InvalidConfigError(WeatherCacheError):
    """
    Exception raised when construction-time configuration is invalid.

    Raised when:
    - API key is not exactly 32 characters long
    - Cache directory does not exist or is not writable
    - Cache time is negative or not an integer
    - Language is not supported by the provider
    - Configuration file is missing or malformed
    """

    pass


class UpstreamUnavailableError(WeatherCacheError):
    """
    Exception raised when a remote fetch fails.

    Covers transport errors, timeouts, non-200 responses, empty bodies
    and bodies which can not be parsed.
    """

    pass


class CorruptCacheError(WeatherCacheError):
    """
    Exception raised when a cache file exists but can not be read or parsed.

    There is no automatic fallback to a remote fetch: the broken file has to
    be removed (e.g. with clearCache()).
    """

    pass


class CacheWriteError(WeatherCacheError):
    """
    Exception raised when a cache file can not be written.

    Configuration validation guarantees a writable cache directory, so this
    means the environment changed after construction.
    """

    pass


class MalformedUpstreamDataError(WeatherCacheError):
    """
    Exception raised when a weather record lacks a requested field.

    Args:
        message: Description of the error
        path: Path of the missing field (e.g. "weather[0].description")
    """

    def __init__(self, message: str, path: str = "", originalError: Exception | None = None):
        super().__init__(message, originalError=originalError)
        self.path = path


class UnknownFieldError(WeatherCacheError):
    """
    Exception raised when an unsupported field projection is requested.
    """

    pass
