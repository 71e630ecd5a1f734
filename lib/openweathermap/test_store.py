"""
Tests for WeatherCacheStore layering: memory, disk, API
"""

import os
import time
from unittest.mock import AsyncMock, Mock

import pytest

from lib.cache import Md5KeyGenerator
from lib.openweathermap.client import OpenWeatherMapClient
from lib.openweathermap.config import validateConfig
from lib.openweathermap.exceptions import CorruptCacheError, UpstreamUnavailableError
from lib.openweathermap.store import WeatherCacheStore
from lib.openweathermap.test_helpers import TEST_API_KEY, TEST_PNG_BYTES, listCacheFiles


@pytest.fixture
def mockClient(sampleWeatherResponse):
    """Mock API client returning sample payload"""
    client = Mock(spec=OpenWeatherMapClient)
    client.fetchWeather = AsyncMock(return_value=sampleWeatherResponse)
    client.fetchIcon = AsyncMock(return_value=TEST_PNG_BYTES)
    return client


def weatherFile(store: WeatherCacheStore, location: str):
    return store.disk.weatherPath(Md5KeyGenerator().generateKey(location))


def makeStale(store: WeatherCacheStore, location: str, age: int) -> None:
    past = time.time() - age
    os.utime(weatherFile(store, location), (past, past))


class TestResolve:
    """Test resolve() lookup order"""

    @pytest.mark.asyncio
    async def test_miss_fetches_and_writes_disk(self, weatherConfig, mockClient, sampleWeatherResponse):
        store = WeatherCacheStore(weatherConfig, client=mockClient)

        result = await store.resolve("Berlin")

        assert result == sampleWeatherResponse
        mockClient.fetchWeather.assert_awaited_once_with("Berlin")
        assert weatherFile(store, "Berlin").is_file()

    @pytest.mark.asyncio
    async def test_memory_hit(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)

        first = await store.resolve("Berlin")
        second = await store.resolve("Berlin")

        assert first == second
        assert mockClient.fetchWeather.await_count == 1
        assert store.memo.getStats()["hits"] == 1

    @pytest.mark.asyncio
    async def test_memory_hit_does_not_touch_disk(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)
        await store.resolve("Berlin")
        weatherFile(store, "Berlin").write_text("{broken", encoding="utf-8")

        await store.resolve("Berlin")

        assert mockClient.fetchWeather.await_count == 1

    @pytest.mark.asyncio
    async def test_memory_hit_after_ttl_expired(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)
        await store.resolve("Berlin")
        makeStale(store, "Berlin", 7200)

        await store.resolve("Berlin")

        assert mockClient.fetchWeather.await_count == 1

    @pytest.mark.asyncio
    async def test_location_used_verbatim(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)

        await store.resolve("Berlin")
        await store.resolve("berlin")
        await store.resolve("Berlin ")

        assert mockClient.fetchWeather.await_count == 3
        assert len(listCacheFiles(weatherConfig.cacheDir, "*.json")) == 3

    @pytest.mark.asyncio
    async def test_fresh_disk_entry_used_by_new_store(self, weatherConfig, mockClient, sampleWeatherResponse):
        await WeatherCacheStore(weatherConfig, client=mockClient).resolve("Berlin")

        otherClient = Mock(spec=OpenWeatherMapClient)
        otherClient.fetchWeather = AsyncMock()
        result = await WeatherCacheStore(weatherConfig, client=otherClient).resolve("Berlin")

        assert result == sampleWeatherResponse
        otherClient.fetchWeather.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stale_disk_entry_refetched(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)
        await store.resolve("Berlin")
        makeStale(store, "Berlin", 3600)

        newStore = WeatherCacheStore(weatherConfig, client=mockClient)
        await newStore.resolve("Berlin")

        assert mockClient.fetchWeather.await_count == 2
        # File was rewritten, so it is fresh again
        assert newStore.disk.getWeather(Md5KeyGenerator().generateKey("Berlin")) is not None

    @pytest.mark.asyncio
    async def test_almost_stale_disk_entry_reused(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)
        await store.resolve("Berlin")
        makeStale(store, "Berlin", 3500)

        await WeatherCacheStore(weatherConfig, client=mockClient).resolve("Berlin")

        assert mockClient.fetchWeather.await_count == 1

    @pytest.mark.asyncio
    async def test_zero_ttl_skips_disk(self, cacheDir, mockClient):
        config = validateConfig(TEST_API_KEY, cacheDir, cacheTime=0)

        await WeatherCacheStore(config, client=mockClient).resolve("Paris")
        await WeatherCacheStore(config, client=mockClient).resolve("Paris")

        assert mockClient.fetchWeather.await_count == 2
        assert listCacheFiles(cacheDir) == []

    @pytest.mark.asyncio
    async def test_zero_ttl_still_uses_memory(self, cacheDir, mockClient):
        config = validateConfig(TEST_API_KEY, cacheDir, cacheTime=0)
        store = WeatherCacheStore(config, client=mockClient)

        await store.resolve("Paris")
        await store.resolve("Paris")

        assert mockClient.fetchWeather.await_count == 1

    @pytest.mark.asyncio
    async def test_corrupt_fresh_file_is_fatal(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)
        weatherFile(store, "Berlin").write_text("this is not json", encoding="utf-8")

        with pytest.raises(CorruptCacheError):
            await store.resolve("Berlin")

        mockClient.fetchWeather.assert_not_awaited()
        assert await store.memo.get(f"{Md5KeyGenerator().generateKey('Berlin')}.en") is None

    @pytest.mark.asyncio
    async def test_upstream_failure_caches_nothing(self, weatherConfig, mockClient):
        mockClient.fetchWeather.side_effect = UpstreamUnavailableError("down")
        store = WeatherCacheStore(weatherConfig, client=mockClient)

        with pytest.raises(UpstreamUnavailableError):
            await store.resolve("Berlin")

        assert listCacheFiles(weatherConfig.cacheDir) == []
        assert store.memo.getStats()["entries"] == 0

    @pytest.mark.asyncio
    async def test_languages_use_separate_files(self, cacheDir, mockClient):
        enStore = WeatherCacheStore(validateConfig(TEST_API_KEY, cacheDir, language="en"), client=mockClient)
        deStore = WeatherCacheStore(validateConfig(TEST_API_KEY, cacheDir, language="de"), client=mockClient)

        await enStore.resolve("Berlin")
        await deStore.resolve("Berlin")

        key = Md5KeyGenerator().generateKey("Berlin")
        assert listCacheFiles(cacheDir) == sorted([f"{key}.de.json", f"{key}.en.json"])
        assert mockClient.fetchWeather.await_count == 2

    @pytest.mark.asyncio
    async def test_custom_key_generator(self, weatherConfig, mockClient):
        keyGenerator = Mock()
        keyGenerator.generateKey.return_value = "custom"
        store = WeatherCacheStore(weatherConfig, client=mockClient, keyGenerator=keyGenerator)

        await store.resolve("Berlin")

        assert listCacheFiles(weatherConfig.cacheDir) == ["custom.en.json"]

    def test_default_client_from_config(self, cacheDir):
        config = validateConfig(TEST_API_KEY, cacheDir, language="fr", metric=False, requestTimeout=5)

        store = WeatherCacheStore(config)

        assert isinstance(store.client, OpenWeatherMapClient)
        assert store.client.apiKey == TEST_API_KEY
        assert store.client.language == "fr"
        assert store.client.units == "imperial"
        assert store.client.requestTimeout == 5


class TestIcons:
    """Test getIconBytes()"""

    @pytest.mark.asyncio
    async def test_icon_downloaded_once(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)

        first = await store.getIconBytes("01d")
        second = await store.getIconBytes("01d")

        assert first == second == TEST_PNG_BYTES
        mockClient.fetchIcon.assert_awaited_once_with("01d")
        assert listCacheFiles(weatherConfig.cacheDir) == ["01d.png"]

    @pytest.mark.asyncio
    async def test_existing_icon_file_reused(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)
        store.disk.iconPath("04n").write_bytes(b"old icon")

        assert await store.getIconBytes("04n") == b"old icon"
        mockClient.fetchIcon.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_icon_download_failure(self, weatherConfig, mockClient):
        mockClient.fetchIcon.side_effect = UpstreamUnavailableError("down")
        store = WeatherCacheStore(weatherConfig, client=mockClient)

        with pytest.raises(UpstreamUnavailableError):
            await store.getIconBytes("01d")

        assert listCacheFiles(weatherConfig.cacheDir) == []


class TestClear:
    @pytest.mark.asyncio
    async def test_clear_keeps_memory(self, weatherConfig, mockClient):
        store = WeatherCacheStore(weatherConfig, client=mockClient)
        await store.resolve("Berlin")
        await store.getIconBytes("01d")

        assert store.clear() == 2
        assert listCacheFiles(weatherConfig.cacheDir) == []

        await store.resolve("Berlin")
        assert mockClient.fetchWeather.await_count == 1
