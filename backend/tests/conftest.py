"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules:
collaborator stubs, settings, and HTTP clients wired to the FastAPI apps.
"""

import os

import httpx
import pytest
import pytest_asyncio

os.environ["ENVIRONMENT"] = "test"
os.environ.pop("WEATHER_API_KEY", None)

from cep_weather.core.config import Settings
from cep_weather.core.tracing import get_tracer
from cep_weather.main import create_gateway_app, create_resolver_app
from cep_weather.providers.base import (
    CityLookupResult,
    DirectoryProvider,
    LookupOutcome,
    TemperatureLookupResult,
    WeatherProvider,
)

RESOLVER_URL = "http://resolver.test/cep"


class StubDirectoryProvider(DirectoryProvider):
    """Deterministic directory stub that records every CEP it is asked for."""

    def __init__(self, result: CityLookupResult):
        super().__init__("stub-directory")
        self.result = result
        self.calls: list[str] = []

    async def resolve_city(self, cep: str) -> CityLookupResult:
        self.calls.append(cep)
        return self.result


class StubWeatherProvider(WeatherProvider):
    """Deterministic weather stub that records every city it is asked for."""

    def __init__(self, result: TemperatureLookupResult):
        super().__init__("stub-weather")
        self.result = result
        self.calls: list[str] = []

    async def resolve_temperature(self, city_name: str) -> TemperatureLookupResult:
        self.calls.append(city_name)
        return self.result


@pytest.fixture()
def tracer():
    """No-op tracer for components under test"""
    return get_tracer("tests")


@pytest.fixture()
def test_settings():
    """Settings isolated from the developer's environment"""
    return Settings(
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
        RESOLVER_URL=RESOLVER_URL,
        WEATHER_API_KEY="test-weather-key",
        TRACING_ENABLED=False,
    )


@pytest.fixture()
def sao_paulo_directory():
    """Directory stub resolving every CEP to São Paulo"""
    return StubDirectoryProvider(CityLookupResult.found("São Paulo"))


@pytest.fixture()
def empty_locality_directory():
    """Directory stub behaving like ViaCEP for an unknown CEP"""
    return StubDirectoryProvider(
        CityLookupResult.failure(LookupOutcome.NOT_FOUND, "CEP not found in ViaCEP")
    )


@pytest.fixture()
def mild_weather():
    """Weather stub reporting 22.5°C"""
    return StubWeatherProvider(TemperatureLookupResult.found(22.5))


@pytest.fixture()
def resolver_app(test_settings, sao_paulo_directory, mild_weather):
    """Resolver application wired to the São Paulo / 22.5°C stubs"""
    return create_resolver_app(
        settings=test_settings,
        directory=sao_paulo_directory,
        weather=mild_weather,
    )


@pytest_asyncio.fixture
async def resolver_client(resolver_app):
    """HTTP client talking to the resolver application in-process"""
    transport = httpx.ASGITransport(app=resolver_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://resolver.test") as ac:
        yield ac


@pytest_asyncio.fixture
async def gateway_client(test_settings, resolver_app):
    """HTTP client talking to a gateway whose outbound calls reach the resolver app in-process"""
    outbound = httpx.AsyncClient(transport=httpx.ASGITransport(app=resolver_app))
    gateway_app = create_gateway_app(settings=test_settings, client=outbound)

    transport = httpx.ASGITransport(app=gateway_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://gateway.test") as ac:
        yield ac

    await outbound.aclose()
