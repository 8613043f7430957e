"""
Tests for the WeatherAPI Provider

Outbound HTTP is served by httpx.MockTransport, so no network is used.
"""

import httpx
import pytest

from cep_weather.providers.base import LookupOutcome
from cep_weather.providers.weatherapi import WeatherApiProvider

BASE_URL = "http://weather.test/v1/current.json"


def weather_payload(temp_c):
    return {"location": {"name": "Sao Paulo"}, "current": {"temp_c": temp_c, "temp_f": 0}}


def make_provider(handler, tracer, api_key="secret-key"):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return WeatherApiProvider(client, BASE_URL, api_key, tracer), client


class TestWeatherApiProvider:
    """Test suite for WeatherApiProvider.resolve_temperature"""

    @pytest.mark.asyncio
    async def test_resolves_current_temperature(self, tracer):
        """Test: current.temp_c becomes the reading"""
        provider, client = make_provider(lambda request: httpx.Response(200, json=weather_payload(22.5)), tracer)
        async with client:
            result = await provider.resolve_temperature("São Paulo")

        assert result.outcome is LookupOutcome.FOUND
        assert result.reading.temperature_celsius == 22.5

    @pytest.mark.asyncio
    async def test_integer_temperature_is_accepted(self, tracer):
        """Test: whole-degree readings come back as floats"""
        provider, client = make_provider(lambda request: httpx.Response(200, json=weather_payload(-3)), tracer)
        async with client:
            result = await provider.resolve_temperature("Urupema")

        assert result.outcome is LookupOutcome.FOUND
        assert result.reading.temperature_celsius == -3.0

    @pytest.mark.asyncio
    async def test_query_is_url_encoded(self, tracer):
        """Test: key, encoded city and aqi=no are sent as query parameters"""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=weather_payload(20.0))

        provider, client = make_provider(handler, tracer)
        async with client:
            await provider.resolve_temperature("São Paulo")

        assert len(requests) == 1
        url = requests[0].url
        assert url.params["key"] == "secret-key"
        assert url.params["q"] == "São Paulo"
        assert url.params["aqi"] == "no"
        raw_query = url.query.decode("ascii")
        assert "S%C3%A3o" in raw_query
        assert " " not in raw_query

    @pytest.mark.asyncio
    @pytest.mark.parametrize("api_key", [None, ""])
    async def test_missing_credential_fails_before_network(self, tracer, api_key):
        """Test: no key means CONFIG_MISSING and zero outbound requests"""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=weather_payload(20.0))

        provider, client = make_provider(handler, tracer, api_key=api_key)
        async with client:
            result = await provider.resolve_temperature("São Paulo")

        assert result.outcome is LookupOutcome.CONFIG_MISSING
        assert requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 401, 403, 500])
    async def test_non_success_status_is_upstream_error(self, tracer, status_code):
        """Test: WeatherAPI errors (bad key, unknown city, outage) fail the lookup"""
        provider, client = make_provider(
            lambda request: httpx.Response(
                status_code, json={"error": {"code": 1006, "message": "No matching location found."}}
            ),
            tracer
        )
        async with client:
            result = await provider.resolve_temperature("Nowhere")

        assert result.outcome is LookupOutcome.UPSTREAM_ERROR

    @pytest.mark.asyncio
    async def test_network_error_is_upstream_error(self, tracer):
        """Test: timeouts are reported, not raised"""
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        provider, client = make_provider(handler, tracer)
        async with client:
            result = await provider.resolve_temperature("São Paulo")

        assert result.outcome is LookupOutcome.UPSTREAM_ERROR
        assert "ReadTimeout" in result.detail

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [
        b"not json",
        b"[]",
        b"{}",
        b'{"current": {}}',
        b'{"current": {"temp_c": "22.5"}}',
        b'{"current": {"temp_c": true}}',
        b'{"current": null}',
        b'{"current": {"temp_c": 1e400}}',
        b'{"current": {"temp_c": NaN}}',
        b'{"current": {"temp_c": -Infinity}}',
        b'{"current": {"temp_c": ' + b"9" * 400 + b'}}',
    ])
    async def test_malformed_payload_is_upstream_error(self, tracer, content):
        """Test: bodies without a finite numeric current.temp_c fail the lookup"""
        provider, client = make_provider(lambda request: httpx.Response(200, content=content), tracer)
        async with client:
            result = await provider.resolve_temperature("São Paulo")

        assert result.outcome is LookupOutcome.UPSTREAM_ERROR

    def test_build_params(self, tracer):
        """Test: query parameters sent to WeatherAPI"""
        provider = WeatherApiProvider(httpx.AsyncClient(), BASE_URL, "secret-key", tracer)
        assert provider.build_params("Recife") == {"key": "secret-key", "q": "Recife", "aqi": "no"}
        assert provider.get_provider_name() == "weatherapi"
