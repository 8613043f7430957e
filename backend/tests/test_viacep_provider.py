"""
Tests for the ViaCEP Directory Provider

Outbound HTTP is served by httpx.MockTransport, so no network is used.
"""

import httpx
import pytest

from cep_weather.providers.base import LookupOutcome
from cep_weather.providers.viacep import ViaCepDirectoryProvider

BASE_URL = "https://viacep.test/ws"


def make_provider(handler, tracer):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ViaCepDirectoryProvider(client, BASE_URL, tracer), client


class TestViaCepDirectoryProvider:
    """Test suite for ViaCepDirectoryProvider.resolve_city"""

    @pytest.mark.asyncio
    async def test_resolves_locality(self, tracer):
        """Test: localidade becomes the city name"""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"cep": "01310-100", "localidade": "São Paulo", "uf": "SP"})

        provider, client = make_provider(handler, tracer)
        async with client:
            result = await provider.resolve_city("01310100")

        assert result.outcome is LookupOutcome.FOUND
        assert result.city.city_name == "São Paulo"
        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert str(requests[0].url) == "https://viacep.test/ws/01310100/json/"

    @pytest.mark.asyncio
    async def test_unknown_cep_is_not_found(self, tracer):
        """Test: ViaCEP's {"erro": true} answer is NOT_FOUND"""
        provider, client = make_provider(lambda request: httpx.Response(200, json={"erro": True}), tracer)
        async with client:
            result = await provider.resolve_city("00000000")

        assert result.outcome is LookupOutcome.NOT_FOUND
        assert result.city is None

    @pytest.mark.asyncio
    async def test_empty_locality_is_not_found(self, tracer):
        """Test: an empty localidade is never a valid city"""
        provider, client = make_provider(lambda request: httpx.Response(200, json={"localidade": ""}), tracer)
        async with client:
            result = await provider.resolve_city("00000000")

        assert result.outcome is LookupOutcome.NOT_FOUND

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_non_success_status_is_upstream_error(self, tracer, status_code):
        """Test: any non-2xx status fails the lookup"""
        provider, client = make_provider(
            lambda request: httpx.Response(status_code, text="<html>Bad Request</html>"), tracer
        )
        async with client:
            result = await provider.resolve_city("01310100")

        assert result.outcome is LookupOutcome.UPSTREAM_ERROR
        assert str(status_code) in result.detail

    @pytest.mark.asyncio
    async def test_network_error_is_upstream_error(self, tracer):
        """Test: transport failures are reported, not raised"""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider, client = make_provider(handler, tracer)
        async with client:
            result = await provider.resolve_city("01310100")

        assert result.outcome is LookupOutcome.UPSTREAM_ERROR
        assert "ConnectError" in result.detail

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [b"not json", b"[]", b'"text"'])
    async def test_unexpected_payload_is_upstream_error(self, tracer, content):
        """Test: bodies that are not a JSON object fail the lookup"""
        provider, client = make_provider(lambda request: httpx.Response(200, content=content), tracer)
        async with client:
            result = await provider.resolve_city("01310100")

        assert result.outcome is LookupOutcome.UPSTREAM_ERROR

    def test_base_url_trailing_slash(self, tracer):
        """Test: a trailing slash in the base URL does not double up"""
        provider = ViaCepDirectoryProvider(httpx.AsyncClient(), "https://viacep.com.br/ws/", tracer)
        assert provider.build_url("01310100") == "https://viacep.com.br/ws/01310100/json/"
        assert provider.get_provider_name() == "viacep"
