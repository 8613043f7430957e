"""ViaCEP directory provider (CEP -> city name)."""

import time

import httpx
from opentelemetry.trace import Status, StatusCode, Tracer

from ..core.constants import Collaborators, Logging, SpanNames
from ..core.logging import get_logger
from ..core.metrics import record_lookup
from ..utils import truncate_string
from .base import CityLookupResult, DirectoryProvider, LookupOutcome

logger = get_logger(__name__)


class ViaCepDirectoryProvider(DirectoryProvider):
    """Resolve CEPs through ``GET <base>/<cep>/json/``.

    ViaCEP answers an unknown CEP with ``200 {"erro": true}``; that, like any
    response without a ``localidade``, is NOT_FOUND.
    """

    LOCALITY_FIELD = "localidade"

    def __init__(self, client: httpx.AsyncClient, base_url: str, tracer: Tracer):
        super().__init__(Collaborators.DIRECTORY)
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.tracer = tracer

    def build_url(self, cep: str) -> str:
        return f"{self.base_url}/{cep}/json/"

    async def resolve_city(self, cep: str) -> CityLookupResult:
        with self.tracer.start_as_current_span(SpanNames.DIRECTORY_LOOKUP) as span:
            span.set_attribute("cep", cep)
            start_time = time.time()

            result = await self._fetch(cep)

            record_lookup(self.provider_name, result.outcome.value, time.time() - start_time)
            span.set_attribute("lookup.outcome", result.outcome.value)
            if result.outcome is not LookupOutcome.FOUND:
                span.set_status(Status(StatusCode.ERROR, result.detail))
            return result

    async def _fetch(self, cep: str) -> CityLookupResult:
        try:
            response = await self.client.get(self.build_url(cep))
        except httpx.HTTPError as e:
            logger.warning(
                "Error making request to ViaCEP",
                extra={'cep': cep, 'error': str(e), 'error_type': type(e).__name__}
            )
            return CityLookupResult.failure(LookupOutcome.UPSTREAM_ERROR, f"request failed: {type(e).__name__}")

        if not response.is_success:
            logger.warning(
                "ViaCEP returned non-success status",
                extra={
                    'cep': cep,
                    'status_code': response.status_code,
                    'body': truncate_string(response.text, Logging.MAX_UPSTREAM_BODY_CHARS)
                }
            )
            return CityLookupResult.failure(
                LookupOutcome.UPSTREAM_ERROR, f"ViaCEP returned status {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(
                "Error parsing JSON from ViaCEP",
                extra={'cep': cep, 'error': str(e)}
            )
            return CityLookupResult.failure(LookupOutcome.UPSTREAM_ERROR, "invalid JSON from ViaCEP")

        if not isinstance(payload, dict):
            return CityLookupResult.failure(LookupOutcome.UPSTREAM_ERROR, "unexpected ViaCEP payload")

        locality = payload.get(self.LOCALITY_FIELD)
        if not isinstance(locality, str) or not locality:
            logger.info("Locality not found in ViaCEP response", extra={'cep': cep})
            return CityLookupResult.failure(LookupOutcome.NOT_FOUND, "CEP not found in ViaCEP")

        logger.debug("City resolved", extra={'cep': cep, 'city': locality})
        return CityLookupResult.found(locality)
