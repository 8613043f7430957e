"""WeatherAPI provider (city name -> current temperature in Celsius)."""

import math
import time

import httpx
from opentelemetry.trace import Status, StatusCode, Tracer

from ..core.constants import Collaborators, Logging, SpanNames
from ..core.logging import get_logger
from ..core.metrics import record_lookup
from ..utils import truncate_string
from .base import LookupOutcome, TemperatureLookupResult, WeatherProvider

logger = get_logger(__name__)


class WeatherApiProvider(WeatherProvider):
    """Query ``GET <base>?key=<key>&q=<city>&aqi=no`` and read ``current.temp_c``.

    The city is passed as a query parameter, so httpx percent-encodes spaces
    and non-ASCII characters. The API key is never logged.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        api_key: str | None,
        tracer: Tracer
    ):
        super().__init__(Collaborators.WEATHER)
        self.client = client
        self.base_url = base_url
        self.api_key = api_key
        self.tracer = tracer

    def build_params(self, city_name: str) -> dict[str, str]:
        return {"key": self.api_key or "", "q": city_name, "aqi": "no"}

    async def resolve_temperature(self, city_name: str) -> TemperatureLookupResult:
        with self.tracer.start_as_current_span(SpanNames.WEATHER_LOOKUP) as span:
            span.set_attribute("city", city_name)
            start_time = time.time()

            result = await self._fetch(city_name)

            record_lookup(self.provider_name, result.outcome.value, time.time() - start_time)
            span.set_attribute("lookup.outcome", result.outcome.value)
            if result.outcome is not LookupOutcome.FOUND:
                span.set_status(Status(StatusCode.ERROR, result.detail))
            return result

    async def _fetch(self, city_name: str) -> TemperatureLookupResult:
        if not self.api_key:
            logger.error("WEATHER_API_KEY is not set")
            return TemperatureLookupResult.failure(
                LookupOutcome.CONFIG_MISSING, "WEATHER_API_KEY is not set"
            )

        logger.info("Requesting WeatherAPI", extra={'city': city_name})

        try:
            response = await self.client.get(self.base_url, params=self.build_params(city_name))
        except httpx.HTTPError as e:
            logger.warning(
                "Error making request to WeatherAPI",
                extra={'city': city_name, 'error_type': type(e).__name__}
            )
            return TemperatureLookupResult.failure(
                LookupOutcome.UPSTREAM_ERROR, f"request failed: {type(e).__name__}"
            )

        if not response.is_success:
            logger.warning(
                "WeatherAPI returned non-success status",
                extra={
                    'city': city_name,
                    'status_code': response.status_code,
                    'body': truncate_string(response.text, Logging.MAX_UPSTREAM_BODY_CHARS)
                }
            )
            return TemperatureLookupResult.failure(
                LookupOutcome.UPSTREAM_ERROR, f"WeatherAPI returned status {response.status_code}"
            )

        try:
            temp_c = self.parse_temperature(response.json())
        except (ValueError, KeyError, TypeError, OverflowError) as e:
            logger.warning(
                "Error parsing JSON from WeatherAPI",
                extra={
                    'city': city_name,
                    'error': str(e),
                    'body': truncate_string(response.text, Logging.MAX_UPSTREAM_BODY_CHARS)
                }
            )
            return TemperatureLookupResult.failure(
                LookupOutcome.UPSTREAM_ERROR, "unexpected WeatherAPI payload"
            )

        logger.debug("Temperature resolved", extra={'city': city_name, 'temp_c': temp_c})
        return TemperatureLookupResult.found(temp_c)

    @staticmethod
    def parse_temperature(payload) -> float:
        """Extract ``current.temp_c`` from a WeatherAPI payload.

        Raises:
            KeyError: Field missing
            TypeError: Payload or field has the wrong type
            ValueError: Field is not a finite number
            OverflowError: Integer too large for a float
        """
        temp_c = payload["current"]["temp_c"]
        if isinstance(temp_c, bool) or not isinstance(temp_c, (int, float)):
            raise TypeError(f"temp_c is not a number: {temp_c!r}")
        temp_c = float(temp_c)
        if not math.isfinite(temp_c):
            raise ValueError(f"temp_c is not finite: {temp_c!r}")
        return temp_c
