"""Resolver Aggregator Service.

Resolves a CEP to its city and the city to its current temperature, then
returns the temperature in Celsius, Fahrenheit and Kelvin.

Evaluation order (first failure wins):
1. Malformed JSON or invalid CEP -> 422
2. Directory lookup not FOUND -> 404
3. Weather lookup not FOUND -> 500
4. 200 with the aggregated JSON result

The weather lookup starts only after the directory lookup returned a city.
"""

from opentelemetry import context as otel_context
from opentelemetry.trace import SpanKind, Tracer
from pydantic import ValidationError as ModelValidationError

from ..core.constants import ErrorMessages, HttpStatusCodes, SpanNames
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..domain.conversion import build_aggregated_result
from ..domain.validators import parse_cep_request
from ..providers.base import DirectoryProvider, LookupOutcome, WeatherProvider
from .responses import ServiceResponse

logger = get_logger(__name__)

# Every non-FOUND outcome at a stage maps to that stage's status.
DIRECTORY_FAILURES: dict[LookupOutcome, tuple[int, str]] = {
    LookupOutcome.NOT_FOUND: (HttpStatusCodes.NOT_FOUND, ErrorMessages.ZIPCODE_NOT_FOUND),
    LookupOutcome.UPSTREAM_ERROR: (HttpStatusCodes.NOT_FOUND, ErrorMessages.ZIPCODE_NOT_FOUND),
    LookupOutcome.CONFIG_MISSING: (HttpStatusCodes.NOT_FOUND, ErrorMessages.ZIPCODE_NOT_FOUND),
}

WEATHER_FAILURES: dict[LookupOutcome, tuple[int, str]] = {
    LookupOutcome.NOT_FOUND: (HttpStatusCodes.INTERNAL_SERVER_ERROR, ErrorMessages.WEATHER_UNAVAILABLE),
    LookupOutcome.UPSTREAM_ERROR: (HttpStatusCodes.INTERNAL_SERVER_ERROR, ErrorMessages.WEATHER_UNAVAILABLE),
    LookupOutcome.CONFIG_MISSING: (HttpStatusCodes.INTERNAL_SERVER_ERROR, ErrorMessages.WEATHER_UNAVAILABLE),
}


class ResolverService:
    """Orchestrates the directory and weather lookups for one request."""

    def __init__(self, directory: DirectoryProvider, weather: WeatherProvider, tracer: Tracer):
        self.directory = directory
        self.weather = weather
        self.tracer = tracer

    async def handle(
        self,
        body: bytes,
        parent_context: otel_context.Context | None = None
    ) -> ServiceResponse:
        """Validate ``body``, run both lookups and build the response.

        Args:
            body: Raw request body
            parent_context: Trace context propagated by the gateway, if any

        Returns:
            ServiceResponse to send back to the gateway
        """
        with self.tracer.start_as_current_span(
            SpanNames.RESOLVER_HANDLE, context=parent_context, kind=SpanKind.SERVER
        ) as span:
            response = await self._resolve(body, span)
            span.set_attribute("http.status_code", response.status_code)
            return response

    async def _resolve(self, body: bytes, span) -> ServiceResponse:
        try:
            request = parse_cep_request(body)
        except ValidationError as e:
            logger.info("Rejected invalid zipcode", extra={'error': str(e)})
            return ServiceResponse.text(HttpStatusCodes.UNPROCESSABLE_ENTITY, ErrorMessages.INVALID_ZIPCODE)

        span.set_attribute("cep", request.cep)

        city_result = await self.directory.resolve_city(request.cep)
        if city_result.outcome is not LookupOutcome.FOUND:
            status_code, message = DIRECTORY_FAILURES[city_result.outcome]
            logger.warning(
                "Error getting city",
                extra={
                    'cep': request.cep,
                    'outcome': city_result.outcome.value,
                    'detail': city_result.detail
                }
            )
            return ServiceResponse.text(status_code, message)

        city_name = city_result.city.city_name
        span.set_attribute("city", city_name)

        weather_result = await self.weather.resolve_temperature(city_name)
        if weather_result.outcome is not LookupOutcome.FOUND:
            status_code, message = WEATHER_FAILURES[weather_result.outcome]
            logger.error(
                "Error getting weather",
                extra={
                    'city': city_name,
                    'outcome': weather_result.outcome.value,
                    'detail': weather_result.detail
                }
            )
            return ServiceResponse.text(status_code, message)

        temp_c = weather_result.reading.temperature_celsius
        try:
            result = build_aggregated_result(city_name, temp_c)
        except ModelValidationError as e:
            # Finite Celsius can still overflow once converted to Fahrenheit
            logger.error(
                "Temperature out of range",
                extra={'city': city_name, 'temp_c': temp_c, 'error': str(e)}
            )
            return ServiceResponse.text(
                HttpStatusCodes.INTERNAL_SERVER_ERROR, ErrorMessages.WEATHER_UNAVAILABLE
            )

        logger.info(
            "Weather resolved",
            extra={'cep': request.cep, 'city': result.city, 'temp_c': result.temp_c}
        )
        return ServiceResponse.json(HttpStatusCodes.OK, result.to_json_bytes())
