"""Front Gateway Service.

Validates the incoming CEP, forwards the normalized request to the resolver and
relays the resolver's answer unchanged.

Responsibilities:
- 400 for bodies that are not a JSON object with a string ``cep``
- 422 for a CEP that fails the 8-digit rule (nothing is forwarded)
- 503 when the resolver cannot be reached
- Status code and body of the resolver otherwise, byte-for-byte
"""

import httpx
from opentelemetry import context as otel_context
from opentelemetry.trace import SpanKind, Status, StatusCode, Tracer

from ..core.constants import ErrorMessages, HttpHeaders, HttpStatusCodes, MediaTypes, SpanNames
from ..core.exceptions import InvalidPostalCodeError, MalformedRequestError
from ..core.logging import get_logger, get_request_id
from ..core.tracing import inject_trace_context
from ..domain.models import PostalCodeRequest
from ..domain.validators import parse_cep_request
from .responses import ServiceResponse

logger = get_logger(__name__)


class GatewayService:
    """Transparent relay in front of the resolver.

    Stateless: the only thing shared across requests is the HTTP client.
    """

    def __init__(self, client: httpx.AsyncClient, resolver_url: str, tracer: Tracer):
        """Initialize the gateway.

        Args:
            client: Shared async HTTP client used for the outbound call
            resolver_url: Full URL of the resolver's ``POST /cep`` endpoint
            tracer: Tracer for the gateway spans
        """
        self.client = client
        self.resolver_url = resolver_url
        self.tracer = tracer

    async def handle(
        self,
        body: bytes,
        parent_context: otel_context.Context | None = None
    ) -> ServiceResponse:
        """Validate ``body`` and forward it to the resolver.

        Args:
            body: Raw request body
            parent_context: Trace context extracted from the inbound request, if any

        Returns:
            ServiceResponse to send back to the caller
        """
        with self.tracer.start_as_current_span(
            SpanNames.GATEWAY_HANDLE, context=parent_context, kind=SpanKind.SERVER
        ) as span:
            try:
                request = parse_cep_request(body)
            except MalformedRequestError as e:
                logger.info("Rejected malformed request body", extra={'error': str(e)})
                span.set_attribute("http.status_code", HttpStatusCodes.BAD_REQUEST)
                return ServiceResponse.text(HttpStatusCodes.BAD_REQUEST, ErrorMessages.INVALID_REQUEST_BODY)
            except InvalidPostalCodeError as e:
                logger.info("Rejected invalid zipcode", extra={'cep': e.cep})
                span.set_attribute("http.status_code", HttpStatusCodes.UNPROCESSABLE_ENTITY)
                return ServiceResponse.text(HttpStatusCodes.UNPROCESSABLE_ENTITY, ErrorMessages.INVALID_ZIPCODE)

            span.set_attribute("cep", request.cep)
            response = await self.forward(request)
            span.set_attribute("http.status_code", response.status_code)
            return response

    async def forward(self, request: PostalCodeRequest) -> ServiceResponse:
        """POST the normalized request to the resolver and relay its response."""
        with self.tracer.start_as_current_span(SpanNames.GATEWAY_FORWARD, kind=SpanKind.CLIENT) as span:
            headers = {
                HttpHeaders.CONTENT_TYPE: MediaTypes.JSON,
                HttpHeaders.REQUEST_ID: get_request_id(),
            }
            inject_trace_context(headers)

            try:
                response = await self.client.post(
                    self.resolver_url,
                    content=request.model_dump_json().encode("utf-8"),
                    headers=headers
                )
            except httpx.RequestError as e:
                logger.error(
                    "Error making request to resolver",
                    extra={
                        'resolver_url': self.resolver_url,
                        'error': str(e),
                        'error_type': type(e).__name__
                    }
                )
                span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                return ServiceResponse.text(
                    HttpStatusCodes.SERVICE_UNAVAILABLE, ErrorMessages.SERVICE_UNAVAILABLE
                )

            span.set_attribute("http.status_code", response.status_code)
            logger.info(
                "Resolver responded",
                extra={'cep': request.cep, 'status_code': response.status_code}
            )

            return ServiceResponse(
                status_code=response.status_code,
                body=response.content,
                media_type=response.headers.get(HttpHeaders.CONTENT_TYPE)
            )
