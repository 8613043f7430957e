"""Prometheus Middleware.

Records HTTP metrics for every request, labelled with the service that served
it, and classifies ``POST /cep`` answers by what happened to the lookup.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from ..core.constants import ApiEndpoints, HttpStatusCodes
from ..core.metrics import (
    cep_requests_total,
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)
from ..utils import normalize_path

# Status codes either service can answer POST /cep with
CEP_RESULTS = {
    HttpStatusCodes.OK: "resolved",
    HttpStatusCodes.BAD_REQUEST: "malformed_request",
    HttpStatusCodes.UNPROCESSABLE_ENTITY: "invalid_zipcode",
    HttpStatusCodes.NOT_FOUND: "zipcode_not_found",
    HttpStatusCodes.INTERNAL_SERVER_ERROR: "weather_unavailable",
    HttpStatusCodes.SERVICE_UNAVAILABLE: "resolver_unavailable",
}


def classify_cep_result(status_code: int) -> str:
    """Name the lookup result behind a ``POST /cep`` status code."""
    return CEP_RESULTS.get(status_code, "other")


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Capture Prometheus metrics for one service's HTTP requests.

    Args:
        app: Wrapped ASGI application
        service: ``service-a`` or ``service-b``, used as the ``service`` label
    """

    def __init__(self, app: ASGIApp, service: str):
        super().__init__(app)
        self.service = service

    async def dispatch(self, request: Request, call_next):
        method = request.method
        endpoint = normalize_path(request.url.path)
        labels = {'service': self.service, 'method': method, 'endpoint': endpoint}

        http_requests_in_progress.labels(**labels).inc()
        start_time = time.time()
        status_code = HttpStatusCodes.INTERNAL_SERVER_ERROR

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            http_requests_total.labels(**labels, status_code=status_code).inc()
            http_request_duration_seconds.labels(**labels).observe(time.time() - start_time)
            http_requests_in_progress.labels(**labels).dec()

            if method == "POST" and endpoint == ApiEndpoints.CEP:
                cep_requests_total.labels(
                    service=self.service,
                    result=classify_cep_result(status_code)
                ).inc()

        return response
