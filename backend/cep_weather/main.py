"""CEP Weather - Application Factories.

Two FastAPI applications are built from this package:

- Front Gateway (service-a): validates the CEP and relays to the resolver
- Resolver Aggregator (service-b): CEP -> city -> temperature in three scales

Run one of them with uvicorn's factory mode::

    uvicorn cep_weather.main:create_gateway_app --factory --port 8080
    uvicorn cep_weather.main:create_resolver_app --factory --port 8081

or ``python -m cep_weather.main`` to serve the one named by SERVICE_ROLE.
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from .api.endpoints import gateway as gateway_endpoint
from .api.endpoints import health as health_endpoint
from .api.endpoints import metrics as metrics_endpoint
from .api.endpoints import resolver as resolver_endpoint
from .core.config import Settings
from .core.config import settings as default_settings
from .core.constants import ApiEndpoints, ServiceNames
from .core.logging import get_logger, setup_logging
from .core.metrics import set_app_info
from .core.tracing import get_tracer, setup_tracing
from .middleware import PrometheusMiddleware, RequestIDMiddleware
from .providers import (
    DirectoryProvider,
    ViaCepDirectoryProvider,
    WeatherApiProvider,
    WeatherProvider,
)
from .services import GatewayService, ResolverService

logger = get_logger(__name__)


def _build_app(
    service_name: str,
    description: str,
    settings: Settings,
    owned_client: httpx.AsyncClient | None,
    tracer_provider: TracerProvider | None
) -> FastAPI:
    """Create a FastAPI app with the middleware and operational endpoints both services share.

    Args:
        service_name: ``service-a`` or ``service-b``
        description: OpenAPI description
        settings: Application settings
        owned_client: HTTP client created by the factory, closed on shutdown
        tracer_provider: Provider to flush and shut down on shutdown
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events."""
        logger.info(
            "Application starting",
            extra={
                'service': service_name,
                'environment': settings.ENVIRONMENT,
                'version': settings.APP_VERSION
            }
        )

        set_app_info(
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
            service=service_name
        )
        logger.debug("Prometheus metrics initialized")

        yield

        logger.info("Application shutting down", extra={'service': service_name})

        if owned_client is not None:
            await owned_client.aclose()
            logger.debug("HTTP client closed")

        if tracer_provider is not None:
            tracer_provider.shutdown()
            logger.debug("Tracer provider shut down")

    app = FastAPI(
        title=f"{settings.APP_NAME} ({service_name})",
        version=settings.APP_VERSION,
        description=description,
        lifespan=lifespan,
        docs_url=ApiEndpoints.DOCS,
        redoc_url=None,
        openapi_url=ApiEndpoints.OPENAPI
    )

    app.state.settings = settings
    app.state.service_name = service_name

    # Prometheus metrics middleware
    app.add_middleware(PrometheusMiddleware, service=service_name)

    # Request ID middleware (outermost: every log line of the request carries the id)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health_endpoint.router, tags=["Health"])
    app.include_router(metrics_endpoint.router, tags=["Metrics"])

    return app


def create_gateway_app(
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None
) -> FastAPI:
    """Build the Front Gateway application.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        client: HTTP client for the resolver call; created (and owned) when omitted

    Returns:
        FastAPI application serving ``POST /cep``
    """
    if settings is None:
        settings = default_settings
    setup_logging(settings.LOG_LEVEL, ServiceNames.GATEWAY)

    tracer_provider = setup_tracing(ServiceNames.GATEWAY, settings)
    tracer = get_tracer(__name__, tracer_provider)

    owned_client = None
    if client is None:
        client = owned_client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)

    app = _build_app(
        ServiceNames.GATEWAY,
        "Validates CEP lookups and relays them to the resolver",
        settings,
        owned_client,
        tracer_provider
    )
    app.state.gateway_service = GatewayService(client, settings.RESOLVER_URL, tracer)
    app.include_router(gateway_endpoint.router, tags=["CEP"])

    return app


def create_resolver_app(
    settings: Settings | None = None,
    directory: DirectoryProvider | None = None,
    weather: WeatherProvider | None = None,
    client: httpx.AsyncClient | None = None
) -> FastAPI:
    """Build the Resolver Aggregator application.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        directory: Directory provider; ViaCEP over HTTP when omitted
        weather: Weather provider; WeatherAPI over HTTP when omitted
        client: HTTP client for the default providers; created (and owned) when omitted

    Returns:
        FastAPI application serving ``POST /cep``
    """
    if settings is None:
        settings = default_settings
    setup_logging(settings.LOG_LEVEL, ServiceNames.RESOLVER)

    tracer_provider = setup_tracing(ServiceNames.RESOLVER, settings)
    tracer = get_tracer(__name__, tracer_provider)

    owned_client = None
    if client is None and (directory is None or weather is None):
        client = owned_client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)

    if directory is None:
        directory = ViaCepDirectoryProvider(client, settings.VIACEP_BASE_URL, tracer)
    if weather is None:
        weather = WeatherApiProvider(
            client,
            settings.WEATHER_API_BASE_URL,
            settings.WEATHER_API_KEY,
            tracer
        )

    app = _build_app(
        ServiceNames.RESOLVER,
        "Resolves a CEP to its city and current temperature in Celsius, Fahrenheit and Kelvin",
        settings,
        owned_client,
        tracer_provider
    )
    app.state.resolver_service = ResolverService(directory, weather, tracer)
    app.include_router(resolver_endpoint.router, tags=["CEP"])

    return app


if __name__ == "__main__":
    import uvicorn

    if default_settings.SERVICE_ROLE == "resolver":
        factory, port = "cep_weather.main:create_resolver_app", default_settings.RESOLVER_PORT
    else:
        factory, port = "cep_weather.main:create_gateway_app", default_settings.GATEWAY_PORT

    uvicorn.run(
        factory,
        factory=True,
        host=default_settings.HOST,
        port=port,
        reload=default_settings.DEBUG,
        log_level=default_settings.LOG_LEVEL.lower()
    )
