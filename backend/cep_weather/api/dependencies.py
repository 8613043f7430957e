"""FastAPI Dependencies.

Services are built once per application by the factories in ``cep_weather.main``
and stored on ``app.state``; endpoints receive them through these dependencies,
so tests can swap them with ``app.dependency_overrides``.
"""

from fastapi import Request

from ..services import GatewayService, ResolverService


def get_gateway_service(request: Request) -> GatewayService:
    """Return the gateway service attached to the running application."""
    return request.app.state.gateway_service


def get_resolver_service(request: Request) -> ResolverService:
    """Return the resolver service attached to the running application."""
    return request.app.state.resolver_service
