from .gateway_service import GatewayService
from .resolver_service import ResolverService
from .responses import ServiceResponse

__all__ = [
    "GatewayService",
    "ResolverService",
    "ServiceResponse",
]
