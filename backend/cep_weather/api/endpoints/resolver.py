"""Resolver Aggregator Endpoints."""

from fastapi import APIRouter, Depends, Request, Response

from ...core.constants import ApiEndpoints
from ...core.tracing import extract_trace_context
from ...services import ResolverService
from ..dependencies import get_resolver_service

router = APIRouter()


@router.post(ApiEndpoints.CEP)
async def resolve_cep(
    request: Request,
    service: ResolverService = Depends(get_resolver_service)
) -> Response:
    """Resolve a CEP to its city and current temperature.

    Request body: ``{"cep": "01310100"}``

    Responses:
    - 200 ``{"city": "São Paulo", "tempC": 22.5, "tempF": 72.5, "tempK": 295.65}``
    - 422 invalid zipcode
    - 404 zipcode not found
    - 500 weather lookup failed
    """
    body = await request.body()
    result = await service.handle(body, extract_trace_context(dict(request.headers)))
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type
    )
