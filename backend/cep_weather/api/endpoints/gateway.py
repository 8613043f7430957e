"""Front Gateway Endpoints."""

from fastapi import APIRouter, Depends, Request, Response

from ...core.constants import ApiEndpoints
from ...core.tracing import extract_trace_context
from ...services import GatewayService
from ..dependencies import get_gateway_service

router = APIRouter()


@router.post(ApiEndpoints.CEP)
async def forward_cep(
    request: Request,
    service: GatewayService = Depends(get_gateway_service)
) -> Response:
    """Validate a CEP and relay the resolver's answer.

    Request body: ``{"cep": "01310-100"}``

    Responses:
    - Whatever the resolver returned, status and body unchanged
    - 400 if the body is not valid JSON
    - 422 if the CEP is not 8 digits (hyphens allowed)
    - 503 if the resolver is unreachable
    """
    body = await request.body()
    result = await service.handle(body, extract_trace_context(dict(request.headers)))
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type
    )
