"""Indian Kanoon judgment search endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ...core.logging import get_logger
from ...models.inputs import QueryRequest
from ...models.outputs import KanoonSearchResponse
from ...providers.base import UpstreamError
from ...services.provider_service import ProviderService
from ..deps import get_provider_service
from ..errors import missing_credentials, missing_query, upstream_failure

router = APIRouter()
logger = get_logger(__name__)


async def _search(query: str, pagenum: int, request: Request, provider_service: ProviderService) -> KanoonSearchResponse:
    query = query.strip()
    if not query:
        raise missing_query()

    client = provider_service.get_case_search()
    if client is None:
        raise missing_credentials("Indian Kanoon")

    try:
        results = await client.search(query, pagenum=pagenum)
    except UpstreamError as exc:
        logger.error(
            "indian_kanoon_search_failed",
            request_id=getattr(request.state, "request_id", "unknown"),
            error=str(exc),
        )
        raise upstream_failure(exc) from exc

    logger.info("indian_kanoon_search_completed", results=len(results), pagenum=pagenum)
    return KanoonSearchResponse(results=results)


@router.get("/indian-kanoon", response_model=KanoonSearchResponse)
async def search_indian_kanoon(
    request: Request,
    query: Optional[str] = Query(default=None),
    pagenum: int = Query(default=0, ge=0),
    provider_service: ProviderService = Depends(get_provider_service),
) -> KanoonSearchResponse:
    return await _search(query or "", pagenum, request, provider_service)


@router.post("/indian-kanoon", response_model=KanoonSearchResponse)
async def search_indian_kanoon_post(
    payload: QueryRequest,
    request: Request,
    pagenum: int = Query(default=0, ge=0),
    provider_service: ProviderService = Depends(get_provider_service),
) -> KanoonSearchResponse:
    return await _search(payload.cleaned_query, pagenum, request, provider_service)
