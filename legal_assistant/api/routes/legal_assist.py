"""IPC legal analysis endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ...core.logging import get_logger
from ...models.inputs import QueryRequest
from ...models.outputs import ChatResponse
from ...providers.base import UpstreamError
from ...services.assistant_service import LegalAssistantService
from ...services.provider_service import ProviderService
from ..deps import get_assistant_service, get_provider_service
from ..errors import missing_credentials, missing_query, upstream_failure

router = APIRouter()
logger = get_logger(__name__)


@router.post("/legal-assist", response_model=ChatResponse)
async def legal_assist(
    payload: QueryRequest,
    request: Request,
    provider_service: ProviderService = Depends(get_provider_service),
    assistant: LegalAssistantService = Depends(get_assistant_service),
) -> ChatResponse:
    query = payload.cleaned_query
    if not query:
        raise missing_query()

    provider = provider_service.get_chat_provider()
    if provider is None:
        raise missing_credentials("Together")

    try:
        response = await assistant.legal_analysis(provider, query)
    except UpstreamError as exc:
        logger.error(
            "legal_analysis_failed",
            request_id=getattr(request.state, "request_id", "unknown"),
            error=str(exc),
        )
        raise upstream_failure(exc) from exc

    return ChatResponse(response=response)
