"""Audio transcription endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from ...core.logging import get_logger
from ...models.outputs import TranscriptionResponse
from ...providers.base import UpstreamError
from ...services.provider_service import ProviderService
from ..deps import get_provider_service
from ..errors import APIError, missing_credentials, upstream_failure

router = APIRouter()
logger = get_logger(__name__)


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    request: Request,
    file: Optional[UploadFile] = File(default=None),
    language: str = Form(default="en"),
    translate: bool = Form(default=False),
    provider_service: ProviderService = Depends(get_provider_service),
) -> TranscriptionResponse:
    content = await file.read() if file is not None else b""
    if not content:
        raise APIError("MISSING_FILE", "Audio file is required", status_code=400)

    transcriber = provider_service.get_transcriber()
    if transcriber is None:
        raise missing_credentials("transcription")

    language = (language or "en").strip() or "en"

    try:
        text = await transcriber.transcribe(
            filename=file.filename or "audio.webm",
            content=content,
            content_type=file.content_type,
            language=language,
            translate=translate,
        )
    except UpstreamError as exc:
        logger.error(
            "transcription_failed",
            request_id=getattr(request.state, "request_id", "unknown"),
            size=len(content),
            error=str(exc),
        )
        raise upstream_failure(exc, code="TRANSCRIPTION_ERROR") from exc

    return TranscriptionResponse(response=text, language="en" if translate else language)
