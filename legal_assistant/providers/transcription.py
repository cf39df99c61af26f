"""Whisper-compatible speech-to-text provider"""
from typing import Any, Dict, Optional

import httpx

from ..core.logging import get_logger
from .base import UpstreamError, raise_for_upstream_status

logger = get_logger(__name__)


class WhisperTranscriber:
    """Speech-to-text over an OpenAI-style ``/audio`` API (Groq by default)."""

    name = "transcription"

    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient,
        base_url: str = "https://api.groq.com/openai/v1",
        model: str = "whisper-large-v3",
    ):
        self.api_key = api_key
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self.model = model

    async def transcribe(
        self,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        language: Optional[str] = None,
        translate: bool = False,
    ) -> str:
        """Return the plain-text transcript of ``content``.

        With ``translate`` set the translations endpoint is used instead, which
        always answers in English and ignores the language hint.
        """
        endpoint = "translations" if translate else "transcriptions"
        data: Dict[str, Any] = {"model": self.model, "response_format": "text"}
        if language and not translate:
            data["language"] = language

        files = {"file": (filename, content, content_type or "application/octet-stream")}
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            response = await self.http_client.post(
                f"{self.base_url}/audio/{endpoint}",
                headers=headers,
                data=data,
                files=files
            )
        except httpx.HTTPError as exc:
            logger.error("upstream_request_failed", service="transcription", error=str(exc))
            raise UpstreamError(f"Error calling transcription API: {exc}", service="transcription") from exc

        raise_for_upstream_status(response, "Transcription")
        return self._coerce_text(response)

    @staticmethod
    def _coerce_text(response: httpx.Response) -> str:
        # response_format=text is honoured by most servers; some still send JSON
        if "application/json" in response.headers.get("content-type", ""):
            try:
                payload = response.json()
            except ValueError as exc:
                raise UpstreamError("Transcription API returned malformed JSON", service="transcription") from exc
            text = payload.get("text") if isinstance(payload, dict) else None
            if not isinstance(text, str):
                raise UpstreamError("Transcription API response has no text", service="transcription")
            return text.strip()
        return response.text.strip()
