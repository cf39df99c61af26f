"""Together AI chat-completion provider"""
from typing import Any, Dict

import httpx

from ..core.logging import get_logger
from .base import (
    LLMProvider,
    LLMRawResponse,
    PromptPacket,
    UpstreamError,
    raise_for_upstream_status,
)

logger = get_logger(__name__)


class TogetherProvider(LLMProvider):
    """Together API provider (OpenAI-compatible chat completions)"""

    name = "together"

    def __init__(self, api_key: str, http_client: httpx.AsyncClient, base_url: str = "https://api.together.xyz/v1"):
        super().__init__(api_key)
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    async def generate(self, prompt: PromptPacket) -> LLMRawResponse:
        """Generate completion using the Together API"""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        messages = [
            {"role": "system", "content": prompt.system_prompt},
            {"role": "user", "content": prompt.user_prompt}
        ]

        body: Dict[str, Any] = {
            "model": prompt.model,
            "messages": messages,
            "temperature": prompt.temperature,
            "max_tokens": prompt.max_tokens
        }

        try:
            response = await self.http_client.post(
                self.completions_url,
                headers=headers,
                json=body
            )
        except httpx.HTTPError as exc:
            logger.error("upstream_request_failed", service="together", error=str(exc))
            raise UpstreamError(f"Error calling Together API: {exc}", service="together") from exc

        raise_for_upstream_status(response, "Together")

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError("Together API returned a non-JSON body", service="together") from exc

        content = self._first_choice_content(data)
        finish_reason = data["choices"][0].get("finish_reason")
        usage = data.get("usage")
        model = data.get("model")

        # Optional metadata may come back null or in another shape; only content is required.
        return LLMRawResponse(
            content=content,
            model=model if isinstance(model, str) and model else prompt.model,
            provider="together",
            finish_reason=finish_reason if isinstance(finish_reason, str) else None,
            usage=usage if isinstance(usage, dict) else None
        )

    @staticmethod
    def _first_choice_content(data: Any) -> str:
        """Return choices[0].message.content or raise when the shape is wrong."""
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            raise UpstreamError("Invalid response from API", service="together")

        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") for part in content if isinstance(part, dict)
            )
        if not isinstance(content, str) or not content:
            raise UpstreamError("Unexpected response format from Together API", service="together")
        return content
