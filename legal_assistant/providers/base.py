"""LLMProvider base classes and models"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel


class UpstreamError(Exception):
    """A third-party service failed or answered with an unexpected shape."""

    def __init__(self, message: str, status_code: Optional[int] = None, service: str = "upstream"):
        self.message = message
        self.status_code = status_code
        self.service = service
        super().__init__(message)


class PromptPacket(BaseModel):
    """Input to LLM provider"""
    system_prompt: str
    user_prompt: str
    model: str
    temperature: float = 0.7
    max_tokens: int = 1500


class LLMRawResponse(BaseModel):
    """Raw response from LLM provider"""
    content: str
    model: str
    provider: str
    finish_reason: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None


class LLMProvider(ABC):
    """Abstract base class for chat-completion providers"""

    name = "llm"

    def __init__(self, api_key: str):
        self.api_key = api_key

    @abstractmethod
    async def generate(self, prompt: PromptPacket) -> LLMRawResponse:
        """Generate completion from prompt"""
        raise NotImplementedError()


def raise_for_upstream_status(response: httpx.Response, service: str) -> None:
    """Turn a non-2xx upstream response into an UpstreamError with its body."""
    if response.is_success:
        return
    raise UpstreamError(
        f"{service} API responded with status {response.status_code}: {response.text}",
        status_code=response.status_code,
        service=service,
    )
