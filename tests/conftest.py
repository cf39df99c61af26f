from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from legal_assistant.core.config import Settings
from legal_assistant.main import create_app
from legal_assistant.providers.base import LLMProvider, LLMRawResponse, PromptPacket, UpstreamError


def make_settings(**overrides) -> Settings:
    values = {
        "together_api_key": "together-test",
        "transcription_api_key": "whisper-test",
        "indian_kanoon_api_token": "kanoon-test",
        "log_json": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class StubProvider(LLMProvider):
    name = "together"

    def __init__(self, content: str = "", error: Optional[Exception] = None) -> None:
        super().__init__(api_key="stub")
        self.content = content
        self.error = error
        self.packets: List[PromptPacket] = []

    async def generate(self, prompt: PromptPacket) -> LLMRawResponse:  # type: ignore[override]
        self.packets.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMRawResponse(content=self.content, model=prompt.model, provider="stub")


class StubTranscriber:
    name = "transcription"

    def __init__(self, text: str = "", error: Optional[Exception] = None) -> None:
        self.text = text
        self.error = error
        self.calls: list = []

    async def transcribe(self, filename, content, content_type=None, language=None, translate=False):
        self.calls.append(
            {
                "filename": filename,
                "content": content,
                "content_type": content_type,
                "language": language,
                "translate": translate,
            }
        )
        if self.error is not None:
            raise self.error
        return self.text


class StubCaseSearch:
    name = "indian_kanoon"

    def __init__(self, results=None, error: Optional[Exception] = None) -> None:
        self.results = results or []
        self.error = error
        self.queries: list = []

    async def search(self, query, pagenum=0):
        self.queries.append((query, pagenum))
        if self.error is not None:
            raise self.error
        return self.results


@pytest.fixture()
def settings() -> Settings:
    return make_settings()


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def stub_provider(client) -> StubProvider:
    provider = StubProvider()
    client.app.state.provider_service._providers["together"] = provider
    return provider


@pytest.fixture()
def upstream_error() -> UpstreamError:
    return UpstreamError("Together API responded with status 500: boom", status_code=500, service="together")
