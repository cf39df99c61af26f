import asyncio
import json

import httpx
import pytest

from legal_assistant.core.config import Settings
from legal_assistant.providers.base import PromptPacket, UpstreamError
from legal_assistant.providers.indian_kanoon import IndianKanoonClient
from legal_assistant.providers.together import TogetherProvider
from legal_assistant.providers.transcription import WhisperTranscriber
from legal_assistant.services.provider_service import ProviderService


def _run(coro_factory, handler):
    async def runner():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            return await coro_factory(http_client)

    return asyncio.run(runner())


PACKET = PromptPacket(
    system_prompt="system",
    user_prompt="user",
    model="meta-llama/Llama-3-70b-chat-hf",
    temperature=0.3,
    max_tokens=1500,
)


def test_together_request_shape_and_content():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "model": "meta-llama/Llama-3-70b-chat-hf",
                "choices": [{"message": {"role": "assistant", "content": "hello"}, "finish_reason": "stop"}],
                "usage": {"total_tokens": 10},
            },
        )

    result = _run(lambda c: TogetherProvider("key", c).generate(PACKET), handler)

    assert result.content == "hello"
    assert result.finish_reason == "stop"
    assert seen["url"] == "https://api.together.xyz/v1/chat/completions"
    assert seen["auth"] == "Bearer key"
    assert seen["body"] == {
        "model": "meta-llama/Llama-3-70b-chat-hf",
        "messages": [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ],
        "temperature": 0.3,
        "max_tokens": 1500,
    }


def test_together_non_success_status():
    def handler(request):
        return httpx.Response(401, text="invalid api key")

    with pytest.raises(UpstreamError) as info:
        _run(lambda c: TogetherProvider("key", c).generate(PACKET), handler)

    assert info.value.status_code == 401
    assert str(info.value) == "Together API responded with status 401: invalid api key"


@pytest.mark.parametrize("payload", [{}, {"choices": []}, {"choices": [{"message": {}}]}])
def test_together_missing_choices(payload):
    def handler(request):
        return httpx.Response(200, json=payload)

    with pytest.raises(UpstreamError):
        _run(lambda c: TogetherProvider("key", c).generate(PACKET), handler)


@pytest.mark.parametrize("metadata", [{"model": None, "usage": "n/a"}, {"model": 42, "usage": None}, {}])
def test_together_tolerates_odd_metadata(metadata):
    def handler(request):
        return httpx.Response(
            200,
            json={**metadata, "choices": [{"message": {"content": "hi"}, "finish_reason": None}]},
        )

    result = _run(lambda c: TogetherProvider("key", c).generate(PACKET), handler)

    assert result.content == "hi"
    assert result.model == PACKET.model
    assert result.usage is None
    assert result.finish_reason is None


def test_together_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamError) as info:
        _run(lambda c: TogetherProvider("key", c).generate(PACKET), handler)

    assert "connection refused" in str(info.value)


def test_transcription_posts_multipart_with_language():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, text=" namaste \n", headers={"content-type": "text/plain"})

    text = _run(
        lambda c: WhisperTranscriber("key", c).transcribe("clip.webm", b"audio-bytes", "audio/webm", language="hi"),
        handler,
    )

    assert text == "namaste"
    assert seen["url"] == "https://api.groq.com/openai/v1/audio/transcriptions"
    assert b'name="language"' in seen["body"]
    assert b"whisper-large-v3" in seen["body"]
    assert b"audio-bytes" in seen["body"]


def test_translation_endpoint_and_json_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, json={"text": "my phone was stolen"})

    text = _run(
        lambda c: WhisperTranscriber("key", c).transcribe("clip.webm", b"x", language="hi", translate=True),
        handler,
    )

    assert text == "my phone was stolen"
    assert seen["url"].endswith("/audio/translations")
    assert b'name="language"' not in seen["body"]


def test_transcription_failure():
    def handler(request):
        return httpx.Response(500, text="server error")

    with pytest.raises(UpstreamError) as info:
        _run(lambda c: WhisperTranscriber("key", c).transcribe("clip.webm", b"x"), handler)

    assert info.value.status_code == 500


def test_indian_kanoon_search_maps_docs():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["params"] = dict(request.url.params)
        seen["auth"] = request.headers["Authorization"]
        return httpx.Response(
            200,
            json={
                "docs": [
                    {
                        "tid": 1766147,
                        "title": "Lalita Kumari vs Govt.Of U.P.",
                        "headline": "registration of <b>FIR</b>",
                        "publishdate": "2013-11-12",
                        "docsource": "Supreme Court of India",
                    },
                    {"tid": 42, "title": "Untitled", "headline": None},
                ]
            },
        )

    docs = _run(lambda c: IndianKanoonClient("token", c).search("FIR registration"), handler)

    assert seen["method"] == "POST"
    assert seen["params"] == {"formInput": "FIR registration", "pagenum": "0"}
    assert seen["auth"] == "Token token"
    assert docs[0].tid == "1766147"
    assert docs[0].docsource == "Supreme Court of India"
    assert docs[1].headline == ""
    assert docs[1].publishdate == ""


def test_indian_kanoon_without_docs():
    docs = _run(
        lambda c: IndianKanoonClient("token", c).search("nothing"),
        lambda request: httpx.Response(200, json={"found": "0"}),
    )

    assert docs == []


def test_indian_kanoon_error_message():
    with pytest.raises(UpstreamError) as info:
        _run(
            lambda c: IndianKanoonClient("token", c).search("bail"),
            lambda request: httpx.Response(200, json={"errmsg": "Authentication failed"}),
        )

    assert str(info.value) == "Authentication failed"


def test_provider_service_only_builds_configured_clients():
    settings = Settings(_env_file=None, together_api_key="k", transcription_api_key=None, indian_kanoon_api_token=None)
    service = ProviderService(settings, httpx.AsyncClient())

    assert isinstance(service.get_chat_provider(), TogetherProvider)
    assert service.get_transcriber() is None
    assert service.get_case_search() is None
    assert service.enabled_services() == ["together"]
