import asyncio

from legal_assistant.services.assistant_service import LegalAssistantService

from .conftest import StubProvider, make_settings


def test_case_law_returns_plain_list_for_either_parser():
    service = LegalAssistantService(make_settings(chat_model="Qwen/Qwen1.5-72B-Chat"))

    structured = StubProvider('[{"title": "A", "citation": "B", "summary": "C", "relevance": "D"}]')
    heuristic = StubProvider("1. Arnesh Kumar v. State of Bihar, (2014) 8 SCC 273 - arrest guidelines")

    first = asyncio.run(service.case_law(structured, "arrest"))
    second = asyncio.run(service.case_law(heuristic, "arrest"))

    assert [case.title for case in first] == ["A"]
    assert [case.title for case in second] == ["Arnesh Kumar v. State of Bihar"]
    assert second[0].citation == "2014"
    assert structured.packets[0].model == "Qwen/Qwen1.5-72B-Chat"
