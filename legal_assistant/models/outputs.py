"""Response models for chat, case-law, search and transcription endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, field_validator

DEFAULT_TITLE = "Unknown Case"
DEFAULT_CITATION = "No citation available"
DEFAULT_RELEVANCE = "Relevant to the query"


class CaseResult(BaseModel):
    """One case-law citation recovered from model output."""

    title: str = DEFAULT_TITLE
    citation: str = DEFAULT_CITATION
    summary: str = ""
    relevance: str = DEFAULT_RELEVANCE

    @field_validator("title", "citation", "summary", "relevance", mode="before")
    @classmethod
    def _stringify(cls, value: Any, info) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (list, tuple)):
            return ", ".join(str(part) for part in value)
        return str(value)


class ChatResponse(BaseModel):
    response: str


class CaseLawResponse(BaseModel):
    results: List[CaseResult]


class KanoonDocument(BaseModel):
    """A single Indian Kanoon search hit."""

    tid: str = ""
    title: str = ""
    headline: str = ""
    publishdate: str = ""
    docsource: str = ""

    @classmethod
    def from_api(cls, doc: Dict[str, Any]) -> "KanoonDocument":
        return cls(
            **{
                field: "" if doc.get(field) is None else str(doc.get(field))
                for field in ("tid", "title", "headline", "publishdate", "docsource")
            }
        )


class KanoonSearchResponse(BaseModel):
    results: List[KanoonDocument]


class TranscriptionResponse(BaseModel):
    response: str
    language: str
