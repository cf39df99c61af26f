"""Recover case-law results from chat-model output.

The case-law prompt asks for a JSON array of ``{title, citation, summary,
relevance}`` objects. Models frequently wrap that array in prose or code
fences, or ignore the instruction and answer with numbered paragraphs, so
parsing happens in two stages:

* ``Structured``: a JSON array of objects was found and decoded.
* ``Heuristic``: no usable array; the text is cut into ``Case N:`` /
  ``N.`` segments and each field is picked out with label regexes.

``extract_case_results`` hides which stage produced the list. Neither stage
raises on malformed model output.
"""

from __future__ import annotations

import re
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ValidationError

from ..core.logging import get_logger
from ..models.outputs import DEFAULT_CITATION, DEFAULT_RELEVANCE, DEFAULT_TITLE, CaseResult
from ..utils.json_extractor import extract_json_array

logger = get_logger(__name__)

_SEGMENT_BOUNDARY = re.compile(r"Case \d+:|^\d+\.", re.MULTILINE)

# Multi-line values stop at the next line that opens with a "Label:".
_CONTINUATION = r"(?:\n(?![A-Z]\w*:)[^\n]+)*"

_TITLE_LABEL = re.compile(r"(?i:title):\s*([^\n]+)")
_TITLE_BEFORE_COMMA = re.compile(r"([^,]+),")
_CITATION_LABEL = re.compile(r"(?i:citation):\s*\(?([^\n]+)")
_CITATION_PARENS = re.compile(r"\(([^)]+)\)")
_SUMMARY_LABEL = re.compile(r"(?i:summary):\s*([^\n]+" + _CONTINUATION + ")")
_RELEVANCE_LABEL = re.compile(r"(?i:relevance):\s*([^\n]+" + _CONTINUATION + ")")


class Structured(BaseModel):
    kind: Literal["structured"] = "structured"
    cases: List[CaseResult]


class Heuristic(BaseModel):
    kind: Literal["heuristic"] = "heuristic"
    cases: List[CaseResult]


ExtractionResult = Union[Structured, Heuristic]


def _first_group(text: str, *patterns: re.Pattern) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return None


def _parse_structured(raw: str) -> List[CaseResult]:
    items = extract_json_array(raw)
    if not all(isinstance(item, dict) for item in items):
        raise ValueError("JSON array does not contain case objects")
    try:
        return [CaseResult.model_validate(item) for item in items]
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc


def split_case_segments(raw: str) -> List[str]:
    """Cut free text into per-case segments, dropping blank ones.

    Text before the first boundary is preamble ("Here are some cases:") and is
    dropped; without any boundary the whole text is one segment.
    """
    first = _SEGMENT_BOUNDARY.search(raw)
    if first:
        raw = raw[first.start():]
    return [segment for segment in _SEGMENT_BOUNDARY.split(raw) if segment.strip()]


def parse_case_segment(segment: str) -> CaseResult:
    """Pick the four fields out of one free-text case segment."""
    title = _first_group(segment, _TITLE_LABEL, _TITLE_BEFORE_COMMA)
    citation = _first_group(segment, _CITATION_LABEL, _CITATION_PARENS)
    summary = _first_group(segment, _SUMMARY_LABEL)
    relevance = _first_group(segment, _RELEVANCE_LABEL)

    return CaseResult(
        title=title or DEFAULT_TITLE,
        citation=citation or DEFAULT_CITATION,
        summary=summary or segment.strip(),
        relevance=relevance or DEFAULT_RELEVANCE,
    )


def parse_case_results(raw: Optional[str]) -> ExtractionResult:
    """Return the tagged result of parsing ``raw`` model output."""
    text = raw if isinstance(raw, str) else ""

    try:
        return Structured(cases=_parse_structured(text))
    except ValueError as exc:
        logger.warning("case_law_fallback_parsing", reason=str(exc), length=len(text))

    cases = [parse_case_segment(segment) for segment in split_case_segments(text)]
    return Heuristic(cases=cases)


def extract_case_results(raw: Optional[str]) -> List[CaseResult]:
    """Case results in order of appearance, whichever parsing stage fired."""
    return parse_case_results(raw).cases
