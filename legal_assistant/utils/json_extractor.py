"""Utility helpers for extracting JSON payloads from model responses."""

from __future__ import annotations

import json
import re
from typing import List

_JSON_BLOCK = re.compile(r"```(?:json)?\s*(\[.*?\])\s*```", re.DOTALL)
_OPEN_BRACKET = re.compile(r"\[")
_DECODER = json.JSONDecoder()


def extract_json_array(text: str) -> List[object]:
    """Extract the first JSON array from an arbitrary text snippet.

    Tries, in order: the whole text, a fenced ```json block, then each ``[``
    from left to right decoded through its matching ``]``.
    Nesting too deep to decode counts as undecodable. Raises ``ValueError``
    when none of them decodes to a list.
    """

    if not isinstance(text, str):
        raise ValueError("Model output is not text")

    try:
        whole = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        pass
    else:
        if isinstance(whole, list):
            return whole

    block = _JSON_BLOCK.search(text)
    if block:
        try:
            candidate = json.loads(block.group(1))
        except (json.JSONDecodeError, RecursionError):
            pass
        else:
            if isinstance(candidate, list):
                return candidate

    for bracket in _OPEN_BRACKET.finditer(text):
        try:
            candidate, _ = _DECODER.raw_decode(text, bracket.start())
        except (json.JSONDecodeError, RecursionError):
            continue
        if isinstance(candidate, list):
            return candidate

    raise ValueError("Could not extract JSON array from response")
