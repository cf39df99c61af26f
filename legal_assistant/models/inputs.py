"""Request models for the assistant endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class QueryRequest(BaseModel):
    """Body shared by the text endpoints.

    ``query`` is optional at the schema level so that a blank or missing query
    is answered with the 400 ``MISSING_QUERY`` envelope rather than a 422.
    """

    model_config = ConfigDict(extra="ignore")

    query: Optional[str] = None

    @property
    def cleaned_query(self) -> str:
        return (self.query or "").strip()
