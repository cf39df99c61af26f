"""Indian Kanoon case-law search client"""
from typing import List

import httpx

from ..core.logging import get_logger
from ..models.outputs import KanoonDocument
from .base import UpstreamError, raise_for_upstream_status

logger = get_logger(__name__)


class IndianKanoonClient:
    """Free-text judgment search against api.indiankanoon.org."""

    name = "indian_kanoon"

    def __init__(self, api_token: str, http_client: httpx.AsyncClient, base_url: str = "https://api.indiankanoon.org"):
        self.api_token = api_token
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def search(self, query: str, pagenum: int = 0) -> List[KanoonDocument]:
        """Search judgments; returns the page of hits in the order served."""
        headers = {
            "Authorization": f"Token {self.api_token}",
            "Accept": "application/json"
        }
        params = {"formInput": query, "pagenum": pagenum}

        try:
            response = await self.http_client.post(
                f"{self.base_url}/search/",
                headers=headers,
                params=params
            )
        except httpx.HTTPError as exc:
            logger.error("upstream_request_failed", service="indian_kanoon", error=str(exc))
            raise UpstreamError(f"Error calling Indian Kanoon API: {exc}", service="indian_kanoon") from exc

        raise_for_upstream_status(response, "Indian Kanoon")

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError("Indian Kanoon API returned a non-JSON body", service="indian_kanoon") from exc

        if isinstance(data, dict) and data.get("errmsg"):
            raise UpstreamError(str(data["errmsg"]), service="indian_kanoon")

        docs = data.get("docs") if isinstance(data, dict) else None
        if not isinstance(docs, list):
            return []

        return [KanoonDocument.from_api(doc) for doc in docs if isinstance(doc, dict)]
