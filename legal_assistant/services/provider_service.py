"""Upstream client registry built from configuration."""

from __future__ import annotations

from typing import Dict, List, Optional

import httpx

from ..core.config import Settings
from ..providers.base import LLMProvider
from ..providers.indian_kanoon import IndianKanoonClient
from ..providers.together import TogetherProvider
from ..providers.transcription import WhisperTranscriber


class ProviderService:
    """Holds one client per upstream service whose credential is configured."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.http_client = http_client
        self._providers: Dict[str, LLMProvider] = {}
        self._transcriber: Optional[WhisperTranscriber] = None
        self._case_search: Optional[IndianKanoonClient] = None

        if settings.together_api_key:
            self._providers["together"] = TogetherProvider(
                settings.together_api_key, http_client, base_url=settings.together_base_url
            )
        if settings.transcription_api_key:
            self._transcriber = WhisperTranscriber(
                settings.transcription_api_key,
                http_client,
                base_url=settings.transcription_base_url,
                model=settings.transcription_model,
            )
        if settings.indian_kanoon_api_token:
            self._case_search = IndianKanoonClient(
                settings.indian_kanoon_api_token, http_client, base_url=settings.indian_kanoon_base_url
            )

    def get_chat_provider(self) -> Optional[LLMProvider]:
        return self._providers.get("together")

    def get_transcriber(self) -> Optional[WhisperTranscriber]:
        return self._transcriber

    def get_case_search(self) -> Optional[IndianKanoonClient]:
        return self._case_search

    def enabled_services(self) -> List[str]:
        enabled = list(self._providers)
        if self._transcriber is not None:
            enabled.append(self._transcriber.name)
        if self._case_search is not None:
            enabled.append(self._case_search.name)
        return enabled
