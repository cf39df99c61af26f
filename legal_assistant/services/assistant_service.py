"""Assistant service: runs the three chat features through one completion path"""
import time
from typing import List

from ..core.config import Settings
from ..core.logging import get_logger
from ..models.outputs import CaseResult
from ..prompts.prompt import (
    PromptSpec,
    build_case_law_prompt,
    build_general_chat_prompt,
    build_legal_analysis_prompt,
)
from ..providers.base import LLMProvider, PromptPacket
from .case_extraction import parse_case_results

logger = get_logger(__name__)


class LegalAssistantService:
    """Builds prompts, calls the chat provider and shapes the reply"""

    def __init__(self, settings: Settings):
        self.model = settings.chat_model

    async def legal_analysis(self, provider: LLMProvider, query: str) -> str:
        """IPC analysis of a scenario, as markdown"""
        return await self._complete(provider, build_legal_analysis_prompt(query), feature="legal_analysis")

    async def general_chat(self, provider: LLMProvider, query: str) -> str:
        """General legal-information answer, as markdown"""
        return await self._complete(provider, build_general_chat_prompt(query), feature="general_chat")

    async def case_law(self, provider: LLMProvider, query: str) -> List[CaseResult]:
        """Relevant Indian case law for the query"""
        content = await self._complete(provider, build_case_law_prompt(query), feature="case_law")
        result = parse_case_results(content)
        logger.info("case_law_parsed", parser=result.kind, cases=len(result.cases))
        return result.cases

    async def _complete(self, provider: LLMProvider, spec: PromptSpec, feature: str) -> str:
        packet = PromptPacket(
            system_prompt=spec.system_prompt,
            user_prompt=spec.user_prompt,
            model=self.model,
            temperature=spec.temperature,
            max_tokens=spec.max_tokens
        )

        start = time.perf_counter()
        response = await provider.generate(packet)
        latency_ms = int((time.perf_counter() - start) * 1000)

        logger.info(
            "completion_received",
            feature=feature,
            provider=response.provider,
            model=response.model,
            finish_reason=response.finish_reason,
            latency_ms=latency_ms
        )
        return response.content
