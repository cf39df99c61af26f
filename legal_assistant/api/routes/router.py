"""API router registration."""

from fastapi import APIRouter

from .case_law import router as case_law_router
from .general_chat import router as general_chat_router
from .health import router as health_router
from .indian_kanoon import router as indian_kanoon_router
from .legal_assist import router as legal_assist_router
from .transcribe import router as transcribe_router


def create_api_router() -> APIRouter:
    """Create and configure the /api router"""
    router = APIRouter(prefix="/api")

    router.include_router(health_router, tags=["health"])
    router.include_router(legal_assist_router, tags=["assistant"])
    router.include_router(general_chat_router, tags=["assistant"])
    router.include_router(case_law_router, tags=["case-law"])
    router.include_router(indian_kanoon_router, tags=["case-law"])
    router.include_router(transcribe_router, tags=["speech"])

    return router
