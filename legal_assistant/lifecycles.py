"""Startup/shutdown lifecycle hooks"""
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from .core.config import get_settings
from .core.logging import get_logger
from .services.assistant_service import LegalAssistantService
from .services.provider_service import ProviderService


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown"""

    logger.info("application_starting")

    settings = getattr(app.state, "settings", None) or get_settings()
    app.state.settings = settings

    http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(max_keepalive_connections=20, max_connections=100)
    )
    app.state.http_client = http_client

    provider_service = ProviderService(settings, http_client)
    assistant_service = LegalAssistantService(settings)

    app.state.provider_service = provider_service
    app.state.assistant_service = assistant_service

    logger.info("application_started", services=provider_service.enabled_services())

    try:
        yield
    finally:
        logger.info("application_shutting_down")
        await http_client.aclose()
        logger.info("application_shutdown_complete")
