"""Health and version endpoints"""
from fastapi import APIRouter, Depends

from ...core.config import Settings
from ..deps import get_app_settings, get_provider_service
from ...services.provider_service import ProviderService


router = APIRouter()


@router.get("/health")
async def health(
    settings: Settings = Depends(get_app_settings),
    provider_service: ProviderService = Depends(get_provider_service),
):
    """Liveness check plus which upstream services have credentials"""
    return {
        "ok": True,
        "version": settings.app_version,
        "services": provider_service.enabled_services()
    }


@router.get("/version")
async def version(settings: Settings = Depends(get_app_settings)):
    """Version and model info"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "model": settings.chat_model
    }
