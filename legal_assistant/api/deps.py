"""Request-scoped dependencies"""
from fastapi import Request

from ..core.config import Settings
from ..services.assistant_service import LegalAssistantService
from ..services.provider_service import ProviderService


def get_app_settings(request: Request) -> Settings:
    """Get the settings the app was created with"""
    return request.app.state.settings


def get_provider_service(request: Request) -> ProviderService:
    """Get provider service from app state"""
    return request.app.state.provider_service


def get_assistant_service(request: Request) -> LegalAssistantService:
    """Get assistant service from app state"""
    return request.app.state.assistant_service
