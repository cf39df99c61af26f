"""Application configuration via pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "legal-assistant-backend"
    app_version: str = "1.0.0"
    app_env: str = "development"

    together_api_key: Optional[str] = None
    together_base_url: str = "https://api.together.xyz/v1"
    chat_model: str = "meta-llama/Llama-3-70b-chat-hf"

    transcription_api_key: Optional[str] = None
    transcription_base_url: str = "https://api.groq.com/openai/v1"
    transcription_model: str = "whisper-large-v3"

    indian_kanoon_api_token: Optional[str] = None
    indian_kanoon_base_url: str = "https://api.indiankanoon.org"

    http_timeout_seconds: float = 60.0
    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"
    log_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
