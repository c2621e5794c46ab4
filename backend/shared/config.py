"""
Centralized configuration for the Shelter Trials backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., TELEGRAM_*, SUPABASE_*).
"""

from datetime import time
from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Shelter Trials API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Storage: "memory" keeps everything in-process, "supabase" uses the tables
    # from migrations/001_adoptions.sql
    storage_backend: Literal["memory", "supabase"] = "memory"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Telegram (notification transport)
    telegram_bot_token: str = ""
    telegram_api_url: str = "https://api.telegram.org"
    notification_timeout: float = 10.0

    # Daily sweeps, in shelter local time
    timezone: str = "UTC"
    enable_scheduler: bool = True
    compliance_sweep_time: time = time(21, 1)
    completion_sweep_time: time = time(23, 1)
    report_deadline: str = "21:00"
    missed_report_escalation_days: int = 2


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
