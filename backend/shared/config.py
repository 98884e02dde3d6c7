"""
Centralized configuration for the DevConnector backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., JWT_*, GITHUB_*, SUPABASE_*).
"""

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
    app_name: str = "DevConnector API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Document store ("memory" keeps everything in process, for local runs)
    store_backend: Literal["supabase", "memory"] = "supabase"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Auth
    jwt_secret: str = ""
    jwt_ttl_hours: int = 10
    bcrypt_rounds: int = 10

    # GitHub repository lookup
    github_api_url: str = "https://api.github.com"
    github_token: str = ""
    github_timeout: float = 10.0
    github_user_agent: str = "devconnector-api"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
