"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files.

    Real environment variables always win over values read from the .env files.
    """

    model_config = SettingsConfigDict(
        extra="ignore",  # Ignore extra fields from .env files
        case_sensitive=False,
        populate_by_name=True,
        env_file=[".env", ".env.local"],  # Load .env first, then .env.local (so .env.local overrides)
        env_file_encoding="utf-8",
    )

    # Application settings
    app_name: str = "Keyword Relay"
    environment: str = Field(default="local", validation_alias="SYSTEM_ENVIRONMENT")
    debug: bool = False

    # CORS settings
    allowed_origins: Optional[List[str]] = None

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = False

    # OpenAI settings
    openai_api_key: str = ""
    openai_model: str = "gpt-5-mini"
    openai_base_url: str = "https://api.openai.com/v1"
    openai_timeout: float = 30.0

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key.strip())


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
