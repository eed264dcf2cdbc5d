"""Application settings using Pydantic Settings for environment-based configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the calendar-parser service.

    All settings can be overridden via environment variables.
    Prefix is not used to allow standard env var names (e.g., OPENAI_API_KEY, PORT).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False

    # OpenAI Responses API
    openai_api_key: SecretStr | None = Field(
        default=None,
        description="Credential for the Responses API. Required per parse request, not at startup.",
    )
    openai_model: str = Field(
        default="gpt-5",
        description="Model identifier sent with every extraction request",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the Responses API",
    )
    openai_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Upstream request timeout. Unset means wait for the transport to resolve.",
    )

    # API server
    host: str = "0.0.0.0"
    port: int = Field(default=5176, ge=1, le=65535)
    cors_origins: str = "*"
    static_dir: str | None = Field(
        default=None,
        description="Directory with a static frontend to mount at '/'",
    )

    # Observability
    metrics_port: int = 8000

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def openai_configured(self) -> bool:
        """Check if the Responses API credential is present."""
        return self.openai_api_key is not None and bool(
            self.openai_api_key.get_secret_value().strip()
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    Clear cache with get_settings.cache_clear() if needed.
    """
    return Settings()
