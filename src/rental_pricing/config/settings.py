"""
Service settings using Pydantic Settings.
Values are read from the environment or a .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the API server, dashboard and smoke check."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RENTAL_PRICING_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    # API server
    api_host: str = Field(
        default="0.0.0.0",
        description="Bind address for uvicorn"
    )
    api_port: int = Field(
        default=8000,
        description="Port for uvicorn"
    )
    api_reload: bool = Field(
        default=False,
        description="Enable uvicorn auto-reload (development only)"
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # Remote API used by check_api.py
    api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of a deployed API"
    )

    # Earnings comparison
    competitor_payout_pct: int = Field(
        default=65,
        ge=0,
        le=100,
        description="Typical competitor payout used by the earnings estimator (%)"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
