"""
Application configuration using Pydantic Settings.

Analysis thresholds are read from environment variables (or a local .env file)
so that deployments can tune them without code changes.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local", "production"] = "local"
    DEBUG: bool = True
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    # ===========================================
    # Programme analysis
    # ===========================================
    # Bucket for milestones without a trade when grouping resource conflicts
    DEFAULT_TRADE_BUCKET: str = "General"

    # Days between a prerequisite's end and the earliest suggested start
    START_BUFFER_DAYS: int = Field(default=1, ge=0)

    # In-progress milestones below this completion are treated as at risk
    LOW_PROGRESS_THRESHOLD: int = Field(default=50, ge=0, le=100)

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == "local"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
