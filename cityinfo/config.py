"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Database =====
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./cityinfo.db")
    USE_DB_REPOS: bool = os.getenv("USE_DB_REPOS", "false").lower() == "true"
    SEED_DATA: bool = os.getenv("SEED_DATA", "true").lower() == "true"

    # ===== Pagination Defaults =====
    DEFAULT_CITIES_PAGE_SIZE: int = int(os.getenv("DEFAULT_CITIES_PAGE_SIZE", "10"))
    MAX_CITIES_PAGE_SIZE: int = int(os.getenv("MAX_CITIES_PAGE_SIZE", "20"))

    # ===== Validation Limits =====
    POI_NAME_MAX_LENGTH: int = 50
    POI_DESCRIPTION_MAX_LENGTH: int = 200

    # ===== Notifications =====
    NOTIFICATIONS_ENABLED: bool = os.getenv("NOTIFICATIONS_ENABLED", "true").lower() == "true"
    MAIL_FROM: str = os.getenv("MAIL_FROM", "noreply@mycompany.com")
    MAIL_TO: str = os.getenv("MAIL_TO", "admin@mycompany.com")
    SLACK_WEBHOOK_URL: Optional[str] = os.getenv("SLACK_WEBHOOK_URL")
    SMTP_HOST: Optional[str] = os.getenv("SMTP_HOST")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USERNAME: Optional[str] = os.getenv("SMTP_USERNAME")
    SMTP_PASSWORD: Optional[str] = os.getenv("SMTP_PASSWORD")
    NOTIFICATION_TIMEOUT_SECONDS: float = float(os.getenv("NOTIFICATION_TIMEOUT_SECONDS", "10.0"))

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded once.
    """
    return Settings()


settings = get_settings()
