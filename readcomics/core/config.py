"""
Configuration Management

Centralized configuration using Pydantic Settings.
All environment variables are validated and type-checked.

Usage:
    from readcomics.core.config import settings

    base_url = settings.base_url
    timeout = settings.request_timeout

Every field can be overridden with a READCOMICS_-prefixed environment
variable (e.g. READCOMICS_REQUEST_TIMEOUT=10) or in a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="READCOMICS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Site
    base_url: str = "https://readcomicsonline.ru/"
    max_latest_page: int = 10

    # HTTP Settings
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    # Logging Settings
    log_level: str = "INFO"
    logging_url: Optional[str] = None  # Optional remote log sink

    # Server Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_rate_limit: str = "60/minute"  # Per client IP, protects the upstream site
    cors_origins: List[str] = ["*"]


# Global settings instance
settings = Settings()
