"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # GITHUB API
    # ========================================================================
    GITHUB_TOKEN: str = Field(default="", description="Personal access token (empty = anonymous)")
    GITHUB_API_URL: str = Field(default="https://api.github.com")
    GITHUB_TIMEOUT_SECONDS: float = Field(default=30, gt=0, description="Request timeout (seconds)")
    GITHUB_USER_AGENT: str = Field(default="hubwire")

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")
