"""
Application Configuration - Environment settings and constants.

Loads configuration from environment variables (and an optional .env file)
with sensible defaults. Uses Pydantic Settings for validation and type safety.

The GitHub token is read once here and handed to the repository client at
construction; nothing else in the application reads the environment.
"""

from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Usage:
        from devgate.core.config import get_settings
        settings = get_settings()
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "devgate"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # HTTP Server Configuration
    host: str = "127.0.0.1"
    port: int = 3333  # PORT
    api_prefix: str = "/api"
    allowed_origins: List[str] = ["*"]

    # Pyright Configuration
    pyright_command: str = "pyright"
    analyzer_timeout_seconds: Optional[float] = 300  # 0 or unset disables

    # GitHub Configuration
    github_token: Optional[str] = None  # GITHUB_TOKEN
    github_api_url: str = "https://api.github.com"
    github_timeout_seconds: float = 30

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase for logging compatibility."""
        return v.upper()

    @field_validator("analyzer_timeout_seconds")
    @classmethod
    def disable_zero_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Treat a zero or negative timeout as 'wait indefinitely'."""
        if v is not None and v <= 0:
            return None
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
