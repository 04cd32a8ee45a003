"""
CAESAR TOOLKIT - Configuration Management
Centralized configuration using pydantic-settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

    APP_NAME: str = "Caesar Toolkit API"
    APP_VERSION: str = "0.1.0"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8001
    CORS_ORIGINS: List[str] = ["*"]

    DEFAULT_LANGUAGE: str = "english"
    MAX_TEXT_LENGTH: int = 100_000

    EVENTS_BUFFER_SIZE: int = 500

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path = PROJECT_ROOT / "caesar.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
