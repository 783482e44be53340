"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "NOVA Performance Engine"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["NOVA Lab"]
    AUTHORS_EMAILS: List[str] = ["N.A."]
    PROJECT_URL: str = ""

    # Dev server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOG_JSON: bool = False

    # Readiness engine
    READINESS_LOOKBACK_HOURS: float = 96.0
    RECOMMENDATION_LIMIT: Optional[int] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
