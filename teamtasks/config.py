"""Application configuration"""

import logging
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_SECRET_KEY = "dev-secret-change-me"
MEMORY_DATABASE = ":memory:"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    app_name: str = "Team Tasks API"
    debug: bool = False
    environment: str = "development"  # "development" or "production"

    # Security
    secret_key: str = DEFAULT_SECRET_KEY
    access_token_expire_minutes: int = 60 * 24  # 24 hours

    # Database (":memory:" keeps everything in process)
    database_path: str = "data/teamtasks.json"

    # CORS
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def validate_production_settings(settings: Settings) -> list:
    """Validate that all required settings are configured for production"""
    errors = []

    if settings.secret_key == DEFAULT_SECRET_KEY:
        errors.append("SECRET_KEY must be changed from default value")

    if settings.database_path == MEMORY_DATABASE:
        errors.append("DATABASE_PATH must point to a file in production")

    return errors


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance, failing fast on bad production config"""
    base_settings = Settings()

    if base_settings.environment == "production":
        errors = validate_production_settings(base_settings)
        if errors:
            for error in errors:
                logger.error(f"Production config error: {error}")
            raise RuntimeError("Invalid production configuration: " + "; ".join(errors))

    return base_settings


# Convenience access
settings = get_settings()
