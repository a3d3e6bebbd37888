"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "myflix_db"
    mongo_timeout_ms: int = 5000

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 7 * 24 * 60

    # Logging
    log_level: str = "INFO"
    access_log_file: str | None = "log.txt"

    # Static documentation and media
    static_dir: str = "public"

    # CORS allow-list
    cors_allowed_origins: list[str] = [
        "http://localhost:8080",
        "http://localhost:1234",  # Parcel dev server
        "http://localhost:3000",  # Development
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
