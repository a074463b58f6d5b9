"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Values are read from environment variables (case insensitive) and a local
    ``.env`` file. Example: DATABASE_URL=sqlite+aiosqlite:///./portfolio.db
    """

    # Application metadata
    app_name: str = "Portfolio API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/portfolio"

    # Origins allowed to call the API from a browser (the web frontend)
    cors_origins: list[str] = ["http://localhost:3001"]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
