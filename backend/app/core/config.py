"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    app_name: str = "ilytat-designs-api"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./ilytat.db"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Request bodies on these paths are forwarded without key conversion
    transform_exclude_paths: list[str] = ["/docs", "/redoc", "/openapi.json"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
