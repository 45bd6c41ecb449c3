"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Run parameters for a class-name word census."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None

    target_language: str = "Java"
    max_repositories: int = Field(default=1000, ge=1)
    file_extension: str = ".java"
    retry_ceiling: int = Field(default=15, ge=1)

    api_base: str = "https://api.github.com"
    # GitHub search returns at most 100 items per page
    page_size: int = Field(default=100, ge=1, le=100)
    page_delay: float = Field(default=2.0, ge=0)
    cache_dir: Path = Path.home() / ".cache/github-class-words"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
