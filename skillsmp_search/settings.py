"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_URL = "https://skillsmp.com/api/v1"


class Settings(BaseSettings):
    """Settings for the SkillsMP search client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    skillsmp_api_key: str | None = None
    skillsmp_base_url: str = BASE_URL
    skillsmp_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
