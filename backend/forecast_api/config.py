"""Configuration settings"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Settings priority:
#
# - Arguments passed when instantiating Settings(...)
# - Environment variables from the OS
# - .env file (if configured via SettingsConfigDict(env_file=...))
# - Default values in this class


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file="../.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Weather Forecast API"

    # OS settings
    DTAP: str = Field(
        default="DEV",
        description="DTAP environment (DEV/tests/ACC/PROD)",
    )
    IMAGE_TAG: str = Field(
        default="undefined",
        description="Image tag from container build",
    )

    # OpenAPI document settings
    USE_API_VERSION_DESCRIPTION_PROVIDER_TO_BUILD_OPENAPI_DOCS: bool = Field(
        default=False,
        description=(
            "Build one OpenAPI document per discovered API version instead of "
            "the hand-declared document list"
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
