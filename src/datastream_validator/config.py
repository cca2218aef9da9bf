"""Configuration management for the datastream validator."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidatorSettings(BaseSettings):
    """Tuning for the structural checks."""

    model_config = SettingsConfigDict(env_prefix="VALIDATOR_")

    # Window (in bytes, from the first audio frame) searched for the Xing VBR header
    mp3_xing_search_bytes: int = 4096
    # Skip a leading ID3v2 tag before looking at MPEG frame data
    mp3_skip_id3v2: bool = False

    # Largest image (width * height) accepted; None disables the check
    image_max_pixels: int | None = None


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Datastream Validator"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # API settings
    api_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"
    log_file: str | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # File upload limits
    max_upload_size: int = 500 * 1024 * 1024  # 500MB

    # Sub-configs
    validator: ValidatorSettings = Field(default_factory=ValidatorSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
