"""Application-wide settings for resume-insight."""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file. Stage-specific settings live in
    `ExtractorConfig` (EXTRACTOR_ prefix) and `ScoringConfig` (SCORING_ prefix).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream cap applied before extraction
    max_text_chars: Annotated[int, Field(gt=0)] = Field(
        default=1_000_000,
        description="Maximum number of characters of document text passed to the extractor",
    )

    # Output
    output_format: str = Field(
        default="text",
        description="CLI output format: 'text' or 'json'",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if not isinstance(v, str) or v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output_format."""
        if not isinstance(v, str):
            raise ValueError("output_format must be a string")
        value = v.lower().strip()
        if value not in {"text", "json"}:
            raise ValueError("output_format must be one of: text, json")
        return value


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
