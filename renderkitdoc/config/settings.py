"""
Application Settings
===================

Generator settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

import locale
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


def default_locale_country_code() -> str:
    """Return the lower-cased country part of the process locale, or an empty string."""
    try:
        language_code = locale.getlocale()[0]
    except ValueError:
        return ""
    if not language_code or "_" not in language_code:
        return ""
    return language_code.split("_", 1)[1].lower()


class Settings(BaseSettings):
    """Main generator settings with environment variable support."""

    # Application Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )

    # Generation Configuration
    output_directory: Path = Field(
        default=Path("./target"), description="Directory receiving the renderkitdoc tree"
    )
    render_kit_id: str = Field(default="HTML_BASIC", description="Render-kit to document")
    impl_version_number: Optional[str] = Field(
        default=None, description="Version string shown next to the render-kit title"
    )
    locale_country_code: str = Field(
        default_factory=default_locale_country_code,
        description="Country code used to pick localized descriptions",
    )
    asset_directory: Optional[Path] = Field(
        default=None, description="Directory overriding the packaged static assets"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Optional rotating log file")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("locale_country_code")
    @classmethod
    def normalize_country_code(cls, v: str) -> str:
        """Country codes are compared case-insensitively."""
        return v.strip().lower()

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="RENDERKITDOC_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings
