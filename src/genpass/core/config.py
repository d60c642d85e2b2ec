"""Configuration management for GenPass.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-in-production-use-openssl-rand-hex-32"


class Settings(BaseSettings):
    """GenPass configuration settings.

    Settings are loaded from environment variables prefixed with
    ``GENPASS_`` and from a local .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GENPASS_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Settings
    app_name: str = "GenPass"
    environment: Literal["development", "production", "testing"] = "development"

    # Token Settings
    secret_key: SecretStr = Field(
        default=SecretStr(DEFAULT_SECRET_KEY),
        description="Secret key for magic link HMAC signing",
    )
    nonce_byte_length: int = Field(default=32, gt=0)
    magic_link_ttl_seconds: int = Field(default=900, gt=0)
    magic_link_base_url: str = "http://localhost:8000"
    magic_link_path: str = "/auth/magic-link"
    otp_ttl_seconds: int = Field(default=300, gt=0)

    # Email Settings
    email_provider: Literal["console", "mock"] = "console"
    email_from_address: str = "noreply@genpass.local"
    email_from_name: str = "GenPass"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: SecretStr) -> SecretStr:
        """Reject an empty signing key."""
        if not v.get_secret_value():
            raise ValueError("secret_key must not be empty")
        return v

    @field_validator("magic_link_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended."""
        return v.rstrip("/")

    @field_validator("magic_link_path")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        """Make sure the magic link path is absolute."""
        return v if v.startswith("/") else f"/{v}"

    @model_validator(mode="after")
    def validate_production_secret(self) -> "Settings":
        """Refuse the placeholder secret key outside development."""
        if self.is_production and self.secret_key.get_secret_value() == DEFAULT_SECRET_KEY:
            raise ValueError(
                "GENPASS_SECRET_KEY must be set in production. "
                "Generate one with: openssl rand -hex 32"
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @property
    def signing_key(self) -> bytes:
        """Get the HMAC signing key as bytes."""
        return self.secret_key.get_secret_value().encode("utf-8")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
