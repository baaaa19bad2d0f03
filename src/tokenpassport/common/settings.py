"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Token passport settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOKENPASSPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Identity
    account: str = Field(
        default="",
        description="Account ID of the target tenant",
    )
    consumer_key: str = Field(
        default="",
        description="Consumer key of the integration record",
    )
    token: str = Field(
        default="",
        description="Token ID for the user/integration pairing",
    )

    # Secrets
    consumer_secret: str = Field(
        default="",
        description="Consumer secret of the integration record",
    )
    token_secret: str = Field(
        default="",
        description="Token secret for the user/integration pairing",
    )

    # Signing
    signature_algorithm: str = Field(
        default="HMAC-SHA256",
        description="Signature algorithm label (HMAC-SHA1, HMAC-SHA256 or an alias)",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level for the CLI",
    )
    log_json: bool = Field(
        default=False,
        description="Emit logs as JSON lines",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
