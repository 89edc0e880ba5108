"""
Shared configuration management for the Trade360 SDK.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PackageCredentials(BaseModel):
    """Identifies the package a call is made on behalf of."""

    model_config = ConfigDict(frozen=True)

    package_id: int
    username: str
    password: str = Field(repr=False)


class ClientSettings(BaseModel):
    """Settings a named client is materialized from."""

    model_config = ConfigDict(frozen=True)

    base_url: Optional[str] = None
    credentials: Optional[PackageCredentials] = None


class Trade360Settings(BaseSettings):
    """SDK configuration read from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="TRADE360_",
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="info")

    # Provider endpoints
    customers_api_base_url: Optional[str] = Field(default=None)
    snapshot_api_base_url: Optional[str] = Field(default=None)

    # Package credentials
    prematch_package_credentials: Optional[PackageCredentials] = Field(default=None)
    inplay_package_credentials: Optional[PackageCredentials] = Field(default=None)

    # Transport
    request_timeout: float = Field(default=30.0)

    # Retry
    retry_max_attempts: int = Field(default=4)
    retry_base_delay: float = Field(default=2.0)
    retry_max_delay: float = Field(default=30.0)
    retry_jitter: bool = Field(default=True)

    # Circuit breaker
    breaker_failure_threshold: int = Field(default=3)
    breaker_recovery_timeout: float = Field(default=30.0)
    breaker_sampling_window: Optional[float] = Field(default=None)


def get_settings(**overrides) -> Trade360Settings:
    """Load SDK settings, with keyword overrides taking precedence."""
    return Trade360Settings(**overrides)
