"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Station search (HeartRails Express) configuration
    heartrails_base_url: str = Field(
        default="http://express.heartrails.com/api/json",
        description="Base URL of the HeartRails Express JSON API",
    )
    heartrails_request_timeout: float = Field(
        default=5.0, description="Connect/read timeout for station search requests in seconds"
    )
    heartrails_resource_timeout: float = Field(
        default=10.0, description="Total timeout for one station search request in seconds"
    )

    # Transit catalog (ODPT) configuration
    odpt_base_url: str = Field(
        default="https://api.odpt.org/api/v4",
        description="Base URL of the ODPT API",
    )
    odpt_consumer_key: str | None = Field(
        default=None,
        description="ODPT consumer key; without it catalog lookups fall back to synthesis",
    )
    odpt_request_timeout: float = Field(
        default=5.0, description="Connect/read timeout for catalog requests in seconds"
    )
    odpt_resource_timeout: float = Field(
        default=10.0, description="Total timeout for one catalog request in seconds"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator(
        "heartrails_request_timeout",
        "heartrails_resource_timeout",
        "odpt_request_timeout",
        "odpt_resource_timeout",
    )
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeouts are positive."""
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @model_validator(mode="after")
    def validate_timeout_order(self) -> "AppConfig":
        """Validate request timeouts do not exceed their resource timeouts."""
        if self.heartrails_request_timeout > self.heartrails_resource_timeout:
            raise ValueError("heartrails_request_timeout must not exceed heartrails_resource_timeout")
        if self.odpt_request_timeout > self.odpt_resource_timeout:
            raise ValueError("odpt_request_timeout must not exceed odpt_resource_timeout")
        return self
