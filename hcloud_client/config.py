"""Client configuration with pydantic-settings.

Every field can be set through an ``HCLOUD_``-prefixed environment variable
or a ``.env`` file. Arguments passed to ``Client`` take precedence.

Usage:
    from hcloud_client import Client, ClientSettings

    settings = ClientSettings()  # reads HCLOUD_TOKEN, HCLOUD_ENDPOINT, ...
    async with Client(settings=settings) as client:
        servers = await client.server.all()
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.hetzner.cloud/v1"


class ClientSettings(BaseSettings):
    """Settings for the Hetzner Cloud client.

    All fields are optional; a missing token is only reported when the
    first request is made.
    """

    model_config = SettingsConfigDict(
        env_prefix="HCLOUD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token: str | None = Field(
        default=None,
        description="API token sent as a Bearer credential",
    )
    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        min_length=8,
        description="Base URL of the API, without trailing slash",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single HTTP request (seconds)",
    )

    # User-Agent suffix for the calling application
    application_name: str | None = Field(
        default=None,
        description="Name of the application using the client",
    )
    application_version: str | None = Field(
        default=None,
        description="Version of the application using the client",
    )

    # Logging configuration
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("endpoint")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> ClientSettings:
    return ClientSettings()
