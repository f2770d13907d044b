"""
Configuration Module

Immutable process configuration for the Graylog MCP Server.

Settings are read once from the environment at startup and passed
explicitly to the components that need them. Nothing mutates them
afterwards.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from .constants import DEFAULT_REQUEST_TIMEOUT, ENV_API_TOKEN, ENV_BASE_URL
from .exceptions import ConfigurationError


class Settings(BaseModel):
    """
    Read-only server configuration.

    Attributes:
        base_url: Graylog base address (e.g. https://graylog.example.com)
        api_token: Graylog API token, sent as the Basic auth username
        timeout: Per-request timeout in seconds

    Example:
        >>> settings = Settings(base_url="https://graylog.example.com", api_token="abc")
        >>> settings.base_url
        'https://graylog.example.com'
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    base_url: str = Field(..., min_length=1)
    api_token: SecretStr
    timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoints start with '/', so drop the base address's trailing slash."""
        return v.rstrip('/')


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If BASE_URL or API_TOKEN is missing or empty.
            The message names every missing variable.
    """
    if environ is None:
        environ = os.environ

    required = {
        ENV_BASE_URL: (environ.get(ENV_BASE_URL) or "").strip(),
        ENV_API_TOKEN: (environ.get(ENV_API_TOKEN) or "").strip(),
    }
    missing = [name for name, value in required.items() if not value]

    if missing:
        raise ConfigurationError(
            f"Missing environment variables: {', '.join(missing)}",
            missing=missing
        )

    return Settings(
        base_url=required[ENV_BASE_URL],
        api_token=required[ENV_API_TOKEN],
    )
