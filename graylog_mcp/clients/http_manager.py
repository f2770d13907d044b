"""
HTTP Manager Module

Builds httpx clients configured for the Graylog API.
"""

import httpx
from typing import Optional

from graylog_mcp.core.config import Settings
from graylog_mcp.core.constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    TOKEN_PASSWORD,
)


class HTTPManager:
    """
    HTTP client factory bound to one Settings value.

    Every client carries Basic auth (token as username, the literal
    'token' as password), an Accept: application/json header and the
    configured timeout. Each call gets a fresh client that is closed
    when its async with block exits.

    Example:
        >>> manager = HTTPManager(settings)
        >>> async with manager.get_client() as client:
        ...     response = await client.get(f"{settings.base_url}/api/system")
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize HTTP manager.

        Args:
            settings: Server configuration
            transport: Optional transport override (used by tests)
        """
        self._settings = settings
        self._transport = transport
        self._timeout = httpx.Timeout(settings.timeout)

    @property
    def timeout(self) -> httpx.Timeout:
        return self._timeout

    def get_client(self) -> httpx.AsyncClient:
        """
        Get a configured HTTP client.

        Returns:
            AsyncClient; use it as an async context manager
        """
        return httpx.AsyncClient(
            auth=httpx.BasicAuth(
                self._settings.api_token.get_secret_value(),
                TOKEN_PASSWORD
            ),
            headers={HEADER_ACCEPT: CONTENT_TYPE_JSON},
            timeout=self._timeout,
            transport=self._transport,
        )
