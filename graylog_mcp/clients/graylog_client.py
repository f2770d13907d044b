"""
Graylog Client Module

Client for the Graylog REST API.

Each call is a single GET with no retries. Any failure is converted
into a GraylogAPIError whose message tells the operator what to check.
"""

from typing import Any, Dict, Optional

import httpx
from loguru import logger

from graylog_mcp.core.config import Settings
from graylog_mcp.core.constants import (
    ENDPOINT_SEARCH_ABSOLUTE,
    ENDPOINT_SEARCH_RELATIVE,
    ENDPOINT_STREAMS,
    ENDPOINT_SYSTEM,
    ERROR_AUTH_FAILED,
    ERROR_ENDPOINT_NOT_FOUND,
    ERROR_INVALID_QUERY_DEFAULT,
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
    HTTP_UNAUTHORIZED,
)
from graylog_mcp.core.exceptions import GraylogAPIError
from graylog_mcp.models.requests import AbsoluteSearchRequest, RelativeSearchRequest
from graylog_mcp.observability.tracing import get_tracer
from .http_manager import HTTPManager

tracer = get_tracer(__name__)


def _server_message(response: httpx.Response) -> Optional[str]:
    """Extract the 'message' field from a JSON error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None

    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return None


def format_error(error: Exception, base_url: str) -> str:
    """
    Normalize a failed request into one human-readable message.

    Args:
        error: Exception raised while calling Graylog
        base_url: Configured Graylog address, named in connectivity errors

    Returns:
        Message suitable for an error envelope

    Example:
        >>> format_error(httpx.ConnectTimeout("timed out"), "https://graylog.local")
        'Cannot reach Graylog at https://graylog.local. Check network connectivity.'
    """
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        server_message = _server_message(error.response)

        if status == HTTP_UNAUTHORIZED:
            return ERROR_AUTH_FAILED
        if status == HTTP_BAD_REQUEST:
            return f"Invalid query: {server_message or ERROR_INVALID_QUERY_DEFAULT}"
        if status == HTTP_NOT_FOUND:
            return ERROR_ENDPOINT_NOT_FOUND
        if status == HTTP_INTERNAL_SERVER_ERROR:
            return f"Graylog server error: {server_message or str(error)}"
        return f"Graylog API error ({status}): {server_message or str(error)}"

    # Request was sent (or attempted) but no response came back
    if isinstance(error, httpx.TransportError):
        return f"Cannot reach Graylog at {base_url}. Check network connectivity."

    return str(error)


class GraylogClient:
    """
    Client for Graylog API operations.

    Example:
        >>> graylog = GraylogClient(settings)
        >>> info = await graylog.get_system_info()
        >>> info['version']
        '5.2.0'
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Graylog client.

        Args:
            settings: Server configuration
            transport: Optional httpx transport override (used by tests)
        """
        self._settings = settings
        self._http = HTTPManager(settings, transport=transport)

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    async def request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a Graylog endpoint and return the parsed JSON body.

        Args:
            endpoint: Path starting with '/', e.g. '/api/system'
            params: Query string parameters

        Returns:
            Parsed JSON body, unmodified

        Raises:
            GraylogAPIError: On any failure, with a normalized message
        """
        url = f"{self._settings.base_url}{endpoint}"

        with tracer.start_as_current_span("graylog.request") as span:
            span.set_attribute("graylog.endpoint", endpoint)

            try:
                async with self._http.get_client() as client:
                    response = await client.get(url, params=params or {})
                    span.set_attribute("http.status_code", response.status_code)
                    response.raise_for_status()
                    return response.json()
            except Exception as e:
                status_code = None
                response_body = None
                if isinstance(e, httpx.HTTPStatusError):
                    status_code = e.response.status_code
                    response_body = e.response.text

                logger.error(
                    f"Graylog request failed: {endpoint} "
                    f"(status={status_code}, error={type(e).__name__}: {e})"
                )
                raise GraylogAPIError(
                    format_error(e, self._settings.base_url),
                    status_code=status_code,
                    response_body=response_body,
                    details={"endpoint": endpoint}
                ) from e

    async def search_absolute(self, request: AbsoluteSearchRequest) -> Any:
        """Run a search bounded by explicit timestamps."""
        return await self.request(ENDPOINT_SEARCH_ABSOLUTE, request.to_params())

    async def search_relative(self, request: RelativeSearchRequest) -> Any:
        """Run a search over the last N seconds."""
        return await self.request(ENDPOINT_SEARCH_RELATIVE, request.to_params())

    async def list_streams(self) -> Any:
        return await self.request(ENDPOINT_STREAMS)

    async def get_system_info(self) -> Any:
        return await self.request(ENDPOINT_SYSTEM)
