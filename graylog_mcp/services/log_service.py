"""
Log Service Module

Business logic behind the four tools: validate, call Graylog, shape.
"""

from typing import Any, Dict, Union

from loguru import logger

from graylog_mcp.clients.graylog_client import GraylogClient
from graylog_mcp.models.responses import SearchResult, StreamList, SystemStatus
from graylog_mcp.security.validators import (
    Invalid,
    validate_absolute_search,
    validate_relative_search,
)
from .shaping import shape_search_result, shape_stream_list, shape_system_status


class LogService:
    """
    Service for log operations.

    Search methods return an ``Invalid`` instead of calling Graylog when
    the arguments fail validation. Remote failures raise GraylogAPIError.

    Example:
        >>> service = LogService(GraylogClient(settings))
        >>> result = await service.search_logs_relative({"query": "level:ERROR"})
        >>> result.time_range
        'Last 900 seconds'
    """

    def __init__(self, client: GraylogClient):
        """
        Initialize log service.

        Args:
            client: Graylog API client
        """
        self._client = client

    async def search_logs_absolute(self, arguments: Dict[str, Any]) -> Union[SearchResult, Invalid]:
        """
        Search logs between two timestamps.

        Args:
            arguments: Tool arguments (query, from, to, streamId, limit)

        Returns:
            SearchResult, or Invalid if the arguments were rejected
        """
        validated = validate_absolute_search(arguments)
        if isinstance(validated, Invalid):
            return validated

        request = validated.value
        logger.debug(
            f"Absolute search: from={request.from_time}, to={request.to_time}, "
            f"limit={request.limit}, stream={request.stream_id}"
        )

        data = await self._client.search_absolute(request)
        return shape_search_result(data, request.time_range())

    async def search_logs_relative(self, arguments: Dict[str, Any]) -> Union[SearchResult, Invalid]:
        """
        Search logs over the last N seconds.

        Args:
            arguments: Tool arguments (query, rangeSeconds, streamId, limit)

        Returns:
            SearchResult, or Invalid if the arguments were rejected
        """
        validated = validate_relative_search(arguments)
        if isinstance(validated, Invalid):
            return validated

        request = validated.value
        logger.debug(
            f"Relative search: range={request.range_seconds}s, "
            f"limit={request.limit}, stream={request.stream_id}"
        )

        data = await self._client.search_relative(request)
        return shape_search_result(data, request.time_range())

    async def list_streams(self, arguments: Dict[str, Any]) -> StreamList:
        """List non-default streams sorted by title. Takes no arguments."""
        data = await self._client.list_streams()
        result = shape_stream_list(data)
        logger.debug(f"Found {result.total} streams")
        return result

    async def get_system_info(self, arguments: Dict[str, Any]) -> SystemStatus:
        """Get Graylog version and health. Takes no arguments."""
        data = await self._client.get_system_info()
        return shape_system_status(data)
