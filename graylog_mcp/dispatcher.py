"""
Tool Dispatcher

Routes a tool call by name to the log service and always returns a
well-formed ToolResult. No exception leaves dispatch().
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from loguru import logger
from pydantic import BaseModel

from graylog_mcp.core.constants import (
    TOOL_LIST_STREAMS,
    TOOL_SEARCH_ABSOLUTE,
    TOOL_SEARCH_RELATIVE,
    TOOL_SYSTEM_INFO,
)
from graylog_mcp.core.exceptions import GraylogMCPException, UnknownToolError
from graylog_mcp.core.logging_config import add_tool_context
from graylog_mcp.models.responses import ToolResult
from graylog_mcp.security.validators import Invalid
from graylog_mcp.services.log_service import LogService


Handler = Callable[[Dict[str, Any]], Awaitable[Any]]


class ToolDispatcher:
    """
    Maps tool names onto LogService operations.

    Example:
        >>> dispatcher = ToolDispatcher(LogService(GraylogClient(settings)))
        >>> result = await dispatcher.dispatch("foo", {})
        >>> result.text
        'Error: Unknown tool: foo'
    """

    def __init__(self, service: LogService):
        self._handlers: Dict[str, Handler] = {
            TOOL_SEARCH_ABSOLUTE: service.search_logs_absolute,
            TOOL_SEARCH_RELATIVE: service.search_logs_relative,
            TOOL_LIST_STREAMS: service.list_streams,
            TOOL_SYSTEM_INFO: service.get_system_info,
        }

    @property
    def tool_names(self):
        return list(self._handlers)

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Run one tool call.

        Args:
            name: Tool name
            arguments: Tool arguments (None is treated as empty)

        Returns:
            Success envelope with the JSON result, or an error envelope
            whose text starts with "Error: "
        """
        tool_logger = add_tool_context(name)
        tool_logger.info(f"Tool call: {name}")

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)

            outcome = await handler(dict(arguments or {}))

            if isinstance(outcome, Invalid):
                tool_logger.warning(f"{name} rejected '{outcome.error.field}': {outcome.message}")
                return ToolResult.failure(outcome.message)

            if not isinstance(outcome, BaseModel):
                raise TypeError(f"{name} returned unexpected type {type(outcome).__name__}")

            return ToolResult.success(outcome)

        except GraylogMCPException as e:
            tool_logger.warning(f"{name} failed: {e.message}")
            return ToolResult.failure(e.message)
        except Exception as e:
            tool_logger.exception(f"Unexpected error in {name}: {e}")
            return ToolResult.failure(str(e))
