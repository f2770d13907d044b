"""
Models Module

Pydantic models for validated requests and tool results.
"""

from .requests import (
    AbsoluteSearchRequest,
    RelativeSearchRequest,
)

from .responses import (
    LogMessage,
    SearchResult,
    StreamDescriptor,
    StreamList,
    SystemStatus,
    TextContent,
    ToolResult,
)

__all__ = [
    # Requests
    "AbsoluteSearchRequest",
    "RelativeSearchRequest",
    # Responses
    "LogMessage",
    "SearchResult",
    "StreamDescriptor",
    "StreamList",
    "SystemStatus",
    "TextContent",
    "ToolResult",
]
