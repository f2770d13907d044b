"""
Response Models

Pydantic models for tool results and the envelope that wraps them.
"""

import json
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class LogMessage(BaseModel):
    """Single log message; values are passed through from Graylog."""

    timestamp: Optional[Any] = None
    message: Optional[Any] = None
    source: Optional[Any] = None
    level: Optional[Any] = None


class SearchResult(BaseModel):
    """Result of an absolute or relative search."""

    total_results: Any = Field(
        default=0,
        description="Total number of matching messages"
    )
    query: Optional[Any] = Field(
        default=None,
        description="Query as built by Graylog"
    )
    time_range: Union[Dict[str, Any], str] = Field(
        ...,
        description="Absolute {from, to} window or a 'Last N seconds' phrase"
    )
    messages: List[LogMessage] = Field(default_factory=list)


class StreamDescriptor(BaseModel):
    """A Graylog stream."""

    id: Optional[Any] = None
    title: Optional[Any] = None
    description: Any = ""
    disabled: Optional[Any] = None


class StreamList(BaseModel):
    """Non-default streams, sorted by title."""

    total: int
    streams: List[StreamDescriptor]


class SystemStatus(BaseModel):
    """Graylog system information snapshot."""

    version: Optional[Any] = None
    codename: Optional[Any] = None
    cluster_id: Optional[Any] = None
    node_id: Optional[Any] = None
    hostname: Optional[Any] = None
    is_processing: Optional[Any] = None
    timezone: Optional[Any] = None


class TextContent(BaseModel):
    """Text content item of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    Envelope returned for every tool call.

    Example:
        >>> ToolResult.failure("Unknown tool: foo").model_dump(by_alias=True, exclude_none=True)
        {'content': [{'type': 'text', 'text': 'Error: Unknown tool: foo'}], 'isError': True}
    """

    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: Optional[bool] = Field(default=None, alias="isError")

    @property
    def text(self) -> str:
        return "".join(item.text for item in self.content)

    @classmethod
    def success(cls, payload: BaseModel) -> "ToolResult":
        """Wrap a result model as pretty-printed JSON text."""
        text = json.dumps(payload.model_dump(mode="json"), indent=2, ensure_ascii=False)
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=f"Error: {message}")], is_error=True)
