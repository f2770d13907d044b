"""
Tool definitions advertised to MCP clients.

The list is static: names, descriptions and JSON input schemas for the
four tools the server provides.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from graylog_mcp.core.constants import (
    DEFAULT_LIMIT,
    DEFAULT_RANGE_SECONDS,
    TOOL_LIST_STREAMS,
    TOOL_SEARCH_ABSOLUTE,
    TOOL_SEARCH_RELATIVE,
    TOOL_SYSTEM_INFO,
)


class ToolDefinition(BaseModel):
    """Name, description and input schema of one tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


TOOL_DEFINITIONS: List[ToolDefinition] = [
    ToolDefinition(
        name=TOOL_SEARCH_ABSOLUTE,
        description=(
            "Search Graylog logs using absolute timestamps (from/to). "
            "Use this for debugging errors with specific timestamps."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": (
                        "Search query using Elasticsearch syntax "
                        "(e.g., '\"/api/v1/registrations\" AND \"PUT\"')"
                    ),
                },
                "from": {
                    "type": "string",
                    "description": "Start timestamp in ISO 8601 format (e.g., '2025-09-29T17:57:26.568Z')",
                },
                "to": {
                    "type": "string",
                    "description": "End timestamp in ISO 8601 format (e.g., '2025-09-30T12:36:20.910Z')",
                },
                "streamId": {
                    "type": "string",
                    "description": "Optional: Stream ID to filter results (use list_streams to find IDs)",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of results (default: 50, max: 1000)",
                    "default": DEFAULT_LIMIT,
                },
            },
            "required": ["query", "from", "to"],
        },
    ),
    ToolDefinition(
        name=TOOL_SEARCH_RELATIVE,
        description=(
            "Search Graylog logs using relative time range (e.g., last 15 minutes). "
            "Use this for recent log queries."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query using Elasticsearch syntax",
                },
                "rangeSeconds": {
                    "type": "number",
                    "description": "Time range in seconds (e.g., 900 = last 15 minutes, max: 86400)",
                    "default": DEFAULT_RANGE_SECONDS,
                },
                "streamId": {
                    "type": "string",
                    "description": "Optional: Stream ID to filter results",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of results (default: 50, max: 1000)",
                    "default": DEFAULT_LIMIT,
                },
            },
            "required": ["query"],
        },
    ),
    ToolDefinition(
        name=TOOL_LIST_STREAMS,
        description=(
            "List all available Graylog streams (applications). "
            "Use this to discover stream IDs for filtering."
        ),
        input_schema={"type": "object", "properties": {}},
    ),
    ToolDefinition(
        name=TOOL_SYSTEM_INFO,
        description=(
            "Get Graylog system information and health status. "
            "Use this to verify connectivity."
        ),
        input_schema={"type": "object", "properties": {}},
    ),
]
