"""
Request Models

Validated search requests, built by graylog_mcp.security.validators.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from graylog_mcp.core.constants import SEARCH_FIELDS


class _SearchRequest(BaseModel):
    """Fields shared by both search variants."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, description="Search query, passed to Graylog verbatim")
    stream_id: Optional[str] = Field(default=None, description="Stream to filter on")
    limit: int = Field(..., ge=1, le=1000, description="Maximum number of messages")

    def _common_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "query": self.query.strip(),
            "limit": self.limit,
            "fields": SEARCH_FIELDS,
        }
        # An empty streamId means no filter
        if self.stream_id:
            params["filter"] = f"streams:{self.stream_id}"
        return params


class AbsoluteSearchRequest(_SearchRequest):
    """Search bounded by two explicit timestamps."""

    from_time: str = Field(..., description="Start timestamp (ISO 8601)")
    to_time: str = Field(..., description="End timestamp (ISO 8601)")

    def to_params(self) -> Dict[str, Any]:
        """Query string parameters for /api/search/universal/absolute."""
        params = self._common_params()
        params["from"] = self.from_time.strip()
        params["to"] = self.to_time.strip()
        return params

    def time_range(self) -> Dict[str, str]:
        """The window as the caller supplied it."""
        return {"from": self.from_time, "to": self.to_time}


class RelativeSearchRequest(_SearchRequest):
    """Search over the last N seconds."""

    range_seconds: int = Field(..., ge=1, le=86400, description="Window length in seconds")

    def to_params(self) -> Dict[str, Any]:
        """Query string parameters for /api/search/universal/relative."""
        params = self._common_params()
        params["range"] = self.range_seconds
        return params

    def time_range(self) -> str:
        return f"Last {self.range_seconds} seconds"
