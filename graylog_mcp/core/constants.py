"""
Application Constants

Centralized constants used throughout the application.
"""

# Application metadata
APP_NAME = "graylog-mcp"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Graylog MCP Server - log search for AI assistants"

# HTTP status codes
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_SERVER_ERROR = 500

# Default timeouts (seconds)
DEFAULT_REQUEST_TIMEOUT = 30.0

# Environment variables
ENV_BASE_URL = "BASE_URL"
ENV_API_TOKEN = "API_TOKEN"
ENV_LOG_LEVEL = "LOG_LEVEL"

# Graylog uses the API token as username and this literal as password
TOKEN_PASSWORD = "token"

# Graylog API endpoints
ENDPOINT_SEARCH_ABSOLUTE = "/api/search/universal/absolute"
ENDPOINT_SEARCH_RELATIVE = "/api/search/universal/relative"
ENDPOINT_STREAMS = "/api/streams"
ENDPOINT_SYSTEM = "/api/system"

# Fields requested from the search endpoints
SEARCH_FIELDS = "message,timestamp,source,level"

# Search defaults and limits
DEFAULT_LIMIT = 50
MIN_LIMIT = 1
MAX_LIMIT = 1000
DEFAULT_RANGE_SECONDS = 900
MIN_RANGE_SECONDS = 1
MAX_RANGE_SECONDS = 86400

# HTTP headers
HEADER_ACCEPT = "Accept"
CONTENT_TYPE_JSON = "application/json"

# Log levels
LOG_LEVEL_DEBUG = "DEBUG"
LOG_LEVEL_INFO = "INFO"
LOG_LEVEL_WARNING = "WARNING"
LOG_LEVEL_ERROR = "ERROR"
LOG_LEVEL_CRITICAL = "CRITICAL"

# Tool names
TOOL_SEARCH_ABSOLUTE = "search_logs_absolute"
TOOL_SEARCH_RELATIVE = "search_logs_relative"
TOOL_LIST_STREAMS = "list_streams"
TOOL_SYSTEM_INFO = "get_system_info"

# Validation messages
ERROR_QUERY_REQUIRED = "'query' parameter is required and must be a non-empty string"
ERROR_INVALID_FROM = "Invalid 'from' timestamp. Use ISO 8601 format (e.g., '2025-09-29T17:57:26.568Z')"
ERROR_INVALID_TO = "Invalid 'to' timestamp. Use ISO 8601 format (e.g., '2025-09-30T12:36:20.910Z')"
ERROR_TIME_ORDER = "'from' timestamp must be before 'to' timestamp"
ERROR_STREAM_ID_TYPE = "'streamId' must be a string"
ERROR_LIMIT_RANGE = f"'limit' must be between {MIN_LIMIT} and {MAX_LIMIT}"
ERROR_LIMIT_TYPE = f"'limit' must be a whole number between {MIN_LIMIT} and {MAX_LIMIT}"
ERROR_RANGE_SECONDS_RANGE = (
    f"'rangeSeconds' must be between {MIN_RANGE_SECONDS} and {MAX_RANGE_SECONDS} (24 hours)"
)
ERROR_RANGE_SECONDS_TYPE = (
    f"'rangeSeconds' must be a whole number between {MIN_RANGE_SECONDS} and {MAX_RANGE_SECONDS} (24 hours)"
)

# Remote API error messages
ERROR_AUTH_FAILED = "Authentication failed. Check API_TOKEN in MCP configuration."
ERROR_INVALID_QUERY_DEFAULT = "Check query syntax and parameters"
ERROR_ENDPOINT_NOT_FOUND = "Endpoint not found. Check BASE_URL in MCP configuration."
ERROR_SET_IN_CLIENT_CONFIG = "Set these in your MCP client configuration."
