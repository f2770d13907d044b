"""
Custom Exceptions Module

Defines the exception hierarchy for the Graylog MCP Server.

All application-specific exceptions inherit from GraylogMCPException
for easier error handling and filtering. Input validation failures are
not exceptions; see graylog_mcp.security.validators.
"""

from typing import Optional, Dict, Any, List


class GraylogMCPException(Exception):
    """
    Base exception for all Graylog MCP Server errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary with additional error context
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary with error information
        """
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(GraylogMCPException):
    """
    Raised when required configuration is missing at startup.

    Attributes:
        missing: Names of the settings that were not provided
    """

    def __init__(
        self,
        message: str,
        missing: Optional[List[str]] = None,
        details: Optional[Dict] = None
    ):
        error_details = details or {}
        if missing:
            error_details['missing'] = list(missing)

        super().__init__(message, error_details)
        self.missing = list(missing or [])


class GraylogAPIError(GraylogMCPException):
    """
    Raised when a Graylog API request fails.

    The message is already normalized into operator guidance; the raw
    status and body are kept in the details for logging.

    Attributes:
        status_code: HTTP status code from Graylog (None if no response)
        response_body: Response body from Graylog (if available)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        details: Optional[Dict] = None
    ):
        error_details = details or {}
        if status_code:
            error_details['status_code'] = status_code
        if response_body:
            error_details['response_body'] = response_body

        super().__init__(message, error_details)
        self.status_code = status_code
        self.response_body = response_body


class UnknownToolError(GraylogMCPException):
    """Raised when a tool call names a tool the server does not provide."""

    def __init__(self, tool_name: str, details: Optional[Dict] = None):
        error_details = details or {}
        error_details['tool_name'] = tool_name

        super().__init__(f"Unknown tool: {tool_name}", error_details)
        self.tool_name = tool_name
