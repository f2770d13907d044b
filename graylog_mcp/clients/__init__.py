"""
Clients Module

HTTP client for the Graylog API.
"""

from .http_manager import HTTPManager
from .graylog_client import GraylogClient, format_error

__all__ = [
    "HTTPManager",
    "GraylogClient",
    "format_error",
]
