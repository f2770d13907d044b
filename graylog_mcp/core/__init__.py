"""
Core Module

Provides foundational utilities including configuration,
logging setup, custom exceptions, and application constants.
"""

from .exceptions import (
    GraylogMCPException,
    ConfigurationError,
    GraylogAPIError,
    UnknownToolError,
)
from .config import Settings, load_settings
from .logging_config import setup_logging

__all__ = [
    "GraylogMCPException",
    "ConfigurationError",
    "GraylogAPIError",
    "UnknownToolError",
    "Settings",
    "load_settings",
    "setup_logging",
]
