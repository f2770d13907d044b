"""
Graylog MCP Server - Model Context Protocol server for Graylog log search.

This package exposes Graylog log search, stream discovery and system
status as MCP tools for AI assistants.
"""

__version__ = "1.0.0"
__author__ = "Harivatsa G A"

from .core.config import Settings, load_settings
from .server import create_server, main

__all__ = [
    "Settings",
    "load_settings",
    "create_server",
    "main",
]
