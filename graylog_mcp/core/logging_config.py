"""
Logging Configuration Module

Loguru setup for the server. All output goes to stderr because stdout
carries the MCP stdio protocol stream.
"""

import sys
from loguru import logger
from typing import Optional


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
) -> None:
    """
    Configure logging with loguru.

    Replaces any previously registered sinks with a single stderr sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (None for default)

    Example:
        >>> setup_logging(level="DEBUG")
        >>> logger.info("Server started")
    """
    logger.remove()

    if format_string is None:
        format_string = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

    logger.add(
        sys.stderr,
        format=format_string,
        level=level.upper(),
        colorize=False,
        backtrace=True,
        diagnose=False,
    )

    logger.debug(f"Logging configured with level: {level.upper()}")


def add_tool_context(tool_name: str):
    """
    Bind the tool name to the logger for one tool call.

    Args:
        tool_name: Name of the tool being invoked

    Returns:
        Logger with tool context
    """
    return logger.bind(tool=tool_name)
