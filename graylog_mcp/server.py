#!/usr/bin/env python3
# Copyright (c) 2025 [Harivatsa G A]. All rights reserved.
# This work is licensed under CC BY-NC-ND 4.0.
# https://creativecommons.org/licenses/by-nc-nd/4.0/
# Attribution required. Commercial use and modifications prohibited.
"""
Graylog MCP Server

This server implements the Model Context Protocol (MCP) to give AI
assistants read access to Graylog: log search by absolute or relative
time window, stream discovery and system health.
"""

import argparse
import asyncio
import os
import sys
from typing import Any, Dict, List, Optional

import httpx
import mcp.types as types
from dotenv import load_dotenv
from loguru import logger
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from graylog_mcp.clients.graylog_client import GraylogClient
from graylog_mcp.core.config import Settings, load_settings
from graylog_mcp.core.constants import (
    APP_NAME,
    APP_VERSION,
    ENV_LOG_LEVEL,
    ERROR_SET_IN_CLIENT_CONFIG,
    LOG_LEVEL_INFO,
)
from graylog_mcp.core.exceptions import ConfigurationError
from graylog_mcp.core.logging_config import setup_logging
from graylog_mcp.dispatcher import ToolDispatcher
from graylog_mcp.models.responses import ToolResult
from graylog_mcp.observability.tracing import setup_tracing
from graylog_mcp.services.log_service import LogService
from graylog_mcp.tools import TOOL_DEFINITIONS


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Convert the dispatcher envelope into the SDK result type."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item.text) for item in result.content],
        isError=bool(result.is_error),
    )


def create_server(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> Server:
    """
    Build the MCP server for one Settings value.

    Args:
        settings: Server configuration
        transport: Optional httpx transport for the Graylog client (tests)

    Returns:
        Low-level MCP server with list_tools and call_tool handlers
    """
    server = Server(APP_NAME, version=APP_VERSION)
    dispatcher = ToolDispatcher(LogService(GraylogClient(settings, transport=transport)))

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=definition.name,
                description=definition.description,
                inputSchema=definition.input_schema,
            )
            for definition in TOOL_DEFINITIONS
        ]

    # Arguments are checked by the validators, not against the JSON schema
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        result = await dispatcher.dispatch(name, arguments)
        return to_call_tool_result(result)

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the client disconnects."""
    server = create_server(settings)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Server running and ready")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description=f"{APP_NAME} v{APP_VERSION} - Graylog MCP Server"
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help='Logging level (default: LOG_LEVEL env var or INFO)'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Load environment variables from .env file
    load_dotenv()

    setup_logging(level=args.log_level or os.getenv(ENV_LOG_LEVEL, LOG_LEVEL_INFO))

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.critical(f"FATAL: {e.message}")
        logger.critical(ERROR_SET_IN_CLIENT_CONFIG)
        sys.exit(1)

    setup_tracing()
    logger.info(f"Starting {APP_NAME} v{APP_VERSION}")
    logger.info(f"Connected to {settings.base_url}")

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


if __name__ == "__main__":
    main()
