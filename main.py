#!/usr/bin/env python3
# Copyright (c) 2025 [Harivatsa G A]. All rights reserved.
# This work is licensed under CC BY-NC-ND 4.0.
# https://creativecommons.org/licenses/by-nc-nd/4.0/
# Attribution required. Commercial use and modifications prohibited.

"""
Graylog MCP Server - Main Entry Point
"""

from graylog_mcp.server import main


if __name__ == "__main__":
    main()
