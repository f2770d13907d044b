"""
Services Module

Business logic layer for log search and response shaping.
"""

from .log_service import LogService
from .shaping import shape_search_result, shape_stream_list, shape_system_status

__all__ = [
    "LogService",
    "shape_search_result",
    "shape_stream_list",
    "shape_system_status",
]
