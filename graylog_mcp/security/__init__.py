"""
Security Module

Input validation for tool arguments.
"""

from .validators import (
    FieldError,
    Valid,
    Invalid,
    is_valid_timestamp,
    validate_absolute_search,
    validate_relative_search,
)

__all__ = [
    "FieldError",
    "Valid",
    "Invalid",
    "is_valid_timestamp",
    "validate_absolute_search",
    "validate_relative_search",
]
