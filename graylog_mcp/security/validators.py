"""
Input Validation Module

Validates tool arguments before any request reaches Graylog.

Validators do not raise. Each returns either ``Valid(value)`` or
``Invalid(FieldError(...))`` so callers can branch on the outcome;
the tool dispatcher turns an ``Invalid`` into an error envelope.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from graylog_mcp.core.constants import (
    DEFAULT_LIMIT,
    DEFAULT_RANGE_SECONDS,
    ERROR_INVALID_FROM,
    ERROR_INVALID_TO,
    ERROR_LIMIT_RANGE,
    ERROR_LIMIT_TYPE,
    ERROR_QUERY_REQUIRED,
    ERROR_RANGE_SECONDS_RANGE,
    ERROR_RANGE_SECONDS_TYPE,
    ERROR_STREAM_ID_TYPE,
    ERROR_TIME_ORDER,
    MAX_LIMIT,
    MAX_RANGE_SECONDS,
    MIN_LIMIT,
    MIN_RANGE_SECONDS,
)
from graylog_mcp.models.requests import AbsoluteSearchRequest, RelativeSearchRequest


T = TypeVar('T')


@dataclass(frozen=True)
class FieldError:
    """A validation failure tied to one tool argument."""

    field: str
    message: str


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    error: FieldError

    @property
    def message(self) -> str:
        return self.error.message


ValidationResult = Union[Valid[T], Invalid]


def parse_timestamp(value: Any) -> Optional[datetime.datetime]:
    """
    Parse an ISO 8601 timestamp into an aware datetime.

    A trailing 'Z' is read as UTC. Timestamps without an offset are
    taken as local time. Impossible calendar dates (e.g. Feb 30) do not
    parse.

    Args:
        value: Candidate timestamp

    Returns:
        Aware datetime, or None if the value does not parse
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'

    try:
        parsed = datetime.datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.astimezone()

    return parsed


def is_valid_timestamp(value: Any) -> bool:
    """
    Check that a value is usable as an absolute search boundary.

    The value must be a non-empty string containing a literal 'T'
    date/time separator and must parse as an ISO 8601 timestamp.
    A bare date such as '2025-09-29' is rejected.

    Example:
        >>> is_valid_timestamp('2025-09-29T17:57:26.568Z')
        True
        >>> is_valid_timestamp('2025-09-29')
        False
    """
    if not value or not isinstance(value, str):
        return False

    if 'T' not in value:
        return False

    return parse_timestamp(value) is not None


def validate_query(query: Any) -> ValidationResult[str]:
    """Require a string that is non-empty after trimming."""
    if not isinstance(query, str) or not query.strip():
        return Invalid(FieldError('query', ERROR_QUERY_REQUIRED))
    return Valid(query.strip())


def validate_stream_id(arguments: Mapping[str, Any]) -> ValidationResult[Optional[str]]:
    """
    Validate the optional streamId argument.

    Absence means no stream filter. A key that is present must hold a
    string, so an explicit null is rejected.
    """
    if 'streamId' not in arguments:
        return Valid(None)

    stream_id = arguments['streamId']
    if not isinstance(stream_id, str):
        return Invalid(FieldError('streamId', ERROR_STREAM_ID_TYPE))
    return Valid(stream_id)


def _validate_bounded_int(
    value: Any,
    field: str,
    default: int,
    minimum: int,
    maximum: int,
    range_message: str,
    type_message: str
) -> ValidationResult[int]:
    # Only absent/null take the default; 0 is an out-of-range value.
    if value is None:
        return Valid(default)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Invalid(FieldError(field, type_message))

    if isinstance(value, float) and not value.is_integer():
        return Invalid(FieldError(field, type_message))

    if value < minimum or value > maximum:
        return Invalid(FieldError(field, range_message))

    return Valid(int(value))


def validate_limit(value: Any) -> ValidationResult[int]:
    """Validate the result cap: default 50, range [1, 1000]."""
    return _validate_bounded_int(
        value,
        'limit',
        DEFAULT_LIMIT,
        MIN_LIMIT,
        MAX_LIMIT,
        ERROR_LIMIT_RANGE,
        ERROR_LIMIT_TYPE
    )


def validate_range_seconds(value: Any) -> ValidationResult[int]:
    """Validate the relative window: default 900, range [1, 86400]."""
    return _validate_bounded_int(
        value,
        'rangeSeconds',
        DEFAULT_RANGE_SECONDS,
        MIN_RANGE_SECONDS,
        MAX_RANGE_SECONDS,
        ERROR_RANGE_SECONDS_RANGE,
        ERROR_RANGE_SECONDS_TYPE
    )


def validate_time_range(from_time: Any, to_time: Any) -> ValidationResult[tuple]:
    """
    Validate an absolute from/to pair.

    Each boundary is checked on its own first so the message names the
    offending field, then 'from' must be strictly before 'to'.
    """
    if not is_valid_timestamp(from_time):
        return Invalid(FieldError('from', ERROR_INVALID_FROM))
    if not is_valid_timestamp(to_time):
        return Invalid(FieldError('to', ERROR_INVALID_TO))

    if parse_timestamp(from_time) >= parse_timestamp(to_time):
        return Invalid(FieldError('from', ERROR_TIME_ORDER))

    return Valid((from_time, to_time))


def validate_absolute_search(arguments: Mapping[str, Any]) -> ValidationResult[AbsoluteSearchRequest]:
    """
    Validate search_logs_absolute arguments.

    Checks, in order: query, from, to, from < to, streamId, limit.

    Example:
        >>> result = validate_absolute_search({
        ...     'query': 'level:ERROR',
        ...     'from': '2025-01-01T00:00:00Z',
        ...     'to': '2025-01-02T00:00:00Z',
        ... })
        >>> result.value.limit
        50
    """
    query = validate_query(arguments.get('query'))
    if isinstance(query, Invalid):
        return query

    time_range = validate_time_range(arguments.get('from'), arguments.get('to'))
    if isinstance(time_range, Invalid):
        return time_range

    stream_id = validate_stream_id(arguments)
    if isinstance(stream_id, Invalid):
        return stream_id

    limit = validate_limit(arguments.get('limit'))
    if isinstance(limit, Invalid):
        return limit

    from_time, to_time = time_range.value
    return Valid(AbsoluteSearchRequest(
        query=query.value,
        from_time=from_time,
        to_time=to_time,
        stream_id=stream_id.value,
        limit=limit.value,
    ))


def validate_relative_search(arguments: Mapping[str, Any]) -> ValidationResult[RelativeSearchRequest]:
    """
    Validate search_logs_relative arguments.

    Checks, in order: query, rangeSeconds, streamId, limit.
    """
    query = validate_query(arguments.get('query'))
    if isinstance(query, Invalid):
        return query

    range_seconds = validate_range_seconds(arguments.get('rangeSeconds'))
    if isinstance(range_seconds, Invalid):
        return range_seconds

    stream_id = validate_stream_id(arguments)
    if isinstance(stream_id, Invalid):
        return stream_id

    limit = validate_limit(arguments.get('limit'))
    if isinstance(limit, Invalid):
        return limit

    return Valid(RelativeSearchRequest(
        query=query.value,
        range_seconds=range_seconds.value,
        stream_id=stream_id.value,
        limit=limit.value,
    ))
