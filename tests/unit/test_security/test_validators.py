"""
Unit tests for tool argument validation.

Tests query, streamId, rangeSeconds, limit and from/to checks, and the
Valid/Invalid result values the validators return.
"""

import pytest

from graylog_mcp.models.requests import AbsoluteSearchRequest, RelativeSearchRequest
from graylog_mcp.security.validators import (
    Invalid,
    Valid,
    validate_absolute_search,
    validate_limit,
    validate_query,
    validate_range_seconds,
    validate_relative_search,
    validate_stream_id,
    validate_time_range,
)


FROM = "2025-01-01T00:00:00Z"
TO = "2025-01-02T00:00:00Z"


class TestValidateQuery:
    """Tests for validate_query."""

    def test_valid_queries_are_trimmed(self):
        assert validate_query("level:ERROR") == Valid("level:ERROR")
        assert validate_query("  /api/v1/registrations  ") == Valid("/api/v1/registrations")
        assert validate_query("source:nexus AND level:ERROR").value == "source:nexus AND level:ERROR"

    @pytest.mark.parametrize("query", [None, "", "   ", "\t\n", 123, {}, [], True])
    def test_invalid_queries(self, query):
        result = validate_query(query)
        assert isinstance(result, Invalid)
        assert result.error.field == "query"
        assert "'query' parameter is required" in result.message


class TestValidateStreamId:
    """Tests for validate_stream_id."""

    def test_absent_means_no_filter(self):
        assert validate_stream_id({}) == Valid(None)

    @pytest.mark.parametrize("stream_id", ["646221a5bd29672a6f0246d8", "67fc9a38d7e1b33fa7695220", ""])
    def test_strings_accepted(self, stream_id):
        assert validate_stream_id({"streamId": stream_id}) == Valid(stream_id)

    @pytest.mark.parametrize("stream_id", [None, 123, 0, False, {}, ["abc"]])
    def test_non_strings_rejected(self, stream_id):
        result = validate_stream_id({"streamId": stream_id})
        assert isinstance(result, Invalid)
        assert result.error.field == "streamId"
        assert result.message == "'streamId' must be a string"


class TestValidateRangeSeconds:
    """Tests for validate_range_seconds."""

    @pytest.mark.parametrize("value", [1, 60, 900, 3600, 86400, 3600.0])
    def test_in_range(self, value):
        assert validate_range_seconds(value) == Valid(int(value))

    def test_absent_defaults_to_900(self):
        assert validate_range_seconds(None) == Valid(900)

    @pytest.mark.parametrize("value", [0, -1, -3600, 86401, 172800])
    def test_out_of_range(self, value):
        result = validate_range_seconds(value)
        assert isinstance(result, Invalid)
        assert result.error.field == "rangeSeconds"
        assert "1 and 86400" in result.message

    def test_zero_is_rejected_not_defaulted(self):
        assert isinstance(validate_range_seconds(0), Invalid)

    @pytest.mark.parametrize("value", ["900", True, 1.5, [900]])
    def test_non_integers_rejected(self, value):
        result = validate_range_seconds(value)
        assert isinstance(result, Invalid)
        assert "1 and 86400" in result.message


class TestValidateLimit:
    """Tests for validate_limit."""

    @pytest.mark.parametrize("value", [1, 10, 50, 100, 500, 1000])
    def test_in_range(self, value):
        assert validate_limit(value) == Valid(value)

    def test_absent_or_null_defaults_to_50(self):
        assert validate_limit(None) == Valid(50)

    def test_zero_is_rejected_not_defaulted(self):
        result = validate_limit(0)
        assert isinstance(result, Invalid)
        assert result.message == "'limit' must be between 1 and 1000"

    @pytest.mark.parametrize("value", [-1, -100, 1001, 5000])
    def test_out_of_range(self, value):
        result = validate_limit(value)
        assert isinstance(result, Invalid)
        assert result.error.field == "limit"
        assert "between 1 and 1000" in result.message

    @pytest.mark.parametrize("value", ["50", False, 2.5])
    def test_non_integers_rejected(self, value):
        result = validate_limit(value)
        assert isinstance(result, Invalid)
        assert "between 1 and 1000" in result.message


class TestValidateTimeRange:
    """Tests for validate_time_range."""

    def test_valid_range(self):
        assert validate_time_range(FROM, TO) == Valid((FROM, TO))

    def test_invalid_from_named(self):
        result = validate_time_range("yesterday", TO)
        assert result.error.field == "from"
        assert "Invalid 'from' timestamp" in result.message

    def test_invalid_to_named(self):
        result = validate_time_range(FROM, "2025-01-02")
        assert result.error.field == "to"
        assert "Invalid 'to' timestamp" in result.message

    def test_missing_boundaries(self):
        assert validate_time_range(None, TO).error.field == "from"
        assert validate_time_range(FROM, None).error.field == "to"

    def test_equal_timestamps_rejected(self):
        result = validate_time_range(FROM, FROM)
        assert isinstance(result, Invalid)
        assert result.message == "'from' timestamp must be before 'to' timestamp"

    def test_reversed_range_rejected(self):
        assert isinstance(validate_time_range(TO, FROM), Invalid)

    def test_offsets_compared_as_instants(self):
        # 00:00-05:00 is 05:00Z, which is after 04:00Z
        result = validate_time_range("2025-01-01T00:00:00-05:00", "2025-01-01T04:00:00Z")
        assert isinstance(result, Invalid)


class TestValidateAbsoluteSearch:
    """Tests for validate_absolute_search."""

    def test_valid_arguments_build_request(self):
        result = validate_absolute_search({
            "query": " level:ERROR ",
            "from": FROM,
            "to": TO,
            "streamId": "646221a5bd29672a6f0246d8",
            "limit": 100,
        })

        assert isinstance(result, Valid)
        request = result.value
        assert isinstance(request, AbsoluteSearchRequest)
        assert request.query == "level:ERROR"
        assert request.stream_id == "646221a5bd29672a6f0246d8"
        assert request.limit == 100

    def test_default_limit(self):
        result = validate_absolute_search({"query": "x", "from": FROM, "to": TO})
        assert result.value.limit == 50
        assert result.value.stream_id is None

    def test_empty_query_fails_first(self):
        result = validate_absolute_search({"query": "", "from": FROM, "to": TO})
        assert isinstance(result, Invalid)
        assert "'query' parameter is required" in result.message

    def test_query_checked_before_timestamps(self):
        result = validate_absolute_search({"query": None, "from": "bad", "to": "bad"})
        assert result.error.field == "query"

    def test_stream_id_checked(self):
        result = validate_absolute_search({"query": "x", "from": FROM, "to": TO, "streamId": 42})
        assert result.error.field == "streamId"

    def test_limit_zero_rejected(self):
        result = validate_absolute_search({"query": "x", "from": FROM, "to": TO, "limit": 0})
        assert result.error.field == "limit"


class TestValidateRelativeSearch:
    """Tests for validate_relative_search."""

    def test_scenario_level_error_last_hour(self):
        result = validate_relative_search({"query": "level:ERROR", "rangeSeconds": 3600})

        assert isinstance(result, Valid)
        request = result.value
        assert isinstance(request, RelativeSearchRequest)
        assert request.range_seconds == 3600
        assert request.limit == 50

    def test_defaults(self):
        request = validate_relative_search({"query": "x"}).value
        assert request.range_seconds == 900
        assert request.limit == 50

    def test_explicit_nulls_take_defaults(self):
        request = validate_relative_search({"query": "x", "rangeSeconds": None, "limit": None}).value
        assert request.range_seconds == 900
        assert request.limit == 50

    def test_range_checked_before_stream_id(self):
        result = validate_relative_search({"query": "x", "rangeSeconds": 0, "streamId": 1})
        assert result.error.field == "rangeSeconds"

    def test_null_stream_id_rejected(self):
        result = validate_relative_search({"query": "x", "streamId": None})
        assert result.error.field == "streamId"
