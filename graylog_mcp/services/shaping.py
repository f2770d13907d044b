"""
Response shaping.

Maps raw Graylog JSON onto the stable result models returned to the
client.
"""

from typing import Any, Dict, List, Union

from graylog_mcp.models.responses import (
    LogMessage,
    SearchResult,
    StreamDescriptor,
    StreamList,
    SystemStatus,
)


def _as_dict(data: Any) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def shape_search_result(data: Any, time_range: Union[Dict[str, Any], str]) -> SearchResult:
    """
    Shape a universal search response.

    Entries that are null or carry no nested 'message' object are
    dropped; the rest keep their original order.

    Args:
        data: Raw response with total_results, built_query and messages
        time_range: Window echoed back to the caller

    Returns:
        SearchResult
    """
    data = _as_dict(data)

    messages: List[LogMessage] = []
    for entry in data.get('messages') or []:
        if not isinstance(entry, dict):
            continue
        payload = entry.get('message')
        if not isinstance(payload, dict):
            continue
        messages.append(LogMessage(
            timestamp=payload.get('timestamp'),
            message=payload.get('message'),
            source=payload.get('source'),
            level=payload.get('level'),
        ))

    return SearchResult(
        total_results=data.get('total_results') or 0,
        query=data.get('built_query'),
        time_range=time_range,
        messages=messages,
    )


def _title_sort_key(stream: Dict[str, Any]):
    title = stream.get('title') or ''
    title = str(title)
    # Case-insensitive first, original spelling breaks ties
    return (title.casefold(), title)


def shape_stream_list(data: Any) -> StreamList:
    """
    Shape the /api/streams response.

    Default streams (is_default true) are excluded and the remainder is
    sorted by title.
    """
    data = _as_dict(data)

    streams = [
        s for s in (data.get('streams') or [])
        if isinstance(s, dict) and s.get('is_default') is not True
    ]
    streams.sort(key=_title_sort_key)

    descriptors = [
        StreamDescriptor(
            id=s.get('id'),
            title=s.get('title'),
            description=s.get('description') or '',
            disabled=s.get('disabled'),
        )
        for s in streams
    ]

    return StreamList(total=len(descriptors), streams=descriptors)


def shape_system_status(data: Any) -> SystemStatus:
    """Project /api/system onto the seven reported fields."""
    data = _as_dict(data)

    return SystemStatus(
        version=data.get('version'),
        codename=data.get('codename'),
        cluster_id=data.get('cluster_id'),
        node_id=data.get('node_id'),
        hostname=data.get('hostname'),
        is_processing=data.get('is_processing'),
        timezone=data.get('timezone'),
    )
