"""Shared fixtures for the Graylog MCP test suite."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from graylog_mcp.clients.graylog_client import GraylogClient
from graylog_mcp.core.config import Settings
from graylog_mcp.services.log_service import LogService


BASE_URL = "https://graylog.example.com"
API_TOKEN = "test-api-token"


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE_URL, api_token=API_TOKEN)


class RecordingTransport:
    """
    httpx.MockTransport wrapper that records requests.

    ``routes`` maps a URL path to either a response factory or a
    (status, json_body) tuple.
    """

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "no route"})
        if callable(route):
            return route(request)
        status, body = route
        if isinstance(body, (dict, list)):
            return httpx.Response(status, content=json.dumps(body).encode(),
                                  headers={"Content-Type": "application/json"})
        return httpx.Response(status, text=body or "")

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_transport() -> Callable[[Dict[str, Any]], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_service(settings) -> Callable[[RecordingTransport], LogService]:
    def _make(recording: RecordingTransport) -> LogService:
        return LogService(GraylogClient(settings, transport=recording.transport))
    return _make
