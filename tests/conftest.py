"""
Test configuration and shared fixtures for NS MCP server tests.

The NS API is never contacted: every client is backed by an
``httpx.MockTransport`` that serves canned JSON and records the requests
it receives.
"""

from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from ns_mcp.config import Settings
from ns_mcp.mcp.dispatcher import ToolDispatcher
from ns_mcp.mcp.protocol import McpProtocolHandler
from ns_mcp.server import create_app
from ns_mcp.services.ns_api import NSApiClient

TEST_API_KEY = "test-ns-key"


class FakeNSApi:
    """In-memory stand-in for the NS API portal."""

    def __init__(self):
        self.routes: dict[str, tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload: Any, status_code: int = 200) -> None:
        self.routes[path] = (status_code, payload)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, payload = self.routes.get(request.url.path, (404, {"message": "Not found"}))
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)


def initialize_message(msg_id: int = 1, protocol_version: str = "2025-03-26") -> dict:
    return {
        "jsonrpc": "2.0",
        "id": msg_id,
        "method": "initialize",
        "params": {
            "protocolVersion": protocol_version,
            "capabilities": {},
            "clientInfo": {"name": "pytest", "version": "0.0.1"},
        },
    }


def call_tool_message(name: str, arguments: dict | None = None, msg_id: int = 2) -> dict:
    params: dict[str, Any] = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    return {"jsonrpc": "2.0", "id": msg_id, "method": "tools/call", "params": params}


@pytest.fixture
def fake_ns_api():
    """Fake NS API with nothing registered"""
    return FakeNSApi()


@pytest.fixture
def api_client(fake_ns_api):
    """NS client with a configured key, talking to the fake API"""
    return NSApiClient(TEST_API_KEY, transport=httpx.MockTransport(fake_ns_api))


@pytest.fixture
def unconfigured_api_client(fake_ns_api):
    """NS client without an API key"""
    return NSApiClient(None, transport=httpx.MockTransport(fake_ns_api))


@pytest.fixture
def dispatcher(api_client):
    return ToolDispatcher(api_client)


@pytest.fixture
def protocol_handler(dispatcher):
    return McpProtocolHandler(dispatcher, server_name="ns-mcp-server")


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, ns_api_key=TEST_API_KEY, sse_keepalive_seconds=0.01)


@pytest.fixture
def app(test_settings, api_client):
    """Application wired to the fake NS API"""
    return create_app(test_settings, api_client=api_client)


@pytest.fixture
def client(app):
    """FastAPI test client with lifespan events"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_id(client):
    """Id of a freshly initialized session"""
    response = client.post("/mcp", json=initialize_message())
    assert response.status_code == 200
    return response.headers["mcp-session-id"]
