"""Tests for MCP JSON-RPC method handling."""

import json

import pytest

from ns_mcp import __version__
from ns_mcp.mcp.jsonrpc import INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND
from ns_mcp.mcp.protocol import LATEST_PROTOCOL_VERSION, negotiate_protocol_version
from ns_mcp.mcp.session import McpSession
from ns_mcp.services.ns_api import ENDPOINTS
from tests.conftest import call_tool_message, initialize_message


@pytest.fixture
def session():
    return McpSession("test-session")


def test_protocol_version_negotiation():
    assert negotiate_protocol_version("2024-11-05") == "2024-11-05"
    assert negotiate_protocol_version("1999-01-01") == LATEST_PROTOCOL_VERSION
    assert negotiate_protocol_version(None) == LATEST_PROTOCOL_VERSION


@pytest.mark.asyncio
async def test_initialize(protocol_handler, session):
    response = await protocol_handler.handle_message(initialize_message(7, "2024-11-05"), session)

    assert response["id"] == 7
    result = response["result"]
    assert result["protocolVersion"] == "2024-11-05"
    assert "tools" in result["capabilities"]
    assert result["serverInfo"] == {"name": "ns-mcp-server", "version": __version__}
    assert session.protocol_version == "2024-11-05"
    assert session.client_info == {"name": "pytest", "version": "0.0.1"}


@pytest.mark.asyncio
async def test_initialized_notification_has_no_response(protocol_handler, session):
    response = await protocol_handler.handle_message(
        {"jsonrpc": "2.0", "method": "notifications/initialized"}, session
    )

    assert response is None
    assert session.initialized is True


@pytest.mark.asyncio
async def test_ping(protocol_handler, session):
    response = await protocol_handler.handle_message({"jsonrpc": "2.0", "id": "p", "method": "ping"}, session)
    assert response == {"jsonrpc": "2.0", "id": "p", "result": {}}


@pytest.mark.asyncio
async def test_tools_list(protocol_handler, session):
    response = await protocol_handler.handle_message(
        {"jsonrpc": "2.0", "id": 2, "method": "tools/list"}, session
    )

    names = {tool["name"] for tool in response["result"]["tools"]}
    assert "get_travel_advice" in names
    assert len(names) == 8


@pytest.mark.asyncio
async def test_unknown_method(protocol_handler, session):
    response = await protocol_handler.handle_message(
        {"jsonrpc": "2.0", "id": 3, "method": "resources/list"}, session
    )
    assert response["error"]["code"] == METHOD_NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("message", [42, "hello", {"jsonrpc": "2.0", "id": 4}])
async def test_invalid_request(protocol_handler, session, message):
    response = await protocol_handler.handle_message(message, session)
    assert response["error"]["code"] == INVALID_REQUEST


@pytest.mark.asyncio
async def test_client_responses_are_ignored(protocol_handler, session):
    response = await protocol_handler.handle_message({"jsonrpc": "2.0", "id": 9, "result": {}}, session)
    assert response is None


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{}, {"name": 5}, "get_disruptions"])
async def test_tools_call_with_malformed_params(protocol_handler, session, params):
    response = await protocol_handler.handle_message(
        {"jsonrpc": "2.0", "id": 5, "method": "tools/call", "params": params}, session
    )
    assert response["error"]["code"] == INVALID_PARAMS


@pytest.mark.asyncio
async def test_tools_call_success_envelope(protocol_handler, session, fake_ns_api):
    payload = {"payload": [{"name": "Amsterdam Centraal", "stationCode": "ASD", "available": 42}]}
    fake_ns_api.add(ENDPOINTS["ovfiets"], payload)

    response = await protocol_handler.handle_message(
        call_tool_message("get_ovfiets", {"stationCode": "ASD"}), session
    )

    result = response["result"]
    assert "isError" not in result
    assert json.loads(result["content"][0]["text"]) == payload


@pytest.mark.asyncio
async def test_tools_call_tool_error_is_a_result_not_a_jsonrpc_error(protocol_handler, session):
    response = await protocol_handler.handle_message(call_tool_message("get_ovfiets", {}), session)

    assert "error" not in response
    assert response["result"]["isError"] is True
    body = json.loads(response["result"]["content"][0]["text"])
    assert body == {"code": INVALID_PARAMS, "message": "Invalid arguments for get_ovfiets"}


@pytest.mark.asyncio
async def test_batch(protocol_handler, session):
    responses = await protocol_handler.handle_payload(
        [
            {"jsonrpc": "2.0", "method": "notifications/initialized"},
            {"jsonrpc": "2.0", "id": 1, "method": "ping"},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        ],
        session,
    )

    assert [r["id"] for r in responses] == [1, 2]


@pytest.mark.asyncio
async def test_notification_only_batch(protocol_handler, session):
    response = await protocol_handler.handle_payload(
        [{"jsonrpc": "2.0", "method": "notifications/initialized"}], session
    )
    assert response is None


@pytest.mark.asyncio
async def test_empty_batch(protocol_handler, session):
    response = await protocol_handler.handle_payload([], session)
    assert response["error"]["code"] == INVALID_REQUEST


@pytest.mark.asyncio
async def test_unexpected_failure_becomes_internal_error(protocol_handler, session, monkeypatch):
    def boom():
        raise RuntimeError("catalog unavailable")

    monkeypatch.setattr(protocol_handler.dispatcher, "list_tools", boom)

    response = await protocol_handler.handle_message(
        {"jsonrpc": "2.0", "id": 8, "method": "tools/list"}, session
    )
    assert response["error"] == {"code": -32603, "message": "Internal error"}
