"""MCP JSON-RPC method handling shared by the HTTP and stdio transports.

The handler knows nothing about HTTP. It takes a decoded JSON-RPC message
(or batch) plus the session it belongs to and returns the response message,
or ``None`` for notifications and client responses.
"""

import logging
from typing import Any

from pydantic import ValidationError

from .. import __version__
from ..models.requests import ToolCallParams
from .dispatcher import ToolDispatcher
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    is_notification,
    is_request,
    jsonrpc_error,
    jsonrpc_response,
)
from .session import McpSession

logger = logging.getLogger(__name__)

# Newest first; an unknown requested version is answered with the newest
SUPPORTED_PROTOCOL_VERSIONS = ("2025-06-18", "2025-03-26", "2024-11-05")
LATEST_PROTOCOL_VERSION = SUPPORTED_PROTOCOL_VERSIONS[0]


def negotiate_protocol_version(requested: Any) -> str:
    if requested in SUPPORTED_PROTOCOL_VERSIONS:
        return requested
    return LATEST_PROTOCOL_VERSION


class McpProtocolHandler:
    """Implements the MCP methods this server supports."""

    def __init__(self, dispatcher: ToolDispatcher, server_name: str, server_version: str = __version__):
        self.dispatcher = dispatcher
        self.server_name = server_name
        self.server_version = server_version

    async def handle_payload(self, payload: Any, session: McpSession) -> dict | list | None:
        """Handle a single message or a batch.

        Returns:
            The response message, a list of responses for a batch, or None
            when nothing needs to be sent back
        """
        if isinstance(payload, list):
            if not payload:
                return jsonrpc_error(None, INVALID_REQUEST, "Empty batch")
            responses = []
            for message in payload:
                response = await self.handle_message(message, session)
                if response is not None:
                    responses.append(response)
            return responses or None
        return await self.handle_message(payload, session)

    async def handle_message(self, message: Any, session: McpSession) -> dict | None:
        if is_notification(message):
            self._handle_notification(message, session)
            return None

        if not is_request(message):
            # Responses to server-initiated requests carry no method; nothing to answer
            if isinstance(message, dict) and ("result" in message or "error" in message):
                return None
            msg_id = message.get("id") if isinstance(message, dict) else None
            return jsonrpc_error(msg_id, INVALID_REQUEST, "Invalid Request")

        msg_id = message["id"]
        method = message["method"]
        params = message.get("params")
        if params is None:
            params = {}

        try:
            if method == "initialize":
                return jsonrpc_response(msg_id, self._initialize(params, session))
            if method == "ping":
                return jsonrpc_response(msg_id, {})
            if method == "tools/list":
                return jsonrpc_response(msg_id, {"tools": self.dispatcher.list_tools()})
            if method == "tools/call":
                return await self._call_tool(msg_id, params)
        except Exception:
            logger.error(f"Error handling {method} in session {session.session_id}", exc_info=True)
            return jsonrpc_error(msg_id, INTERNAL_ERROR, "Internal error")

        return jsonrpc_error(msg_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    def _handle_notification(self, message: dict, session: McpSession) -> None:
        method = message.get("method")
        if method == "notifications/initialized":
            session.initialized = True
        logger.debug(f"Notification {method} in session {session.session_id}")

    def _initialize(self, params: Any, session: McpSession) -> dict:
        requested = params.get("protocolVersion") if isinstance(params, dict) else None
        session.protocol_version = negotiate_protocol_version(requested)
        if isinstance(params, dict) and isinstance(params.get("clientInfo"), dict):
            session.client_info = params["clientInfo"]
        logger.info(
            f"Initialize session {session.session_id}: protocol {session.protocol_version}, "
            f"client {session.client_info}"
        )
        return {
            "protocolVersion": session.protocol_version,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {"name": self.server_name, "version": self.server_version},
        }

    async def _call_tool(self, msg_id: Any, params: Any) -> dict:
        try:
            call = ToolCallParams.model_validate(params)
        except ValidationError:
            return jsonrpc_error(msg_id, INVALID_PARAMS, "Invalid params for tools/call")

        outcome = await self.dispatcher.call_tool(call.name, call.arguments)
        return jsonrpc_response(msg_id, outcome.to_result())
