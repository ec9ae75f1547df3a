"""JSON-RPC 2.0 helpers for MCP transport.

This module provides utility functions for creating JSON-RPC 2.0
responses and errors according to the specification, plus small
predicates used by the transports to classify incoming messages.

See: https://www.jsonrpc.org/specification
"""

from typing import Any

JSONRPC_VERSION = "2.0"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response.

    Args:
        id: Request ID (must match the request)
        result: The result payload

    Returns:
        JSON-RPC 2.0 response dict
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (can be None for parse errors)
        code: Error code (negative integer)
        message: Human-readable error message

    Returns:
        JSON-RPC 2.0 error response dict
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "error": {"code": code, "message": message}}


def is_request(message: Any) -> bool:
    """True for a message that expects a response (has a method and an id)."""
    return isinstance(message, dict) and "method" in message and "id" in message


def is_notification(message: Any) -> bool:
    """True for a message with a method but no id."""
    return isinstance(message, dict) and "method" in message and "id" not in message


def is_initialize_request(message: Any) -> bool:
    """True if the message is the MCP initialization handshake."""
    return is_request(message) and message.get("method") == "initialize"


def contains_initialize_request(payload: Any) -> bool:
    """True if a single message or any message of a batch is ``initialize``."""
    if isinstance(payload, list):
        return any(is_initialize_request(message) for message in payload)
    return is_initialize_request(payload)
