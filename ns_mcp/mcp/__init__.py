"""MCP (Model Context Protocol) module.

This module contains the protocol side of the server:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- Error taxonomy
- Argument validation, dispatch and result formatting
  (import from .validation, .dispatcher and .formatter directly)
- Session state and the JSON-RPC method handler
  (import from .session and .protocol directly)

The HTTP routes live in mcp_transport.py, the stdio loop in stdio.py.
"""

from .errors import ConfigurationError, ErrorCode, McpError
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS

# Note: dispatcher/formatter depend on the NS client, which imports .errors.
# Import them directly to keep this package importable from services.

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    # Errors
    "ErrorCode",
    "McpError",
    "ConfigurationError",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
