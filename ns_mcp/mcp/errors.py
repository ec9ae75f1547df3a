"""Error taxonomy for MCP tool calls.

Tool-level failures never escape the dispatcher as exceptions; they are
converted into an ``McpError`` and rendered into the tool-result envelope.
"""

from enum import IntEnum

from .jsonrpc import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND


class ErrorCode(IntEnum):
    """Protocol error kinds a tool call can end in."""

    INVALID_PARAMS = INVALID_PARAMS
    METHOD_NOT_FOUND = METHOD_NOT_FOUND
    INTERNAL_ERROR = INTERNAL_ERROR


class McpError(Exception):
    """A protocol-level error carrying one of the ``ErrorCode`` kinds."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": int(self.code), "message": self.message}

    def __repr__(self) -> str:
        return f"McpError(code={self.code.name}, message={self.message!r})"


class ConfigurationError(Exception):
    """Raised when required configuration (such as the NS API key) is missing."""
