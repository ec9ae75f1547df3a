"""Tool-result envelopes for MCP ``tools/call`` responses.

``format_success`` and ``format_error`` are the only places where tool
outcomes are turned into the wire shape. ``format_error`` is total: whatever
it is given, it returns a valid error envelope.
"""

import json
import logging
from typing import Any

import httpx

from ..services.ns_api import NSApiError
from .errors import ConfigurationError, ErrorCode, McpError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while processing the request."


def create_mcp_error(code: ErrorCode, message: str) -> McpError:
    """Build a protocol error with one of the known codes."""
    return McpError(code, message)


def _text_content(text: str) -> list[dict]:
    return [{"type": "text", "text": text}]


def format_success(payload: Any) -> dict:
    """Wrap a payload as a single pretty-printed JSON text item."""
    return {"content": _text_content(json.dumps(payload, indent=2, ensure_ascii=False))}


def to_mcp_error(error: Any) -> McpError:
    """Classify a caught value into an ``McpError``. Never raises."""
    if isinstance(error, McpError):
        return error

    if isinstance(error, NSApiError):
        return McpError(ErrorCode.INTERNAL_ERROR, str(error))

    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return McpError(
            ErrorCode.INTERNAL_ERROR,
            f"NS API request failed with status {status}: {error.response.reason_phrase}",
        )

    if isinstance(error, ConfigurationError):
        return McpError(ErrorCode.INTERNAL_ERROR, str(error))

    try:
        exc_info = error if isinstance(error, BaseException) else None
        logger.error(f"Unexpected tool error: {error!r}", exc_info=exc_info)
    except Exception:
        # A broken __repr__ must not turn formatting into a failure
        logger.error("Unexpected tool error of unprintable value")
    return McpError(ErrorCode.INTERNAL_ERROR, UNEXPECTED_ERROR_MESSAGE)


def format_error(error: Any) -> dict:
    """Render any caught value as an ``isError`` tool result."""
    mcp_error = to_mcp_error(error)
    return {
        "content": _text_content(json.dumps(mcp_error.to_dict(), indent=2)),
        "isError": True,
    }
