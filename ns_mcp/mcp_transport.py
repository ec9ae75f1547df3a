"""MCP Streamable HTTP transport.

Multiplexes MCP sessions over ``/mcp`` using the ``mcp-session-id`` header:

- POST: client-to-server JSON-RPC. Without a session header only a payload
  carrying an ``initialize`` request is accepted, and it creates a new
  session whose id is returned in the response header.
- GET: server-to-client event stream for an existing session.
- DELETE: explicit session termination.

Session problems are plain HTTP 400 responses; they never reach the MCP
protocol layer. Any unexpected exception is logged and answered with a 500.
"""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse

from .api.deps import (
    PROTOCOL_VERSION_HEADER,
    SESSION_HEADER,
    AppSettings,
    ProtocolHandler,
    SessionId,
    Sessions,
)
from .mcp.jsonrpc import PARSE_ERROR, contains_initialize_request, jsonrpc_error
from .mcp.session import McpSession, SessionManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MCP Transport"])

MISSING_SESSION = "No valid session ID provided"
UNKNOWN_SESSION = "Unknown or expired session ID"


def _bad_request(reason: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": f"Bad Request: {reason}"})


def _internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def _session_headers(session: McpSession) -> dict[str, str]:
    headers = {SESSION_HEADER: session.session_id}
    if session.protocol_version:
        headers[PROTOCOL_VERSION_HEADER] = session.protocol_version
    return headers


def _resolve(sessions: SessionManager, session_id: str | None) -> tuple[McpSession | None, str]:
    if not session_id:
        return None, MISSING_SESSION
    session = sessions.get(session_id)
    if session is None:
        return None, UNKNOWN_SESSION
    return session, ""


@router.post("/mcp")
async def mcp_post(
    request: Request,
    session_id: SessionId,
    sessions: Sessions,
    handler: ProtocolHandler,
):
    """Handle a client-to-server JSON-RPC message or batch."""
    try:
        try:
            payload = json.loads(await request.body())
        except ValueError:
            return JSONResponse(status_code=400, content=jsonrpc_error(None, PARSE_ERROR, "Parse error"))

        if session_id:
            session = sessions.get(session_id)
            if session is None:
                return _bad_request(UNKNOWN_SESSION)
            if contains_initialize_request(payload):
                return _bad_request("Session already initialized")
        elif contains_initialize_request(payload):
            # Registered synchronously, so the id is resolvable by the very next request
            session = sessions.create()
        else:
            return _bad_request(MISSING_SESSION)

        response = await handler.handle_payload(payload, session)
        headers = _session_headers(session)
        if response is None:
            return Response(status_code=202, headers=headers)
        return JSONResponse(content=response, headers=headers)
    except Exception:
        logger.error("MCP POST failed", exc_info=True)
        return _internal_error()


@router.get("/mcp")
async def mcp_get(session_id: SessionId, sessions: Sessions, settings: AppSettings):
    """Open the server-to-client event stream of an existing session."""
    try:
        session, reason = _resolve(sessions, session_id)
        if session is None:
            return _bad_request(reason)
        if session.stream_attached:
            return JSONResponse(
                status_code=409,
                content={"error": "Conflict: Only one event stream is allowed per session"},
            )
        return StreamingResponse(
            session.event_stream(settings.sse_keepalive_seconds),
            media_type="text/event-stream",
            headers={
                **_session_headers(session),
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",  # Disable nginx buffering
            },
        )
    except Exception:
        logger.error("MCP GET failed", exc_info=True)
        return _internal_error()


@router.delete("/mcp")
async def mcp_delete(session_id: SessionId, sessions: Sessions):
    """Terminate a session."""
    try:
        session, reason = _resolve(sessions, session_id)
        if session is None:
            return _bad_request(reason)

        sessions.terminate(session.session_id)
        return Response(status_code=200, headers={SESSION_HEADER: session.session_id})
    except Exception:
        logger.error("MCP DELETE failed", exc_info=True)
        return _internal_error()
