"""FastAPI dependency injection functions.

This module contains shared dependencies for the MCP routes:
- Session id header extraction
- Access to the per-app session manager, protocol handler and settings
"""

from typing import Annotated

from fastapi import Depends, Header
from fastapi import Request as FastAPIRequest

from ..config import Settings
from ..mcp.protocol import McpProtocolHandler
from ..mcp.session import SessionManager

SESSION_HEADER = "mcp-session-id"
PROTOCOL_VERSION_HEADER = "mcp-protocol-version"


# ============ HEADER EXTRACTORS ============


async def get_session_id(
    mcp_session_id: Annotated[str | None, Header(alias=SESSION_HEADER)] = None,
) -> str | None:
    """Extract the MCP session id from the request headers."""
    return mcp_session_id or None


# ============ APP STATE ============


def get_session_manager(request: FastAPIRequest) -> SessionManager:
    return request.app.state.session_manager


def get_protocol_handler(request: FastAPIRequest) -> McpProtocolHandler:
    return request.app.state.protocol_handler


def get_settings(request: FastAPIRequest) -> Settings:
    return request.app.state.settings


SessionId = Annotated[str | None, Depends(get_session_id)]
Sessions = Annotated[SessionManager, Depends(get_session_manager)]
ProtocolHandler = Annotated[McpProtocolHandler, Depends(get_protocol_handler)]
AppSettings = Annotated[Settings, Depends(get_settings)]
