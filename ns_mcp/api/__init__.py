"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import (
    PROTOCOL_VERSION_HEADER,
    SESSION_HEADER,
    get_protocol_handler,
    get_session_id,
    get_session_manager,
    get_settings,
)

__all__ = [
    "SESSION_HEADER",
    "PROTOCOL_VERSION_HEADER",
    "get_session_id",
    "get_session_manager",
    "get_protocol_handler",
    "get_settings",
]
