"""MCP session state and the session map used by the HTTP transport.

A session is created only by an ``initialize`` handshake and lives until it
is closed, either by an explicit ``DELETE /mcp`` or by application shutdown.
Closing a session fires its close callback, which removes it from the
``SessionManager`` that created it.

All ``SessionManager`` operations are synchronous. They run on the event
loop without awaiting, so creation, lookup and removal cannot interleave.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from datetime import UTC, datetime
from uuid import uuid4

logger = logging.getLogger(__name__)


class McpSession:
    """State for one logical MCP client connection."""

    def __init__(
        self,
        session_id: str,
        on_close: Callable[["McpSession"], None] | None = None,
    ):
        self.session_id = session_id
        self.created_at = datetime.now(UTC)
        self.protocol_version: str | None = None
        self.client_info: dict | None = None
        self.initialized = False
        self.stream_attached = False
        self._closed = asyncio.Event()
        self._on_close = on_close

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def close(self) -> None:
        """Close the session and notify its owner. Idempotent."""
        if self._closed.is_set():
            return
        self._closed.set()
        if self._on_close is not None:
            self._on_close(self)

    async def event_stream(self, keepalive_seconds: float) -> AsyncIterator[str]:
        """Server-sent events for ``GET /mcp``.

        The server has no unsolicited messages to push, so the stream carries
        keep-alive comments until the session is closed. ``stream_attached``
        is only set once the response body is actually being produced.
        """
        self.stream_attached = True
        try:
            yield ": stream opened\n\n"
            while not self._closed.is_set():
                try:
                    await asyncio.wait_for(self._closed.wait(), timeout=keepalive_seconds)
                except TimeoutError:
                    yield ": keep-alive\n\n"
        finally:
            self.stream_attached = False

    def __repr__(self) -> str:
        return f"McpSession(id={self.session_id!r}, closed={self.closed})"


class SessionManager:
    """Owns the mapping from session id to live ``McpSession``."""

    def __init__(self):
        self._sessions: dict[str, McpSession] = {}

    def create(self) -> McpSession:
        """Register a fresh session under a newly generated id."""
        session_id = uuid4().hex
        session = McpSession(session_id, on_close=self._remove)
        self._sessions[session_id] = session
        logger.info(f"Session created: {session_id} ({len(self._sessions)} active)")
        return session

    def get(self, session_id: str | None) -> McpSession | None:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def terminate(self, session_id: str) -> bool:
        """Close a session by id. Returns False if the id is unknown."""
        session = self._sessions.get(session_id)
        if session is None:
            return False
        session.close()
        return True

    def close_all(self) -> None:
        for session in list(self._sessions.values()):
            session.close()

    def _remove(self, session: McpSession) -> None:
        # Only drop the entry if it still belongs to this session object
        if self._sessions.get(session.session_id) is session:
            del self._sessions[session.session_id]
            lifetime = (datetime.now(UTC) - session.created_at).total_seconds()
            logger.info(
                f"Session closed: {session.session_id} after {lifetime:.1f}s "
                f"({len(self._sessions)} active)"
            )

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
