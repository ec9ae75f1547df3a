"""MCP over stdio.

Speaks newline-delimited JSON-RPC 2.0 on stdin/stdout for clients that spawn
the server as a subprocess. There is exactly one implicit session per
process. stdout carries protocol messages only; logs go to stderr.

Usage:
  ns-mcp-server-stdio
"""

import asyncio
import json
import logging
import sys
from typing import IO

from .config import Settings, configure_logging, settings
from .mcp.dispatcher import ToolDispatcher
from .mcp.jsonrpc import PARSE_ERROR, jsonrpc_error
from .mcp.protocol import McpProtocolHandler
from .mcp.session import McpSession
from .services.ns_api import NSApiClient

logger = logging.getLogger(__name__)

STDIO_SESSION_ID = "stdio"


def _write_message(stream: IO[str], message: dict | list) -> None:
    stream.write(json.dumps(message, ensure_ascii=False) + "\n")
    stream.flush()


async def serve(
    handler: McpProtocolHandler,
    stdin: IO[str],
    stdout: IO[str],
) -> None:
    """Process messages from ``stdin`` until EOF."""
    session = McpSession(STDIO_SESSION_ID)
    try:
        while True:
            line = await asyncio.to_thread(stdin.readline)
            if not line:
                break
            line = line.strip()
            if not line:
                continue

            try:
                payload = json.loads(line)
            except ValueError:
                _write_message(stdout, jsonrpc_error(None, PARSE_ERROR, "Parse error"))
                continue

            response = await handler.handle_payload(payload, session)
            if response is not None:
                _write_message(stdout, response)
    finally:
        session.close()


async def run_stdio(app_settings: Settings | None = None) -> None:
    """Serve MCP on the process's stdin/stdout."""
    app_settings = app_settings or settings
    api_client = NSApiClient(
        app_settings.ns_api_key,
        base_url=app_settings.ns_api_base_url,
        timeout=app_settings.ns_api_timeout,
    )
    handler = McpProtocolHandler(ToolDispatcher(api_client), server_name=app_settings.server_name)

    if not app_settings.has_ns_api_key:
        logger.warning("NS_API_KEY is not set: every NS tool call will fail until it is configured")
    logger.info("NS MCP Server running on stdio")
    try:
        await serve(handler, sys.stdin, sys.stdout)
    finally:
        await api_client.aclose()
        logger.info("NS MCP Server stopped")


def main():
    configure_logging()
    try:
        asyncio.run(run_stdio())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
