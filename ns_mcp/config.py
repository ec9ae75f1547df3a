"""Configuration for the NS MCP server.

All settings are read from environment variables (or a local ``.env`` file).
Only ``NS_API_KEY`` matters for tool calls; without it the server still starts
and serves ``/health``, but every upstream tool call fails fast.
"""

import logging
import sys

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

NS_API_BASE_URL = "https://gateway.apiportal.ns.nl"
NS_API_TIMEOUT = 30.0


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Upstream NS API
    ns_api_key: str | None = None
    ns_api_base_url: str = NS_API_BASE_URL
    ns_api_timeout: float = NS_API_TIMEOUT

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8081
    log_level: str = "INFO"
    server_name: str = "ns-mcp-server"

    # Interval between keep-alive comments on GET /mcp streams
    sse_keepalive_seconds: float = 15.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def has_ns_api_key(self) -> bool:
        """Check if the NS API key is configured."""
        return bool(self.ns_api_key)


# Global settings instance
settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr.

    stdout is reserved for protocol traffic when running over stdio, so the
    handler always writes to stderr regardless of transport.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
