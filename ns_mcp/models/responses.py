"""Response models for the NS MCP server's plain HTTP endpoints."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Always 'healthy' while the process serves requests")
    timestamp: str = Field(..., description="Server time in ISO-8601 (UTC)")


class ServerInfoResponse(BaseModel):
    """Root endpoint response with API info."""

    name: str
    version: str
    health: str = "/health"
    mcp: str = "/mcp"
