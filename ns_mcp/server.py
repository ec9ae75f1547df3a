"""FastAPI MCP Server for NS (Dutch railways) data."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from . import __version__
from .api.deps import PROTOCOL_VERSION_HEADER, SESSION_HEADER
from .config import Settings, configure_logging, settings
from .mcp.dispatcher import ToolDispatcher
from .mcp.protocol import McpProtocolHandler
from .mcp.session import SessionManager
from .mcp_transport import router as mcp_router
from .middleware import RequestContextMiddleware
from .models import HealthResponse, ServerInfoResponse
from .services.ns_api import NSApiClient

logger = logging.getLogger(__name__)


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    app_settings: Settings = app.state.settings
    logger.info(f"Starting NS MCP Server v{__version__}")
    if not app_settings.has_ns_api_key:
        logger.warning("NS_API_KEY is not set: every NS tool call will fail until it is configured")

    yield
    # Shutdown
    logger.info(f"Shutting down, closing {len(app.state.session_manager)} open session(s)")
    app.state.session_manager.close_all()
    await app.state.api_client.aclose()


def create_app(
    app_settings: Settings | None = None,
    api_client: NSApiClient | None = None,
) -> FastAPI:
    """Build the application with its session map, dispatcher and NS client.

    Args:
        app_settings: Settings to use (defaults to the environment)
        api_client: NS client to use (defaults to one built from settings)
    """
    app_settings = app_settings or settings
    if api_client is None:
        api_client = NSApiClient(
            app_settings.ns_api_key,
            base_url=app_settings.ns_api_base_url,
            timeout=app_settings.ns_api_timeout,
        )

    app = FastAPI(
        title="NS MCP Server",
        description="MCP endpoint for Dutch railway (NS) travel information",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.api_client = api_client
    app.state.session_manager = SessionManager()
    app.state.protocol_handler = McpProtocolHandler(
        ToolDispatcher(api_client),
        server_name=app_settings.server_name,
    )

    app.add_middleware(RequestContextMiddleware)

    # CORS middleware - any origin may talk to the MCP endpoint
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", SESSION_HEADER, PROTOCOL_VERSION_HEADER],
        expose_headers=[SESSION_HEADER, PROTOCOL_VERSION_HEADER],
    )

    # Mount MCP Streamable HTTP transport
    app.include_router(mcp_router)

    _register_exception_handlers(app)
    _register_health_routes(app, app_settings)
    return app


# ============ EXCEPTION HANDLERS ============


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent response format."""
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with sanitized error messages."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ============ HEALTH ENDPOINTS ============


def _register_health_routes(app: FastAPI, app_settings: Settings) -> None:
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(status="healthy", timestamp=iso_timestamp())

    @app.get("/", response_model=ServerInfoResponse, tags=["Health"])
    async def root() -> ServerInfoResponse:
        """Root endpoint with API info."""
        return ServerInfoResponse(name=app_settings.server_name, version=__version__)


app = create_app()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    configure_logging()
    logger.info(f"NS MCP Server listening on port {settings.port}")
    logger.info(f"Health check: http://localhost:{settings.port}/health")
    logger.info(f"MCP endpoint: http://localhost:{settings.port}/mcp")
    uvicorn.run(
        "ns_mcp.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
