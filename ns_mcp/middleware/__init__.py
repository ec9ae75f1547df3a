"""ASGI middleware for the FastAPI application.

This module provides:
- Request ids and access logging
"""

from .request_context import RequestContextMiddleware

__all__ = [
    "RequestContextMiddleware",
]
