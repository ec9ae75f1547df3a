"""Upstream service clients."""

from .ns_api import NSApiClient, NSApiError

__all__ = ["NSApiClient", "NSApiError"]
