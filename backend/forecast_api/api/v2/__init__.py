"""API v2."""

from .main import API_VERSION_V2, router_v2

__all__ = ["API_VERSION_V2", "router_v2"]
