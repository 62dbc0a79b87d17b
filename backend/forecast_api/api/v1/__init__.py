"""API v1."""

from .main import API_VERSION_V1, router_v1

__all__ = ["API_VERSION_V1", "router_v1"]
