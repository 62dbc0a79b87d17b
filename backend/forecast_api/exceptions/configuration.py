"""Startup configuration exceptions."""

from .base import ForecastApiError


class ConfigurationError(ForecastApiError):
    """Raised when startup configuration cannot produce a consistent service."""

    pass
