"""Custom exceptions for the Weather Forecast API."""

from .base import ForecastApiError
from .business import BadRequestError, ResourceNotFoundError
from .configuration import ConfigurationError

__all__ = [
    "BadRequestError",
    "ConfigurationError",
    "ForecastApiError",
    "ResourceNotFoundError",
]
