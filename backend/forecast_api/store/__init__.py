"""In-memory, sliding-expiration storage for weather forecasts."""

from .ephemeral import (
    DEFAULT_SLIDING_EXPIRATION,
    SUMMARIES,
    EphemeralForecastStore,
    StoreOutcome,
)

__all__ = [
    "DEFAULT_SLIDING_EXPIRATION",
    "SUMMARIES",
    "EphemeralForecastStore",
    "StoreOutcome",
]
