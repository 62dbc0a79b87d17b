"""Storage records held by the ephemeral store."""

from .forecast import EMPTY_ID, Forecast, ForecastDraft

__all__ = ["EMPTY_ID", "Forecast", "ForecastDraft"]
