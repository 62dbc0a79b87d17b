"""Pydantic schemas for Weather Forecast API requests and responses."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from forecast_api.models.forecast import Forecast, ForecastDraft


class WeatherForecast(BaseModel):
    """Weather forecast response schema."""

    model_config = ConfigDict(
        title="forecast.WeatherForecast",
        populate_by_name=True,
    )

    id: uuid.UUID = Field(
        ...,
        description="Forecast ID, assigned by the service",
        examples=["3fa85f64-5717-4562-b3fc-2c963f66afa6"],
    )
    date: datetime = Field(
        ...,
        description="Date the forecast applies to",
        examples=["2026-10-20T09:00:00Z"],
    )
    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        description="Temperature in degrees Celsius",
        examples=[12],
    )
    temperature_f: int = Field(
        ...,
        alias="temperatureF",
        description="Temperature in degrees Fahrenheit (derived from temperatureC)",
        examples=[53],
    )
    summary: str | None = Field(
        None,
        description="Short description of the weather",
        examples=["mild"],
    )

    @classmethod
    def from_record(cls, record: Forecast) -> WeatherForecast:
        return cls(
            id=record.id,
            date=record.date,
            temperature_c=record.temperature_c,
            temperature_f=record.temperature_f,
            summary=record.summary,
        )


class CreateWeatherForecast(BaseModel):
    """Weather forecast create request schema. The ID is assigned by the service."""

    model_config = ConfigDict(
        title="forecast.CreateWeatherForecast",
        populate_by_name=True,
    )

    date: datetime = Field(..., description="Date the forecast applies to")
    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        description="Temperature in degrees Celsius",
        examples=[20],
    )
    summary: str | None = Field(
        None, description="Short description of the weather", examples=["mild"]
    )

    def to_draft(self) -> ForecastDraft:
        return ForecastDraft(
            date=self.date,
            temperature_c=self.temperature_c,
            summary=self.summary,
        )


class EditWeatherForecast(BaseModel):
    """Weather forecast update request schema.

    The ID must match the ID in the request path.
    """

    model_config = ConfigDict(
        title="forecast.EditWeatherForecast",
        populate_by_name=True,
    )

    id: uuid.UUID = Field(..., description="Forecast ID (must match the path)")
    date: datetime = Field(..., description="Date the forecast applies to")
    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        description="Temperature in degrees Celsius",
        examples=[20],
    )
    summary: str | None = Field(
        None, description="Short description of the weather", examples=["mild"]
    )

    def to_record(self) -> Forecast:
        return Forecast(
            id=self.id,
            date=self.date,
            temperature_c=self.temperature_c,
            summary=self.summary,
        )
