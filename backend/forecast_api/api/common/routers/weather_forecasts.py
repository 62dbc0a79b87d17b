"""Weather forecast endpoints.

Storage Architecture (API Layer):
- Every version's router calls only into the ephemeral forecast store
- The store returns explicit outcomes (None / StoreOutcome), never raises for
  missing or mismatched records
- This layer maps outcomes to application exceptions, which the registered
  exception handlers turn into 400/404 responses

The same endpoint set is built once per API version so each version gets its
own route names and operation IDs (required for the aggregate document).
"""

import uuid

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from forecast_api.api.dependencies import get_forecast_store
from forecast_api.exceptions import BadRequestError, ResourceNotFoundError
from forecast_api.models.forecast import EMPTY_ID
from forecast_api.schemas.error import ErrorResponse
from forecast_api.schemas.forecast import (
    CreateWeatherForecast,
    EditWeatherForecast,
    WeatherForecast,
)
from forecast_api.store import EphemeralForecastStore, StoreOutcome

UNAUTHORIZED_RESPONSE = {
    "model": ErrorResponse,
    "description": "Unauthorized - the request is not authorized",
}
NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "Resource Not Found - no weather forecast with this ID",
}
BAD_REQUEST_RESPONSE = {
    "model": ErrorResponse,
    "description": "Bad Request - invalid or mismatched weather forecast ID",
}


def _not_found(forecast_id: uuid.UUID) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        f"WeatherForecast '{forecast_id}' not found",
        details={"id": str(forecast_id)},
    )


def get_by_id_route_name(version: str) -> str:
    return f"get_weather_forecast_v{version}"


def create_weather_forecast_router(version: str) -> APIRouter:
    """Build the weather forecast endpoints for one API version.

    Args:
        version: API version (e.g. "2"), used as path prefix /v{version}

    Returns:
        Router with list/get/create/update/delete endpoints
    """
    router = APIRouter(prefix=f"/v{version}", tags=["weatherforecast"])
    suffix = f"V{version}"

    @router.get(
        "/weatherforecast",
        summary="Lists weather forecasts",
        description="Lists all weather forecasts currently held by the service.",
        operation_id=f"listWeatherForecasts{suffix}",
        response_model=list[WeatherForecast],
        status_code=status.HTTP_200_OK,
        responses={"401": UNAUTHORIZED_RESPONSE},
    )
    async def list_weather_forecasts(
        store: EphemeralForecastStore = Depends(get_forecast_store),
    ) -> Response:
        """An array consisting of zero or more weather forecasts."""
        forecasts = [
            WeatherForecast.from_record(record) for record in store.list_forecasts()
        ]
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=[
                forecast.model_dump(by_alias=True, mode="json")
                for forecast in forecasts
            ],
        )

    @router.get(
        "/weatherforecast/{forecast_id}",
        name=get_by_id_route_name(version),
        summary="Finds a weather forecast by its ID",
        description="Finds a weather forecast by its ID.",
        operation_id=f"getWeatherForecast{suffix}",
        response_model=WeatherForecast,
        status_code=status.HTTP_200_OK,
        responses={
            "400": BAD_REQUEST_RESPONSE,
            "401": UNAUTHORIZED_RESPONSE,
            "404": NOT_FOUND_RESPONSE,
        },
    )
    async def get_weather_forecast(
        forecast_id: uuid.UUID,
        store: EphemeralForecastStore = Depends(get_forecast_store),
    ) -> WeatherForecast:
        """The requested weather forecast, if it was found."""
        if forecast_id == EMPTY_ID:
            raise BadRequestError("WeatherForecast ID must not be empty")

        record = store.get_by_id(forecast_id)
        if record is None:
            raise _not_found(forecast_id)

        return WeatherForecast.from_record(record)

    @router.post(
        "/weatherforecast",
        summary="Creates a weather forecast",
        description="""Creates a weather forecast.

**The response contains:**
- No body
- `Location` header referencing the created weather forecast
""",
        operation_id=f"createWeatherForecast{suffix}",
        status_code=status.HTTP_201_CREATED,
        responses={
            "201": {"description": "Weather forecast created"},
            "401": UNAUTHORIZED_RESPONSE,
        },
    )
    async def create_weather_forecast(
        request: Request,
        weather_forecast: CreateWeatherForecast,
        store: EphemeralForecastStore = Depends(get_forecast_store),
    ) -> Response:
        record = store.create(weather_forecast.to_draft())
        location = request.url_for(
            get_by_id_route_name(version), forecast_id=str(record.id)
        )
        return Response(
            status_code=status.HTTP_201_CREATED,
            headers={"Location": str(location)},
        )

    @router.put(
        "/weatherforecast/{forecast_id}",
        summary="Updates a weather forecast",
        description="Replaces date, temperature and summary of an existing weather forecast.",
        operation_id=f"editWeatherForecast{suffix}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses={
            "204": {"description": "Weather forecast updated"},
            "400": BAD_REQUEST_RESPONSE,
            "401": UNAUTHORIZED_RESPONSE,
            "404": NOT_FOUND_RESPONSE,
        },
    )
    async def edit_weather_forecast(
        forecast_id: uuid.UUID,
        weather_forecast: EditWeatherForecast,
        store: EphemeralForecastStore = Depends(get_forecast_store),
    ) -> Response:
        outcome = store.update(forecast_id, weather_forecast.to_record())

        if outcome is StoreOutcome.BAD_REQUEST:
            raise BadRequestError(
                "WeatherForecast ID in path does not match ID in body",
                details={"path": str(forecast_id), "body": str(weather_forecast.id)},
            )
        if outcome is StoreOutcome.NOT_FOUND:
            raise _not_found(forecast_id)

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/weatherforecast/{forecast_id}",
        summary="Deletes a weather forecast",
        description="Deletes a weather forecast by its ID.",
        operation_id=f"deleteWeatherForecast{suffix}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses={
            "204": {"description": "Weather forecast deleted"},
            "401": UNAUTHORIZED_RESPONSE,
            "404": NOT_FOUND_RESPONSE,
        },
    )
    async def delete_weather_forecast(
        forecast_id: uuid.UUID,
        store: EphemeralForecastStore = Depends(get_forecast_store),
    ) -> Response:
        if store.delete(forecast_id) is StoreOutcome.NOT_FOUND:
            raise _not_found(forecast_id)

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
