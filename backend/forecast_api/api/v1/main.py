"""API v1 router."""

from forecast_api.api.common.routers.weather_forecasts import (
    create_weather_forecast_router,
)
from forecast_api.api.versioning import ApiVersionDescription

API_VERSION_V1 = ApiVersionDescription(api_version="1", group_name="v1")

router_v1 = create_weather_forecast_router(API_VERSION_V1.api_version)

__all__ = ["API_VERSION_V1", "router_v1"]
