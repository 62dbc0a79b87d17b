"""API v2 router.

v2 is documented with a header token (see the declared "v2" document);
validating that token is left to the authentication layer in front of the API.
"""

from forecast_api.api.common.routers.weather_forecasts import (
    create_weather_forecast_router,
)
from forecast_api.api.versioning import ApiVersionDescription

API_VERSION_V2 = ApiVersionDescription(api_version="2", group_name="v2")

router_v2 = create_weather_forecast_router(API_VERSION_V2.api_version)

__all__ = ["API_VERSION_V2", "router_v2"]
