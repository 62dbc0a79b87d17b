"""API configuration for the Weather Forecast application.

Versioned resource routers are mounted on a single application:
- v1: /v1/weatherforecast (see forecast_api.api.v1)
- v2: /v2/weatherforecast (see forecast_api.api.v2)

OpenAPI documents are served per registry entry under /swagger
(see forecast_api.api.common.routers.documents).
"""

__all__ = []
