"""Request dependencies resolving per-application services."""

from fastapi import Request

from forecast_api.api.common.openapi import OpenApiDocumentRenderer
from forecast_api.store import EphemeralForecastStore


def get_forecast_store(request: Request) -> EphemeralForecastStore:
    """The forecast store owned by the running application."""
    return request.app.state.forecast_store


def get_document_renderer(request: Request) -> OpenApiDocumentRenderer:
    """The OpenAPI document renderer owned by the running application."""
    return request.app.state.document_renderer
