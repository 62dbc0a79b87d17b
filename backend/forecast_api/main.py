"""Weather Forecast API application"""

from fastapi import FastAPI

from forecast_api.api.common.exception_handlers import register_exception_handlers
from forecast_api.api.common.openapi import OpenApiDocumentRenderer
from forecast_api.api.common.routers import documents, health
from forecast_api.api.v1 import API_VERSION_V1, router_v1
from forecast_api.api.v2 import API_VERSION_V2, router_v2
from forecast_api.api.versioning import (
    ApiVersionDescriptionProvider,
    ApiVersionReportingMiddleware,
)
from forecast_api.config import Settings, get_settings
from forecast_api.documents import DocumentRegistry
from forecast_api.store import EphemeralForecastStore

# Versioned routers, in version order
VERSIONED_ROUTERS = (
    (API_VERSION_V1, router_v1),
    (API_VERSION_V2, router_v2),
)


async def root():
    return "OK"


def create_app(
    settings: Settings | None = None,
    store: EphemeralForecastStore | None = None,
    provider: ApiVersionDescriptionProvider | None = None,
) -> FastAPI:
    """Build a Weather Forecast API application instance.

    Args:
        settings: Application settings (default: cached environment settings)
        store: Forecast store owned by this instance (default: a fresh store)
        provider: Version description provider used for document discovery
            (default: the versions mounted by this application)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    mounted_versions = ApiVersionDescriptionProvider(
        version for version, _router in VERSIONED_ROUTERS
    )
    if provider is None:
        provider = mounted_versions

    # The registry owns the documents, so the framework's own are disabled
    app = FastAPI(
        title=settings.APP_NAME,
        version=f"{settings.DTAP}-{settings.IMAGE_TAG}",
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )

    # ========================================================================
    # EXCEPTION HANDLERS
    # ========================================================================
    register_exception_handlers(app)

    # ========================================================================
    # MIDDLEWARE
    # ========================================================================
    app.add_middleware(ApiVersionReportingMiddleware, provider=mounted_versions)

    # ========================================================================
    # ROUTERS
    # ========================================================================
    for _version, router in VERSIONED_ROUTERS:
        app.include_router(router)
    app.include_router(documents.router)
    app.include_router(health.router)
    app.add_api_route("/", root, include_in_schema=False)

    # ========================================================================
    # PER-INSTANCE STATE
    # ========================================================================
    registry = DocumentRegistry.build(
        provider,
        settings.USE_API_VERSION_DESCRIPTION_PROVIDER_TO_BUILD_OPENAPI_DOCS,
    )
    app.state.document_renderer = OpenApiDocumentRenderer(
        registry,
        {version.api_version: router.routes for version, router in VERSIONED_ROUTERS},
    )
    app.state.forecast_store = store if store is not None else EphemeralForecastStore()

    return app


app = create_app()
