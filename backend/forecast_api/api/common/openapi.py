"""OpenAPI document rendering for registry descriptors."""

from collections.abc import Mapping, Sequence
from typing import Any

from fastapi.openapi.utils import get_openapi
from starlette.routing import BaseRoute

from forecast_api.documents.registry import (
    DocumentDescriptor,
    DocumentRegistry,
    SecurityScheme,
)

HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}


def select_routes(
    descriptor: DocumentDescriptor,
    routes_by_version: Mapping[str, Sequence[BaseRoute]],
) -> list[BaseRoute]:
    """Routes belonging to the descriptor's versions (all versions for the aggregate)."""
    return [
        route
        for version, routes in routes_by_version.items()
        if descriptor.is_aggregate or version in descriptor.version_tags
        for route in routes
    ]


def strip_deprecated_properties(openapi_schema: dict[str, Any]) -> dict[str, Any]:
    """Remove schema properties flagged as deprecated.

    Args:
        openapi_schema: The generated OpenAPI schema dictionary

    Returns:
        Modified OpenAPI schema without deprecated properties
    """
    if (
        "components" not in openapi_schema
        or "schemas" not in openapi_schema["components"]
    ):
        return openapi_schema

    for schema_def in openapi_schema["components"]["schemas"].values():
        properties = schema_def.get("properties", {})
        deprecated = [
            name for name, prop in properties.items() if prop.get("deprecated") is True
        ]
        for name in deprecated:
            del properties[name]

        if deprecated and "required" in schema_def:
            schema_def["required"] = [
                name for name in schema_def["required"] if name not in deprecated
            ]
            if not schema_def["required"]:
                del schema_def["required"]

    return openapi_schema


def apply_security_scheme(
    openapi_schema: dict[str, Any], scheme: SecurityScheme
) -> dict[str, Any]:
    """Declare a security scheme and require it on every operation.

    Args:
        openapi_schema: The generated OpenAPI schema dictionary
        scheme: Scheme to announce

    Returns:
        Modified OpenAPI schema with the scheme in components.securitySchemes
    """
    components = openapi_schema.setdefault("components", {})
    components.setdefault("securitySchemes", {})[scheme.scheme_name] = {
        "type": scheme.kind.value,
        "name": scheme.header_name,
        "in": scheme.location.value,
        "description": scheme.description,
    }

    for path_item in openapi_schema.get("paths", {}).values():
        for method, operation in path_item.items():
            if method in HTTP_METHODS:
                operation.setdefault("security", []).append({scheme.scheme_name: []})

    return openapi_schema


def sort_schemas_by_namespace(openapi_schema: dict[str, Any]) -> dict[str, Any]:
    """Sort schemas by namespace (title prefix) first, then alphabetically.

    Schemas are sorted by their title attribute (e.g., 'error.ErrorResponse',
    'forecast.WeatherForecast'). Schemas without a namespace go last.

    Args:
        openapi_schema: The generated OpenAPI schema dictionary

    Returns:
        Modified OpenAPI schema with sorted schemas
    """
    if (
        "components" not in openapi_schema
        or "schemas" not in openapi_schema["components"]
    ):
        return openapi_schema

    schemas = openapi_schema["components"]["schemas"]

    def get_sort_key(item: tuple[str, dict]) -> tuple[str, str]:
        schema_name, schema_def = item
        title = schema_def.get("title", schema_name)
        if "." in title:
            namespace, name = title.split(".", 1)
            return (namespace, name)
        return ("zzz_no_namespace", title)

    openapi_schema["components"]["schemas"] = dict(
        sorted(schemas.items(), key=get_sort_key)
    )

    return openapi_schema


def render_document(
    descriptor: DocumentDescriptor,
    routes_by_version: Mapping[str, Sequence[BaseRoute]],
) -> dict[str, Any]:
    """Render the OpenAPI document described by a registry entry."""
    title = descriptor.title
    if descriptor.deprecated:
        title += " (DEPRECATED)"

    openapi_schema = get_openapi(
        title=title,
        version=descriptor.version,
        description=descriptor.description,
        routes=select_routes(descriptor, routes_by_version),
    )

    if descriptor.suppress_deprecated_fields:
        openapi_schema = strip_deprecated_properties(openapi_schema)

    if descriptor.security_scheme is not None:
        openapi_schema = apply_security_scheme(
            openapi_schema, descriptor.security_scheme
        )

    return sort_schemas_by_namespace(openapi_schema)


class OpenApiDocumentRenderer:
    """Serves registry documents, rendering each on first request.

    The registry never changes after startup, so cached documents never go stale.
    """

    def __init__(
        self,
        registry: DocumentRegistry,
        routes_by_version: Mapping[str, Sequence[BaseRoute]],
    ) -> None:
        self.registry = registry
        self.routes_by_version = routes_by_version
        self._cache: dict[str, dict[str, Any]] = {}

    def document_names(self) -> list[str]:
        return self.registry.names()

    def render(self, name: str) -> dict[str, Any] | None:
        """Return the named document, or None if the registry has no such name."""
        descriptor = self.registry.get(name)
        if descriptor is None:
            return None
        if name not in self._cache:
            self._cache[name] = render_document(descriptor, self.routes_by_version)
        return self._cache[name]
