"""API version descriptions and version reporting.

The provider lists the API versions the application actually mounts. It is the
input to discovery-mode document building and to the version reporting headers.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


@dataclass(frozen=True)
class ApiVersionDescription:
    """A supported API version as seen by document building."""

    api_version: str
    group_name: str
    is_deprecated: bool = False


class ApiVersionDescriptionProvider:
    """Read-only, ordered list of supported API versions."""

    def __init__(self, descriptions: Iterable[ApiVersionDescription]) -> None:
        self._descriptions = tuple(descriptions)

    @property
    def api_version_descriptions(self) -> tuple[ApiVersionDescription, ...]:
        return self._descriptions

    @property
    def supported_versions(self) -> list[str]:
        return [d.api_version for d in self._descriptions if not d.is_deprecated]

    @property
    def deprecated_versions(self) -> list[str]:
        return [d.api_version for d in self._descriptions if d.is_deprecated]


class ApiVersionReportingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to advertise supported and deprecated API versions on every response.

    Adds:
    - api-supported-versions: comma separated list of current versions
    - api-deprecated-versions: comma separated list of deprecated versions (if any)
    """

    def __init__(self, app: ASGIApp, provider: ApiVersionDescriptionProvider):
        super().__init__(app)
        self.provider = provider

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Add version reporting headers to the response."""
        response = await call_next(request)

        supported = self.provider.supported_versions
        if supported:
            response.headers["api-supported-versions"] = ", ".join(supported)

        deprecated = self.provider.deprecated_versions
        if deprecated:
            response.headers["api-deprecated-versions"] = ", ".join(deprecated)

        return response
