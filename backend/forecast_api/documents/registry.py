"""Versioned OpenAPI document registry.

Two construction modes, selected once at startup:

- DISCOVERY: one document per API version reported by the version description
  provider. Every document looks the same apart from its name and version.
- DECLARED: a hand-written list (v1, v2 and the "all" aggregate). This makes
  version-specific configuration explicit, e.g. v2 announces a header token
  while v1 is unauthenticated.

The registry is immutable once built and is safe to read concurrently.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from forecast_api.api.versioning import (
    ApiVersionDescription,
    ApiVersionDescriptionProvider,
)
from forecast_api.exceptions.configuration import ConfigurationError

logger = logging.getLogger(__name__)

SERVICE_TITLE = "Weather Forecast API"
SERVICE_DESCRIPTION = "This API returns weather forecast information"

AGGREGATE_DOCUMENT_NAME = "all"


class SecuritySchemeKind(enum.Enum):
    API_KEY = "apiKey"


class SecuritySchemeLocation(enum.Enum):
    HEADER = "header"


@dataclass(frozen=True)
class SecurityScheme:
    """Authentication scheme announced by a document."""

    scheme_name: str
    header_name: str
    description: str
    kind: SecuritySchemeKind = SecuritySchemeKind.API_KEY
    location: SecuritySchemeLocation = SecuritySchemeLocation.HEADER


@dataclass(frozen=True)
class DocumentDescriptor:
    """Everything needed to render one named OpenAPI document.

    An empty version_tags set marks the aggregate document spanning all versions.
    """

    name: str
    version: str
    title: str
    description: str
    version_tags: frozenset[str] = field(default_factory=frozenset)
    suppress_deprecated_fields: bool = False
    security_scheme: SecurityScheme | None = None
    deprecated: bool = False

    @property
    def is_aggregate(self) -> bool:
        return not self.version_tags


class RegistryMode(enum.Enum):
    DISCOVERY = "discovery"
    DECLARED = "declared"

    @classmethod
    def from_flag(cls, use_version_description_provider: bool) -> RegistryMode:
        return cls.DISCOVERY if use_version_description_provider else cls.DECLARED


JWT_SECURITY_SCHEME = SecurityScheme(
    scheme_name="JWT",
    header_name="Authorization",
    description="Field should be in this format: \nBearer {my token}",
)


def discovered_descriptors(
    versions: Sequence[ApiVersionDescription],
) -> list[DocumentDescriptor]:
    """One descriptor per discovered API version."""
    return [
        DocumentDescriptor(
            name=version.group_name,
            version=version.group_name,
            title=SERVICE_TITLE,
            description=SERVICE_DESCRIPTION,
            version_tags=frozenset({version.api_version}),
            suppress_deprecated_fields=True,
            deprecated=version.is_deprecated,
        )
        for version in versions
    ]


def declared_descriptors(include_aggregate: bool = True) -> list[DocumentDescriptor]:
    """The hand-declared document list."""
    descriptors = [
        DocumentDescriptor(
            name="v1",
            version="v1",
            title=SERVICE_TITLE,
            description=SERVICE_DESCRIPTION,
            version_tags=frozenset({"1"}),
            suppress_deprecated_fields=True,
        ),
        DocumentDescriptor(
            name="v2",
            version="v2",
            title=SERVICE_TITLE,
            description=SERVICE_DESCRIPTION,
            version_tags=frozenset({"2"}),
            suppress_deprecated_fields=True,
            security_scheme=JWT_SECURITY_SCHEME,
        ),
    ]
    if include_aggregate:
        # Single combined document for client generation across all versions
        descriptors.append(
            DocumentDescriptor(
                name=AGGREGATE_DOCUMENT_NAME,
                version=AGGREGATE_DOCUMENT_NAME,
                title=SERVICE_TITLE,
                description=SERVICE_TITLE,
            )
        )
    return descriptors


def build_descriptors(
    versions: Sequence[ApiVersionDescription],
    mode: RegistryMode,
    include_aggregate: bool = True,
) -> Mapping[str, DocumentDescriptor]:
    """Build the read-only name -> descriptor table.

    Args:
        versions: Supported API versions (only used in discovery mode)
        mode: Construction mode
        include_aggregate: Add the "all" document in declared mode

    Returns:
        Read-only mapping, in declaration order

    Raises:
        ConfigurationError: If two descriptors share a name
    """
    if mode is RegistryMode.DISCOVERY:
        if not versions:
            logger.warning(
                "API version discovery returned no versions; no OpenAPI documents will be served"
            )
        descriptors = discovered_descriptors(versions)
    else:
        descriptors = declared_descriptors(include_aggregate=include_aggregate)

    table: dict[str, DocumentDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.name in table:
            raise ConfigurationError(
                f"Duplicate OpenAPI document name '{descriptor.name}'",
                details={"mode": mode.value},
            )
        table[descriptor.name] = descriptor
    return MappingProxyType(table)


class DocumentRegistry(Mapping[str, DocumentDescriptor]):
    """Immutable mapping from document name to descriptor."""

    def __init__(self, descriptors: Mapping[str, DocumentDescriptor]) -> None:
        self._descriptors = MappingProxyType(dict(descriptors))

    @classmethod
    def build(
        cls,
        provider: ApiVersionDescriptionProvider,
        use_version_description_provider: bool,
    ) -> DocumentRegistry:
        """Build the registry for the configured mode.

        The provider is only consulted in discovery mode, exactly once.
        """
        mode = RegistryMode.from_flag(use_version_description_provider)
        versions = (
            provider.api_version_descriptions if mode is RegistryMode.DISCOVERY else ()
        )
        registry = cls(build_descriptors(versions, mode))
        logger.info(
            f"Built OpenAPI document registry ({mode.value}): {', '.join(registry) or 'none'}"
        )
        return registry

    def __getitem__(self, name: str) -> DocumentDescriptor:
        return self._descriptors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def names(self) -> list[str]:
        return list(self._descriptors)
