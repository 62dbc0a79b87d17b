"""OpenAPI document registry: which documents exist and what each one carries."""

from .registry import (
    AGGREGATE_DOCUMENT_NAME,
    DocumentDescriptor,
    DocumentRegistry,
    RegistryMode,
    SecurityScheme,
    SecuritySchemeKind,
    SecuritySchemeLocation,
    build_descriptors,
    declared_descriptors,
    discovered_descriptors,
)

__all__ = [
    "AGGREGATE_DOCUMENT_NAME",
    "DocumentDescriptor",
    "DocumentRegistry",
    "RegistryMode",
    "SecurityScheme",
    "SecuritySchemeKind",
    "SecuritySchemeLocation",
    "build_descriptors",
    "declared_descriptors",
    "discovered_descriptors",
]
