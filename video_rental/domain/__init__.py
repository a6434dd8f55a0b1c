"""OpenAPI description of the video rental domain and its loader."""

from video_rental.domain.openapi import (
    LoadError,
    OpenApiDocument,
    OpenApiSpecCache,
    Operation,
    load_components_schemas,
    load_openapi_document,
)

__all__ = [
    "LoadError", "OpenApiDocument", "OpenApiSpecCache", "Operation",
    "load_components_schemas", "load_openapi_document",
]
