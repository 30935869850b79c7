"""OpenAPI document models produced by the scanner."""

from .document import (
    OPENAPI_VERSION,
    SchemaKind,
    SchemaNode,
    HttpVerb,
    Info,
    Server,
    Parameter,
    MediaType,
    ApiResponse,
    Operation,
    PathItem,
    ApiDocument
)

__all__ = [
    "OPENAPI_VERSION",
    "SchemaKind",
    "SchemaNode",
    "HttpVerb",
    "Info",
    "Server",
    "Parameter",
    "MediaType",
    "ApiResponse",
    "Operation",
    "PathItem",
    "ApiDocument"
]
