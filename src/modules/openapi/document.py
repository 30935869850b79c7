"""Data models for generated OpenAPI documents."""

import json
from enum import Enum
from typing import Dict, List, Optional, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


OPENAPI_VERSION = "3.0.1"


class SchemaKind(str, Enum):
    """Structural kinds a schema node can describe."""
    PRIMITIVE = "primitive"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"
    MAP = "map"
    ENUM = "enum"
    OBJECT = "object"
    TRUNCATED = "truncated"


class HttpVerb(str, Enum):
    """HTTP verbs an exported operation can be published under."""
    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"


class SchemaNode(BaseModel):
    """Recursive description of a shape."""
    model_config = ConfigDict(populate_by_name=True)

    kind: SchemaKind = Field(SchemaKind.OBJECT, exclude=True)
    type: str = "object"
    format: Optional[str] = None
    description: Optional[str] = None
    example: Optional[Any] = None
    properties: Optional[Dict[str, "SchemaNode"]] = None
    items: Optional["SchemaNode"] = None
    additional_properties: Optional["SchemaNode"] = Field(None, alias="additionalProperties")

    @property
    def is_truncated(self) -> bool:
        return self.kind == SchemaKind.TRUNCATED


SchemaNode.model_rebuild()


class Info(BaseModel):
    """Info block of a document."""
    title: str
    description: Optional[str] = None
    version: str


class Server(BaseModel):
    """Base URL a document's paths are relative to."""
    url: str
    description: Optional[str] = None


class Parameter(BaseModel):
    """Parameter of an operation."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    in_location: str = Field(..., alias="in")
    description: Optional[str] = None
    required: Optional[bool] = None
    param_schema: Optional[SchemaNode] = Field(None, alias="schema")


class MediaType(BaseModel):
    """Schema of one response content type."""
    model_config = ConfigDict(populate_by_name=True)

    media_schema: Optional[SchemaNode] = Field(None, alias="schema")


class ApiResponse(BaseModel):
    """Response entry for a status code."""
    description: str
    content: Optional[Dict[str, MediaType]] = None


class Operation(BaseModel):
    """Operation published under a path and verb."""
    summary: Optional[str] = None
    description: Optional[str] = None
    parameters: List[Parameter] = []
    security: Optional[List[Dict[str, List[str]]]] = None
    responses: Dict[str, ApiResponse] = {}
    tags: Optional[List[str]] = None

    def add_security_requirement(self, scheme: str) -> None:
        if self.security is None:
            self.security = []
        self.security.append({scheme: []})

    def add_tag(self, tag: str) -> None:
        if self.tags is None:
            self.tags = []
        if tag not in self.tags:
            self.tags.append(tag)


class PathItem(BaseModel):
    """Operations available on one path, one per verb."""
    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    delete: Optional[Operation] = None

    def set_operation(self, verb: HttpVerb, operation: Operation) -> None:
        """Set the operation for a verb, replacing any previous one."""
        setattr(self, HttpVerb(verb).value, operation)

    def get_operation(self, verb: HttpVerb) -> Optional[Operation]:
        return getattr(self, HttpVerb(verb).value)

    @property
    def verbs(self) -> List[HttpVerb]:
        return [verb for verb in HttpVerb if self.get_operation(verb) is not None]


class ApiDocument(BaseModel):
    """Generated API specification document."""
    openapi: str = OPENAPI_VERSION
    info: Info
    servers: List[Server] = []
    paths: Dict[str, PathItem] = {}
    # Set when a soft deadline cut assembly short
    partial: bool = Field(False, exclude=True)

    def get_or_create_path(self, path: str) -> PathItem:
        if path not in self.paths:
            self.paths[path] = PathItem()
        return self.paths[path]

    def to_dict(self) -> Dict[str, Any]:
        """Wire form of the document: aliased keys, unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False)
