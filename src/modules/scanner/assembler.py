import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..logging import BaseLogger
from ..openapi import (
    ApiDocument,
    ApiResponse,
    Info,
    MediaType,
    Operation,
    Parameter,
    SchemaKind,
    SchemaNode,
    Server
)
from .inspector import MemberInspector
from .model import ExportedOperation, ExportedType
from .schema import SchemaSynthesizer, describe_shape, is_primitive
from . import naming

SECURED_TAG = "secured"
JSON_MEDIA_TYPE = "application/json"


@dataclass
class DocumentMeta:
    """Info block of a document."""
    title: str
    description: str
    version: str


def standard_parameters(operation: ExportedOperation) -> List[Parameter]:
    """Query parameters of the host's generic filtering convention."""
    parameters = [
        Parameter(
            name="depth",
            **{"in": "query"},
            description="Recursion depth for nested objects",
            schema=SchemaNode(kind=SchemaKind.PRIMITIVE, type="integer", example=0)
        ),
        Parameter(
            name="tree",
            **{"in": "query"},
            description="Specify which fields to include using dot notation (e.g. jobs[name,url])",
            schema=SchemaNode(kind=SchemaKind.STRING, type="string")
        ),
    ]
    if operation.returns_value and not is_primitive(operation.return_shape):
        parameters.append(Parameter(
            name="wrapper",
            **{"in": "query"},
            description="Wrap the response in a specific element",
            schema=SchemaNode(kind=SchemaKind.STRING, type="string")
        ))
    return parameters


class SpecAssembler:
    """Folds exported types and operations into an API document."""

    def __init__(
        self,
        inspector: MemberInspector,
        logger: BaseLogger,
        security_scheme: str = "api_auth",
        server_description: str = "Host Instance"
    ):
        """
        Initialize the assembler.
        
        Args:
            inspector: Member inspector used for naming and nested types
            logger: Logger instance
            security_scheme: Name of the security requirement for restricted operations
            server_description: Description of the single server entry
        """
        self.inspector = inspector
        self.logger = logger
        self.security_scheme = security_scheme
        self.server_description = server_description

    def assemble(
        self,
        meta: DocumentMeta,
        types: Iterable[ExportedType],
        root_url: str,
        deadline: Optional[float] = None
    ) -> ApiDocument:
        """
        Build a document from discovered types.
        
        Args:
            meta: Title, description and version of the document
            types: Exported types with their operations
            root_url: Base URL of the running host
            deadline: ``time.monotonic()`` value after which assembly stops early
            
        Returns:
            ApiDocument: The assembled, possibly partial, document
        """
        document = ApiDocument(
            info=Info(title=meta.title, description=meta.description, version=meta.version),
            servers=[Server(url=root_url, description=self.server_description)]
        )
        # One schema cache per document
        synthesizer = SchemaSynthesizer(self.inspector)

        for exported_type in types:
            if deadline is not None and time.monotonic() > deadline:
                self.logger.log_warning(
                    f"Scan deadline exceeded, returning partial document for {meta.title}"
                )
                document.partial = True
                break
            for operation in exported_type.operations:
                try:
                    self._add_operation(document, synthesizer, exported_type, operation)
                except Exception as e:
                    self.logger.log_warning(
                        f"Skipping {exported_type.qualified_name}.{operation.name}: {e}"
                    )

        self.logger.log_document(meta.title, len(document.paths))
        return document

    def _add_operation(
        self,
        document: ApiDocument,
        synthesizer: SchemaSynthesizer,
        exported_type: ExportedType,
        operation: ExportedOperation
    ) -> None:
        path = naming.operation_path(
            exported_type.namespace,
            exported_type.simple_name,
            self.inspector.path_segment(operation)
        )
        verb = naming.classify_verb(operation.name)
        title = self.inspector.title(operation)

        api_operation = Operation(
            summary=f"Get {title}",
            description=self._describe(operation, title),
            parameters=standard_parameters(operation),
            responses=self._responses(synthesizer, operation)
        )
        if operation.visibility > 0:
            api_operation.add_security_requirement(self.security_scheme)
            api_operation.add_tag(SECURED_TAG)

        document.get_or_create_path(path).set_operation(verb, api_operation)
        self.logger.log_debug(f"{verb.value.upper()} {path} -> {exported_type.simple_name}.{operation.name}")

    def _describe(self, operation: ExportedOperation, title: str) -> str:
        description = operation.doc or f"REST API endpoint for {title}"
        description += f" (Visibility: {operation.visibility})"
        if operation.returns_value:
            description += f"\n\nReturns: {describe_shape(operation.return_shape)}"
        return description

    def _responses(self, synthesizer: SchemaSynthesizer, operation: ExportedOperation) -> dict:
        schema = synthesizer.synthesize(operation.return_shape, 0)
        return {
            "200": ApiResponse(
                description="Successful Response",
                content={JSON_MEDIA_TYPE: MediaType(schema=schema)}
            ),
            "401": ApiResponse(description="Authentication Error"),
            "404": ApiResponse(description="Resource Not Found"),
        }
