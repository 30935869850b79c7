from typing import List

from ..logging import BaseLogger
from .introspection import HostIntrospector
from .markers import is_exported_bean
from .model import ExportedOperation, ExportedType
from . import naming


class MemberInspector:
    """Enumerates the exported operations of a type and names them."""

    def __init__(self, introspector: HostIntrospector, logger: BaseLogger):
        self.introspector = introspector
        self.logger = logger

    def is_exported(self, shape) -> bool:
        return is_exported_bean(shape)

    def operations(self, cls: type) -> List[ExportedOperation]:
        """Exported operations declared on ``cls``, in declaration order."""
        return self.introspector.list_exported_operations(cls)

    def inspect(self, cls: type, namespace: str) -> ExportedType:
        """
        Build the scan record of a type.
        
        Args:
            cls: The exported type
            namespace: ``core`` or the owning plugin id
            
        Returns:
            ExportedType: Type with its exported operations
        """
        exported_type = ExportedType(
            qualified_name=f"{cls.__module__}.{cls.__qualname__}",
            simple_name=cls.__name__,
            namespace=namespace,
            handle=cls,
            operations=self.operations(cls)
        )
        self.logger.log_type(exported_type.qualified_name, len(exported_type.operations))
        return exported_type

    @staticmethod
    def property_name(operation: ExportedOperation) -> str:
        return naming.property_name(operation.name, operation.explicit_name)

    @staticmethod
    def path_segment(operation: ExportedOperation) -> str:
        return naming.path_segment(operation.name, operation.explicit_name)

    @staticmethod
    def title(operation: ExportedOperation) -> str:
        return naming.display_title(operation.name)
