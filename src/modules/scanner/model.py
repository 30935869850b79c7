"""Domain model of a scan: exported types and their operations."""

from dataclasses import dataclass, field
from typing import Any, List, NewType, Optional

from ..host.config import CORE_NAMESPACE

# Width markers for numeric return annotations. Plain ``int`` and ``float``
# publish as 64-bit integer and double.
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)


@dataclass
class ExportedOperation:
    """Operation of an exported type.

    ``return_shape`` is the resolved return annotation; ``None`` means the
    operation declares no value.
    """
    name: str
    return_shape: Any
    visibility: int = 0
    explicit_name: Optional[str] = None
    doc: Optional[str] = None

    @property
    def returns_value(self) -> bool:
        return self.return_shape is not None and self.return_shape is not type(None)


@dataclass
class ExportedType:
    """Type discovered during a scan. Rebuilt on every scan."""
    qualified_name: str
    simple_name: str
    namespace: str
    handle: Any = None
    operations: List[ExportedOperation] = field(default_factory=list)
