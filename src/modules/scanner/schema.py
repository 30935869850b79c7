"""Schema synthesis from return annotations.

Synthesis is bounded: nodes deeper than ``MAX_DEPTH`` become a terminal
truncated object, and so do exported classes reached at ``MAX_DEPTH``. Exported classes are cached per scan session in a
``SchemaCache``; a placeholder node is indexed *before* its properties are
filled and then mutated in place. Readers observing the cache while a type is
being populated see a partial node, so a cache must only be used by one
synthesis at a time.
"""

import collections.abc
import decimal
import enum
import types
import typing
from typing import Any, Dict, List, Optional, Tuple

from ..openapi import SchemaKind, SchemaNode
from .inspector import MemberInspector
from .markers import bean_info
from .model import Float32, Float64, Int32, Int64

MAX_DEPTH = 3

TRUNCATED_DESCRIPTION = "Recursion limit reached - object details omitted"

_SEQUENCE_ORIGINS = (
    list, set, frozenset, tuple,
    collections.abc.Sequence, collections.abc.MutableSequence,
    collections.abc.Set, collections.abc.MutableSet,
    collections.abc.Collection, collections.abc.Iterable, collections.abc.Iterator,
    collections.deque,
)
_MAPPING_ORIGINS = (
    dict, collections.OrderedDict, collections.defaultdict,
    collections.abc.Mapping, collections.abc.MutableMapping,
)

# (type, format) of numeric leaves
_NUMBER_FORMATS: Dict[Any, Optional[str]] = {
    Int32: "int32",
    Int64: "int64",
    int: "int64",
    Float32: "float",
    Float64: "double",
    float: "double",
    decimal.Decimal: None,
}


class SchemaCache:
    """Arena of schema nodes indexed by type identity and depth."""

    def __init__(self):
        self._nodes: List[SchemaNode] = []
        self._index: Dict[Tuple[Any, int], int] = {}

    def get(self, shape: Any, depth: int) -> Optional[SchemaNode]:
        slot = self._index.get((shape, depth))
        return None if slot is None else self._nodes[slot]

    def reserve(self, shape: Any, depth: int, node: SchemaNode) -> SchemaNode:
        """Index a placeholder for ``shape`` before it is populated."""
        self._index[(shape, depth)] = len(self._nodes)
        self._nodes.append(node)
        return node

    def __contains__(self, key: Tuple[Any, int]) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._nodes)


class SchemaSynthesizer:
    """Converts return shapes into schema nodes for one scan session."""

    def __init__(self, inspector: MemberInspector, cache: Optional[SchemaCache] = None):
        self.inspector = inspector
        self.cache = cache if cache is not None else SchemaCache()

    def synthesize(self, shape: Any, depth: int = 0) -> SchemaNode:
        if depth > MAX_DEPTH:
            return truncated_node()

        shape = _unwrap(shape)
        if shape is None or shape is type(None) or shape is typing.Any:
            return object_node()

        leaf = primitive_node(shape)
        if leaf is not None:
            return leaf

        origin = typing.get_origin(shape)
        args = typing.get_args(shape)

        if origin in (typing.Union, types.UnionType):
            members = [arg for arg in args if arg is not type(None)]
            if len(members) == 1:
                return self.synthesize(members[0], depth)
            return object_node()

        if origin is None and isinstance(shape, type):
            if issubclass(shape, enum.Enum):
                return enum_node(shape)
            if self.inspector.is_exported(shape):
                return self._bean(shape, depth)

        container = origin or shape
        if _is_mapping(container):
            value_shape = args[1] if len(args) > 1 else None
            return SchemaNode(
                kind=SchemaKind.MAP,
                type="object",
                additionalProperties=self._element(value_shape, depth)
            )

        if _is_sequence(container):
            return self._array(args, depth)

        return object_node()

    def _array(self, args: Tuple[Any, ...], depth: int) -> SchemaNode:
        element_shape = None
        if len(args) == 2 and args[1] is Ellipsis:
            element_shape = args[0]
        elif len(args) == 1:
            element_shape = args[0]
        return SchemaNode(kind=SchemaKind.ARRAY, type="array", items=self._element(element_shape, depth))

    def _element(self, shape: Any, depth: int) -> SchemaNode:
        return self.synthesize(shape, depth + 1)

    def _bean(self, cls: type, depth: int) -> SchemaNode:
        # A composite at the bound has no room for its properties
        if depth >= MAX_DEPTH:
            return truncated_node()

        cached = self.cache.get(cls, depth)
        if cached is not None:
            return cached

        bean = bean_info(cls)
        node = self.cache.reserve(cls, depth, SchemaNode(
            kind=SchemaKind.OBJECT,
            type="object",
            description=f"Bean: {bean.default_visibility}",
            properties={}
        ))
        for operation in self.inspector.operations(cls):
            name = self.inspector.property_name(operation)
            node.properties[name] = self.synthesize(operation.return_shape, depth + 1)
        return node


def object_node(description: Optional[str] = None) -> SchemaNode:
    return SchemaNode(kind=SchemaKind.OBJECT, type="object", description=description)


def truncated_node() -> SchemaNode:
    return SchemaNode(kind=SchemaKind.TRUNCATED, type="object", description=TRUNCATED_DESCRIPTION)


def enum_node(cls: type) -> SchemaNode:
    # Member names are descriptive only, not an enum constraint
    members = ", ".join(member.name for member in cls)
    return SchemaNode(kind=SchemaKind.ENUM, type="string", description=f"Enum: {cls.__name__} ({members})")


def primitive_node(shape: Any) -> Optional[SchemaNode]:
    """Leaf node for strings, booleans and numbers, or None."""
    if shape is str:
        return SchemaNode(kind=SchemaKind.STRING, type="string")
    if shape is bytes:
        return SchemaNode(kind=SchemaKind.STRING, type="string", format="byte")
    # bool before int, bool is an int subclass
    if shape is bool:
        return SchemaNode(kind=SchemaKind.BOOLEAN, type="boolean")
    if _hashable(shape) and shape in _NUMBER_FORMATS:
        return SchemaNode(kind=SchemaKind.NUMBER, type="number", format=_NUMBER_FORMATS[shape])
    return None


def is_primitive(shape: Any) -> bool:
    return primitive_node(_unwrap(shape)) is not None


def describe_shape(shape: Any) -> str:
    """Short type name for documentation, e.g. ``list[Widget]``."""
    shape = _unwrap(shape)
    origin = typing.get_origin(shape)
    if origin is None:
        if isinstance(shape, type):
            return shape.__name__
        name = getattr(shape, "__name__", None)
        return name if isinstance(name, str) else str(shape)
    args = typing.get_args(shape)
    base = describe_shape(origin)
    if not args:
        return base
    return f"{base}[{', '.join(describe_shape(arg) for arg in args)}]"


def _unwrap(shape: Any) -> Any:
    if typing.get_origin(shape) is typing.Annotated:
        return typing.get_args(shape)[0]
    return shape


def _hashable(shape: Any) -> bool:
    try:
        hash(shape)
    except TypeError:
        return False
    return True


def _is_sequence(shape: Any) -> bool:
    return isinstance(shape, type) and issubclass(shape, _SEQUENCE_ORIGINS) and not issubclass(shape, (str, bytes))


def _is_mapping(shape: Any) -> bool:
    return isinstance(shape, type) and issubclass(shape, _MAPPING_ORIGINS)
