"""Reflective API scanner and specification synthesizer."""

from .markers import exported_bean, exported, is_exported_bean
from .model import CORE_NAMESPACE, ExportedType, ExportedOperation, Int32, Int64, Float32, Float64
from .errors import ScannerError, DiscoveryError, PluginNotFoundError
from .introspection import HostIntrospector, ModuleIntrospector, StaticIntrospector
from .inspector import MemberInspector
from .schema import MAX_DEPTH, SchemaCache, SchemaSynthesizer
from .capability import CapabilityScanner
from .assembler import DocumentMeta, SpecAssembler
from .scanner import ApiScanner

__all__ = [
    # Markers
    "exported_bean",
    "exported",
    "is_exported_bean",

    # Model
    "CORE_NAMESPACE",
    "ExportedType",
    "ExportedOperation",
    "Int32",
    "Int64",
    "Float32",
    "Float64",

    # Errors
    "ScannerError",
    "DiscoveryError",
    "PluginNotFoundError",

    # Scanning
    "HostIntrospector",
    "ModuleIntrospector",
    "StaticIntrospector",
    "MemberInspector",
    "MAX_DEPTH",
    "SchemaCache",
    "SchemaSynthesizer",
    "CapabilityScanner",
    "DocumentMeta",
    "SpecAssembler",
    "ApiScanner"
]
