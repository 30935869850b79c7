from typing import Dict, List, Sequence

from ..host import PluginConfig
from ..logging import BaseLogger
from .errors import DiscoveryError
from .inspector import MemberInspector
from .introspection import HostIntrospector
from .markers import is_exported_bean
from .model import CORE_NAMESPACE, ExportedType


class CapabilityScanner:
    """Discovers exported types in the host core or in one plugin."""

    def __init__(self, introspector: HostIntrospector, inspector: MemberInspector, logger: BaseLogger):
        self.introspector = introspector
        self.inspector = inspector
        self.logger = logger

    def scan_core(self, scope: Sequence[str], fallback_types: Sequence[str]) -> List[ExportedType]:
        """
        Discover the exported types owned by the host core.
        
        Args:
            scope: Core packages
            fallback_types: Well-known core types used when discovery fails or finds nothing
            
        Returns:
            List[ExportedType]: Discovered types
        """
        self.logger.log_scan(CORE_NAMESPACE, list(scope))
        classes = self._discover(scope, CORE_NAMESPACE)
        if not classes:
            self.logger.log_warning("No exported types found in core, falling back to well-known types")
            classes = self._load_fallback(fallback_types)
        return self._inspect(classes, CORE_NAMESPACE)

    def scan_namespace(self, plugin: PluginConfig) -> List[ExportedType]:
        """
        Discover the exported types declared in one plugin's own code.
        
        Args:
            plugin: The plugin to scan
            
        Returns:
            List[ExportedType]: Discovered types
        """
        plugin_id = plugin.short_name
        scope = [plugin.base_package] if plugin.base_package else []
        self.logger.log_scan(plugin_id, scope)

        classes = self._discover(scope, plugin_id) if scope else []
        if not classes and plugin.plugin_class:
            self.logger.log_warning(f"No exported types found in plugin {plugin_id}, falling back to its main class")
            classes = self._load_fallback([plugin.plugin_class])
        return self._inspect(classes, plugin_id)

    def _discover(self, scope: Sequence[str], namespace: str) -> List[type]:
        try:
            return self.introspector.list_exported_types(scope)
        except Exception as e:
            self.logger.log_error(f"Scanning {namespace} for exported types failed: {e}")
            return []

    def _load_fallback(self, names: Sequence[str]) -> List[type]:
        classes = []
        for name in names:
            try:
                cls = self.introspector.load_type(name)
            except DiscoveryError as e:
                self.logger.log_warning(str(e))
                continue
            except Exception as e:
                self.logger.log_warning(str(DiscoveryError(name, e)))
                continue
            if is_exported_bean(cls):
                classes.append(cls)
            else:
                self.logger.log_debug(f"Skipping {name}: not an exported type")
        return classes

    def _inspect(self, classes: Sequence[type], namespace: str) -> List[ExportedType]:
        types: Dict[str, ExportedType] = {}
        for cls in classes:
            try:
                exported_type = self.inspector.inspect(cls, namespace)
            except Exception as e:
                self.logger.log_warning(str(DiscoveryError(getattr(cls, "__qualname__", repr(cls)), e)))
                continue
            types.setdefault(exported_type.qualified_name, exported_type)
        return list(types.values())
