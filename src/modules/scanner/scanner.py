"""Entry points used by the transport layer.

Every call recomputes from scratch; nothing is cached between scans.
"""

import time
from typing import Dict, Optional

from ..host import Host, PluginConfig, ScannerConfig
from ..logging import BaseLogger
from ..openapi import ApiDocument
from ..versions import CURRENT_CORE_API_VERSION, CURRENT_PLUGIN_API_VERSION, VersionRegistry
from .assembler import DocumentMeta, SpecAssembler
from .capability import CapabilityScanner
from .errors import PluginNotFoundError
from .inspector import MemberInspector
from .introspection import HostIntrospector
from .model import CORE_NAMESPACE

UI_URL_NAME = "swagger-ui"


class ApiScanner:
    """Scans the host core and its plugins into API documents."""

    def __init__(
        self,
        host: Host,
        introspector: HostIntrospector,
        logger: BaseLogger,
        registry: VersionRegistry,
        config: Optional[ScannerConfig] = None
    ):
        """
        Initialize the scanner.
        
        Args:
            host: The running host
            introspector: Host introspection backend
            logger: Logger instance
            registry: Shared version registry
            config: Scanner configuration, defaults apply when omitted
        """
        self.host = host
        self.logger = logger
        self.registry = registry
        self.config = config or ScannerConfig()
        self.inspector = MemberInspector(introspector, logger)
        self.capabilities = CapabilityScanner(introspector, self.inspector, logger)
        self.assembler = SpecAssembler(self.inspector, logger, security_scheme=self.config.security_scheme)

    def scan_core(self) -> ApiDocument:
        """Generate the document of the host core."""
        core = self.config.core
        types = self.capabilities.scan_core(self.host.core_scope, self.host.well_known_types)
        meta = DocumentMeta(title=core.title, description=core.description, version=core.version)
        return self.assembler.assemble(meta, types, self.host.root_url, self._deadline())

    def scan_namespace(self, plugin_id: str) -> ApiDocument:
        """
        Generate the document of one plugin.
        
        Raises:
            PluginNotFoundError: If no such plugin is installed
        """
        plugin = self.host.get_plugin(plugin_id)
        if plugin is None:
            raise PluginNotFoundError(plugin_id)
        return self._scan_plugin(plugin)

    def scan_installed_plugins(self) -> Dict[str, ApiDocument]:
        """Documents of every active plugin, keyed by plugin id."""
        plugins = self.host.list_plugins()
        self.logger.log_info(f"Scanning {len(plugins)} plugins for REST APIs")

        documents: Dict[str, ApiDocument] = {}
        for plugin in plugins:
            if not plugin.active:
                continue
            try:
                documents[plugin.short_name] = self._scan_plugin(plugin)
            except Exception as e:
                self.logger.log_warning(f"Error scanning plugin: {plugin.short_name}: {e}")
        return documents

    def api_list(self) -> Dict[str, str]:
        """
        Specification URL of the core and of every active plugin.

        The versioned URLs are registered in the version registry as well.
        """
        root_url = self.host.root_url
        api_list = {CORE_NAMESPACE: f"{root_url}{UI_URL_NAME}/core-api"}
        self.registry.update_core(
            CURRENT_CORE_API_VERSION,
            f"{root_url}{UI_URL_NAME}/rest/api/{CURRENT_CORE_API_VERSION}"
        )

        for plugin_id in self.scan_installed_plugins():
            api_list[plugin_id] = f"{root_url}{UI_URL_NAME}/plugin-api?plugin={plugin_id}"
            self.registry.register(
                plugin_id,
                CURRENT_PLUGIN_API_VERSION,
                f"{root_url}{UI_URL_NAME}/plugin/{plugin_id}/rest/api/{CURRENT_PLUGIN_API_VERSION}"
            )
        return api_list

    def _scan_plugin(self, plugin: PluginConfig) -> ApiDocument:
        types = self.capabilities.scan_namespace(plugin)
        meta = DocumentMeta(
            title=f"{plugin.title} REST API",
            description=f"REST API endpoints provided by the {plugin.title} plugin",
            version=plugin.version
        )
        return self.assembler.assemble(meta, types, self.host.root_url, self._deadline())

    def _deadline(self) -> Optional[float]:
        if self.config.scan_timeout is None:
            return None
        return time.monotonic() + self.config.scan_timeout
