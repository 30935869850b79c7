"""API versions of the host core and of each plugin.

The registry is shared by every request handler. Writers serialize on a
lock and publish fresh copies of the mappings, so readers never take the
lock and always observe a complete snapshot. Entries are never evicted,
versions of an uninstalled plugin stay registered for the process lifetime.
"""

import threading
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from ..logging import BaseLogger
from ..host import CORE_NAMESPACE
from .url import direct_urls, normalize_url

CURRENT_CORE_API_VERSION = "1.0"
CURRENT_PLUGIN_API_VERSION = "1.0"


class VersionNotFoundError(KeyError):
    def __init__(self, namespace: str, version: Optional[str] = None):
        self.namespace = namespace
        self.version = version
        if version is None:
            message = f"No API versions registered for '{namespace}'"
        else:
            message = f"API version '{version}' not registered for '{namespace}'"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class VersionRegistry:
    """Maps (namespace, version) to the canonical URL of a specification."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger
        self._lock = threading.Lock()
        self._core: Mapping[str, Optional[str]] = MappingProxyType({CURRENT_CORE_API_VERSION: None})
        self._plugins: Mapping[str, Mapping[str, str]] = MappingProxyType({})

    def register(self, plugin_id: str, version: str, url: str) -> str:
        """
        Register (or overwrite) the URL of a plugin API version.
        
        Args:
            plugin_id: The plugin ID
            version: The version string
            url: URL of the API specification
            
        Returns:
            str: The normalized URL that was stored
            
        Raises:
            ValueError: If the plugin ID is empty or reserved
        """
        if not plugin_id or plugin_id == CORE_NAMESPACE:
            raise ValueError(f"Invalid plugin ID: '{plugin_id}'")
        url = normalize_url(url)

        with self._lock:
            versions = dict(self._plugins.get(plugin_id, {}))
            versions[version] = url
            plugins = dict(self._plugins)
            plugins[plugin_id] = MappingProxyType(versions)
            self._plugins = MappingProxyType(plugins)

        rest_url, api_url = direct_urls(url)
        self.logger.log_info(f"Registered plugin API URL with rest prefix: {rest_url} for plugin: {plugin_id}")
        self.logger.log_info(f"Registered plugin API URL without rest prefix: {api_url} for plugin: {plugin_id}")
        return url

    def update_core(self, version: str, url: str) -> str:
        """Register (or overwrite) the URL of a core API version."""
        url = normalize_url(url)

        with self._lock:
            core = dict(self._core)
            core[version] = url
            self._core = MappingProxyType(core)

        rest_url, api_url = direct_urls(url)
        self.logger.log_info(f"Registered core API URL with rest prefix: {rest_url}")
        self.logger.log_info(f"Registered core API URL without rest prefix: {api_url}")
        return url

    def get_versions(self, namespace: str) -> Optional[Dict[str, Optional[str]]]:
        """Snapshot of the versions of a namespace, None if nothing is registered."""
        if namespace == CORE_NAMESPACE:
            return dict(self._core)
        versions = self._plugins.get(namespace)
        return dict(versions) if versions is not None else None

    def get_url(self, namespace: str, version: str) -> Optional[str]:
        """
        URL of one version.
        
        Raises:
            VersionNotFoundError: If the namespace or version is not registered
        """
        versions = self.get_versions(namespace)
        if versions is None:
            raise VersionNotFoundError(namespace)
        if version not in versions:
            raise VersionNotFoundError(namespace, version)
        return versions[version]

    def is_valid(self, namespace: str, version: str) -> bool:
        if namespace == CORE_NAMESPACE:
            return version in self._core
        versions = self._plugins.get(namespace)
        return versions is not None and version in versions

    def plugins_with_apis(self) -> List[str]:
        return sorted(self._plugins.keys())
