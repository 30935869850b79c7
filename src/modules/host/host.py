from abc import ABC, abstractmethod
from typing import List, Optional

from .config import PluginConfig, ScannerConfig


class Host(ABC):
    """The running host application as seen by the scanner."""

    @property
    @abstractmethod
    def root_url(self) -> str:
        """Current base URL of the running instance."""
        pass

    @property
    @abstractmethod
    def core_scope(self) -> List[str]:
        """Packages owned by the host core."""
        pass

    @property
    @abstractmethod
    def well_known_types(self) -> List[str]:
        """Qualified names of core types scanned when discovery finds nothing."""
        pass

    @abstractmethod
    def list_plugins(self) -> List[PluginConfig]:
        """Installed plugins, active or not."""
        pass

    def get_plugin(self, plugin_id: str) -> Optional[PluginConfig]:
        for plugin in self.list_plugins():
            if plugin.short_name == plugin_id:
                return plugin
        return None


class ConfiguredHost(Host):
    """Host described by a ScannerConfig."""

    def __init__(self, config: ScannerConfig):
        self.config = config

    @property
    def root_url(self) -> str:
        return self.config.root_url

    @property
    def core_scope(self) -> List[str]:
        return list(self.config.core.packages)

    @property
    def well_known_types(self) -> List[str]:
        return list(self.config.core.fallback_types)

    def list_plugins(self) -> List[PluginConfig]:
        return list(self.config.plugins)
