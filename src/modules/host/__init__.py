from .config import CORE_NAMESPACE, ScannerConfig, CoreConfig, PluginConfig
from .loader import ConfigLoader
from .host import Host, ConfiguredHost

__all__ = ['CORE_NAMESPACE', 'ScannerConfig', 'CoreConfig', 'PluginConfig', 'ConfigLoader', 'Host', 'ConfiguredHost']
