from typing import List, Optional

from pydantic import BaseModel, field_validator, model_validator

# Namespace of the host itself, every other namespace is a plugin id
CORE_NAMESPACE = "core"


class PluginConfig(BaseModel):
    short_name: str
    display_name: Optional[str] = None
    version: str = "1.0"
    active: bool = True
    package: Optional[str] = None       # Base package scanned for exported types
    plugin_class: Optional[str] = None  # Qualified name of the plugin's main class

    @model_validator(mode='after')
    def validate_scope(self) -> 'PluginConfig':
        """A plugin needs something to scan."""
        if not self.package and not self.plugin_class:
            raise ValueError(f"Plugin '{self.short_name}' needs a 'package' or a 'plugin_class'")
        return self

    @property
    def title(self) -> str:
        return self.display_name or self.short_name

    @property
    def base_package(self) -> Optional[str]:
        """Explicit package, else the package the main class lives in."""
        if self.package:
            return self.package
        if self.plugin_class and "." in self.plugin_class:
            return self.plugin_class.rsplit(".", 1)[0]
        return None


class CoreConfig(BaseModel):
    title: str = "Core REST API"
    description: str = "REST API endpoints provided by the host core"
    version: str = "1.0.0"
    packages: List[str] = []
    fallback_types: List[str] = []  # Well-known types used when discovery finds nothing


class ScannerConfig(BaseModel):
    root_url: str = "http://localhost:8080/"
    security_scheme: str = "api_auth"
    scan_timeout: Optional[float] = None  # Soft deadline in seconds, None disables it
    core: CoreConfig = CoreConfig()
    plugins: List[PluginConfig] = []

    @field_validator('root_url')
    @classmethod
    def validate_root_url(cls, value: str) -> str:
        if not value:
            raise ValueError("root_url must not be empty")
        return value if value.endswith("/") else value + "/"

    @field_validator('scan_timeout')
    @classmethod
    def validate_scan_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("scan_timeout must be positive")
        return value

    @model_validator(mode='after')
    def validate_unique_plugins(self) -> 'ScannerConfig':
        seen = set()
        for plugin in self.plugins:
            if plugin.short_name == CORE_NAMESPACE:
                raise ValueError("'core' is reserved and cannot be used as a plugin name")
            if plugin.short_name in seen:
                raise ValueError(f"Duplicate plugin '{plugin.short_name}'")
            seen.add(plugin.short_name)
        return self
