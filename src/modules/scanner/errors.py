class ScannerError(Exception):
    pass

class DiscoveryError(ScannerError):
    """A candidate type failed to load or introspect."""
    def __init__(self, name: str, cause: Exception):
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to load {name}: {cause}")

class PluginNotFoundError(ScannerError):
    def __init__(self, plugin_id: str):
        self.plugin_id = plugin_id
        super().__init__(f"Plugin '{plugin_id}' not found")
