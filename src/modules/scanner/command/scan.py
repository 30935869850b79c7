import json
from typing import Callable, Dict, Optional

import click
import yaml

from ...logging import BaseLogger
from ...openapi import ApiDocument
from ..errors import PluginNotFoundError
from ..scanner import ApiScanner


class ScanCommand:
    """Command class for generating API documents."""

    SUPPORTED_FORMATS = ['json', 'yaml']

    def __init__(self, logger: BaseLogger, scanner: ApiScanner, output_format: str = 'json',
                 echo: Callable[[str], None] = click.echo):
        """
        Initialize the scan command.
        
        Args:
            logger: Logger instance
            scanner: Scanner bound to the host
            output_format: Serialization of printed documents (json or yaml)
            echo: Sink for command output
        """
        if output_format not in self.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported format: {output_format}")
        self.logger = logger
        self.scanner = scanner
        self.output_format = output_format
        self.echo = echo

    def run_core(self) -> bool:
        try:
            self._print_document(self.scanner.scan_core())
            return True
        except Exception as e:
            self.logger.log_error(f"Error generating core API spec: {e}")
            return False

    def run_plugin(self, plugin_id: str) -> bool:
        try:
            self._print_document(self.scanner.scan_namespace(plugin_id))
            return True
        except PluginNotFoundError as e:
            self.logger.log_error(f"Plugin specification not found: {e.plugin_id}")
            return False
        except Exception as e:
            self.logger.log_error(f"Error generating plugin API spec: {e}")
            return False

    def run_plugins(self) -> bool:
        try:
            documents = self.scanner.scan_installed_plugins()
            self._print({plugin_id: document.to_dict() for plugin_id, document in documents.items()})
            return True
        except Exception as e:
            self.logger.log_error(f"Error generating plugin API specs: {e}")
            return False

    def run_list(self) -> bool:
        try:
            self._print(self.scanner.api_list())
            return True
        except Exception as e:
            self.logger.log_error(f"Error generating API list: {e}")
            return False

    def run_versions(self, namespace: Optional[str] = None) -> bool:
        """Print registered versions, after registering the current scan's URLs."""
        try:
            self.scanner.api_list()
            registry = self.scanner.registry
            namespaces = [namespace] if namespace else ['core', *registry.plugins_with_apis()]
            result: Dict[str, Optional[Dict[str, Optional[str]]]] = {}
            for name in namespaces:
                versions = registry.get_versions(name)
                if versions is None:
                    self.logger.log_error(f"No API versions registered for '{name}'")
                    return False
                result[name] = versions
            self._print(result)
            return True
        except Exception as e:
            self.logger.log_error(f"Error listing API versions: {e}")
            return False

    def _print_document(self, document: ApiDocument) -> None:
        if document.partial:
            self.logger.log_warning("Document is partial, the scan deadline was exceeded")
        self._print(document.to_dict())

    def _print(self, data) -> None:
        if self.output_format == 'yaml':
            self.echo(yaml.safe_dump(data, sort_keys=False))
        else:
            self.echo(json.dumps(data, indent=2))
