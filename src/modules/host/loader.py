from typing import List

import yaml
from pydantic import ValidationError
from pydantic_core import ErrorDetails

from .config import ScannerConfig


def _build_validation_error_message(errors: List[ErrorDetails]) -> str:
    """Build a readable message from a list of Pydantic validation errors."""
    messages = []
    for error in errors:
        field_path = " -> ".join(str(loc) for loc in error['loc'])
        msg = error['msg']
        messages.append(f"Error in field '{field_path}': {msg}")

    return "\n".join(messages)


class ConfigLoader:
    """Validates YAML content and creates ScannerConfig instances."""

    @classmethod
    def validate_and_load(cls, yaml_content: str) -> ScannerConfig:
        """
        Validate YAML content and create a ScannerConfig instance.
        
        Args:
            yaml_content: The YAML content to validate
            
        Returns:
            ScannerConfig: The validated scanner configuration
            
        Raises:
            ValueError: If the YAML content is invalid
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format: {str(e)}")

        if data is None:
            return ScannerConfig()
        if not isinstance(data, dict):
            raise ValueError("Invalid configuration format: expected a mapping at the top level")

        try:
            return ScannerConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(_build_validation_error_message(e.errors()))

    @classmethod
    def from_file(cls, path: str) -> ScannerConfig:
        with open(path, 'r') as f:
            return cls.validate_and_load(f.read())
