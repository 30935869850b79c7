import sys
from .base import BaseLogger


class JsonLogger(BaseLogger):
    """Logger that outputs JSON for machine parsing."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for JSON output
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "serialize": True,  # JSON output
                "format": "{time} | {level} | {message}",
                "level": log_level
            }]
        )
    
    def log_scan(self, namespace: str, scope: list):
        self.logger.info("", extra={
            "type": "scan",
            "namespace": namespace,
            "scope": list(scope)
        })

    def log_type(self, qualified_name: str, operation_count: int):
        self.logger.info("", extra={
            "type": "exported_type",
            "name": qualified_name,
            "operations": operation_count
        })

    def log_document(self, title: str, path_count: int):
        self.logger.info("", extra={
            "type": "document",
            "title": title,
            "paths": path_count
        })

    def log_error(self, message: str):
        self.logger.error("", extra={
            "type": "error",
            "message": message
        })

    def log_warning(self, message: str):
        self.logger.warning("", extra={
            "type": "warning",
            "message": message
        })

    def log_info(self, message: str):
        self.logger.info("", extra={
            "type": "info",
            "message": message
        })

    def log_debug(self, message: str):
        self.logger.debug("", extra={
            "type": "debug",
            "message": message
        })
