import sys
from .base import BaseLogger


class PlainLogger(BaseLogger):
    """Logger that outputs plain text, suitable for CI/file output."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "format": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
                "colorize": False,
                "level": log_level
            }]
        )
    
    def log_scan(self, namespace: str, scope: list):
        self.logger.info(f"Scanning {namespace}")
        self.logger.info(f"Scope: {', '.join(scope) or '-'}")

    def log_type(self, qualified_name: str, operation_count: int):
        self.logger.info(f"Found {qualified_name} ({operation_count} operations)")

    def log_document(self, title: str, path_count: int):
        self.logger.info(f"Assembled {title}: {path_count} paths")

    def log_error(self, message: str):
        self.logger.error(message)

    def log_warning(self, message: str):
        self.logger.warning(message)

    def log_info(self, message: str):
        self.logger.info(message)

    def log_debug(self, message: str):
        self.logger.debug(message)
