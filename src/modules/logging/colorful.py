import click
from .base import BaseLogger
import sys


class ColorfulLogger(BaseLogger):
    """Logger that outputs colorful text for CLI usage."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Documents go to stdout, so log lines stay on stderr
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "colorize": True,
                "format": "<cyan>{time:YYYY-MM-DD HH:mm:ss.SSS}</cyan> | "
                         "<level>{level: <8}</level> | "
                         "<white>{message}</white>",
                "level": log_level
            }]
        )
    
    def log_scan(self, namespace: str, scope: list):
        self.logger.info(click.style(f"Scanning {namespace}", fg="cyan", bold=True))
        self.logger.info(click.style(f"Scope: {', '.join(scope) or '-'}", fg="white"))

    def log_type(self, qualified_name: str, operation_count: int):
        color = "green" if operation_count else "yellow"
        self.logger.info(click.style(f"Found {qualified_name} ({operation_count} operations)", fg=color))

    def log_document(self, title: str, path_count: int):
        self.logger.info(click.style(f"Assembled {title}: {path_count} paths", fg="magenta", bold=True))

    def log_error(self, message: str):
        self.logger.error(click.style(message, fg="red", bold=True))

    def log_warning(self, message: str):
        self.logger.warning(click.style(message, fg="yellow", bold=True))

    def log_info(self, message: str):
        self.logger.info(click.style(message, fg="white"))

    def log_debug(self, message: str):
        self.logger.debug(click.style(message, fg="blue"))
