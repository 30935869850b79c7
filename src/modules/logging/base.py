from abc import ABC, abstractmethod
from loguru import logger


class BaseLogger(ABC):
    """Abstract base class for loggers."""
    
    def __init__(self, log_level: str = "INFO"):
        self.logger = logger
        self.log_level = log_level
    
    @abstractmethod
    def log_scan(self, namespace: str, scope: list):
        """Log the start of a scan over a scope."""
        pass

    @abstractmethod
    def log_type(self, qualified_name: str, operation_count: int):
        """Log a discovered exported type."""
        pass

    @abstractmethod
    def log_document(self, title: str, path_count: int):
        """Log an assembled API document."""
        pass

    @abstractmethod
    def log_error(self, message: str):
        """Log an error message."""
        pass

    @abstractmethod
    def log_warning(self, message: str):
        """Log a warning message."""
        pass

    @abstractmethod
    def log_info(self, message: str):
        """Log an info message."""
        pass

    @abstractmethod
    def log_debug(self, message: str):
        """Log a debug message."""
        pass
