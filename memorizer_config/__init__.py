from .config import MemorizerConfig
from .error_counter import ErrorCounter

__all__ = ["MemorizerConfig", "ErrorCounter"]
