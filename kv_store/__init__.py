from .logger import LogMessage, LoggingContext, Logger
from .store import Store


__all__ = [
    "LogMessage", "LoggingContext", "Logger",
    "Store",
]
