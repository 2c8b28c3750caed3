from .interface import KeyValueStore
from .memory import MemoryStore


__all__ = [
    "KeyValueStore",
    "MemoryStore",
]
