from .store import Store
from .backend import KeyValueStore, MemoryStore
from .snapshot import (
    SnapshotFormat,
    JSONLikeFormat,
    LineFormat,
    FORMAT_OPTIONS,
    load_format,
    detect_format,
)


__all__ = [
    "Store",
    "KeyValueStore",
    "MemoryStore",
    "SnapshotFormat",
    "JSONLikeFormat",
    "LineFormat",
    "FORMAT_OPTIONS",
    "load_format",
    "detect_format",
]
