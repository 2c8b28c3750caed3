"""
This module contains the dict-based mapping used by default as the
`Store`'s backend.
"""

from typing import Mapping, Optional

from .interface import KeyValueStore


class MemoryStore(KeyValueStore):
    """
    `KeyValueStore` holding its records in a `dict` (non-persistent).
    Reading an unknown key returns `None` and deleting it is a no-op.

    Keyword arguments:
    entries -- records to start with; checked like arguments to `write`
               (default None)
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._records: dict[str, str] = {}
        for key, value in (entries or {}).items():
            self.write(key, value)

    def _read(self, key):
        return self._records.get(key)

    def _write(self, key, value):
        self._records[key] = value

    def _delete(self, key):
        self._records.pop(key, None)

    def _clear(self):
        self._records.clear()

    def keys(self):
        return tuple(self._records)
