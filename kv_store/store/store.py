"""
This module contains the definition of the thread-safe `Store`.
"""

from typing import Optional
from pathlib import Path
from threading import RLock

from kv_store.logger import Logger
from kv_store.util import make_path, write_text_atomic
from .backend.interface import KeyValueStore
from .backend.memory import MemoryStore
from .snapshot.interface import SnapshotFormat
from .snapshot.jsonlike import JSONLikeFormat
from .snapshot.util import detect_format


class Store:
    """
    Thread-safe mapping of string keys to string values that can be
    saved to and loaded from snapshot files.

    All operations acquire one coarse lock for their full duration
    (including file I/O for `save` and `load`), i.e. operations from
    different threads are linearized and never observe partial effects
    of one another. Replacing the lock by a finer-grained scheme would
    only change throughput, not this contract.

    Keyword arguments:
    logger -- `Logger` that successful mutations and I/O errors are
              reported to
              (default None; uses a new `Logger` that echoes to
              stdout/stderr)
    db -- backing `KeyValueStore`-instance
          (default None; uses a new `MemoryStore`)
    snapshot_format -- default format for `save`
                       (default None; uses `JSONLikeFormat`)
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        db: Optional[KeyValueStore] = None,
        snapshot_format: Optional[SnapshotFormat] = None,
    ) -> None:
        self._logger = logger if logger is not None else Logger()
        self._db = db if db is not None else MemoryStore()
        self._snapshot_format = (
            snapshot_format if snapshot_format is not None
            else JSONLikeFormat()
        )
        self._lock = RLock()

    @property
    def logger(self) -> Logger:
        """Returns the `Store`'s `Logger`."""
        return self._logger

    @property
    def snapshot_format(self) -> SnapshotFormat:
        """Returns the default `SnapshotFormat` used by `save`."""
        return self._snapshot_format

    def set(self, key: str, value: str) -> None:
        """Inserts or replaces the entry for `key`."""
        with self._lock:
            self._db.write(key, value)
            self._logger.info(f"Set: {{{key}: {value}}}")

    def get(self, key: str) -> Optional[str]:
        """Returns the current value for `key` or `None`."""
        with self._lock:
            return self._db.read(key)

    def remove(self, key: str) -> None:
        """
        Deletes the entry for `key` if present. The removal is logged in
        either case.
        """
        with self._lock:
            self._db.delete(key)
            self._logger.info(f"Removed key: {key}")

    def exists(self, key: str) -> bool:
        """Returns `True` if `key` has an entry."""
        with self._lock:
            return self._db.read(key) is not None

    def clear(self) -> None:
        """Removes all entries."""
        with self._lock:
            self._db.clear()
            self._logger.info("Store cleared")

    def keys(self) -> tuple[str, ...]:
        """Returns a snapshot of all keys (unspecified order)."""
        with self._lock:
            return self._db.keys()

    def items(self) -> tuple[tuple[str, str], ...]:
        """
        Returns a snapshot of all entries as tuples of key and value
        (unspecified order). Later changes to the `Store` are not
        reflected in the result.
        """
        with self._lock:
            return tuple((key, self._db.read(key)) for key in self._db.keys())

    def save(
        self,
        destination: str | Path,
        snapshot_format: Optional[SnapshotFormat] = None,
    ) -> bool:
        """
        Writes all entries to `destination` and returns `True` on
        success. The file is replaced atomically; if it cannot be
        written, the error is logged, a previous file is left intact,
        and `False` is returned.

        Keyword arguments:
        destination -- path to the snapshot file
        snapshot_format -- format override
                           (default None; uses `self.snapshot_format`)
        """
        _format = (
            snapshot_format if snapshot_format is not None
            else self._snapshot_format
        )
        with self._lock:
            text = _format.dumps(self.items())
            # paths like "." or ones containing NUL raise ValueError
            try:
                write_text_atomic(destination, text)
            except (OSError, ValueError):
                self._logger.error(f"Could not write file: {destination}")
                return False
            self._logger.info(f"Data saved to {destination}")
        return True

    def load(
        self,
        destination: str | Path,
        snapshot_format: Optional[SnapshotFormat] = None,
    ) -> bool:
        """
        Replaces all entries by the contents of the snapshot file at
        `destination` and returns `True` on success. Records that cannot
        be parsed are skipped. If the file cannot be read, the error is
        logged, the current entries are left unchanged, and `False` is
        returned.

        Keyword arguments:
        destination -- path to the snapshot file
        snapshot_format -- format override
                           (default None; detected from file contents)
        """
        with self._lock:
            # ValueError covers UnicodeDecodeError and NUL in the path
            try:
                with make_path(destination).open(
                    encoding="utf-8", newline=""
                ) as file:
                    text = file.read()
            except (OSError, ValueError):
                self._logger.error(f"Could not open file: {destination}")
                return False
            if snapshot_format is None:
                snapshot_format = detect_format(text)
            entries = snapshot_format.loads(text)
            self._db.clear()
            for key, value in entries.items():
                self._db.write(key, value)
            self._logger.info(f"Data loaded from {destination}")
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._db.keys())

    def __contains__(self, key) -> bool:
        return self.exists(key)
