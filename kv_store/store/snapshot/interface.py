"""
This module contains an interface for the definition of snapshot
formats, i.e. the textual representation of a `Store` on disk.
"""

from typing import Iterable
import abc


class SnapshotFormat(metaclass=abc.ABCMeta):
    """
    Interface for snapshot formats.

    # Implementation guide
    ## Required definitions
    * `NAME` identifier used in configuration
    * `dumps` serializes entries into text
    * `_parse_line` returns a key-value pair for a single line or `None`
      if the line does not hold a record

    ## Optional definitions
    * `loads` converts a full text into a dictionary of entries
      (default parses line by line; later records win)
    """

    NAME: str

    @classmethod
    def __subclasshook__(cls, subclass):
        return (
            hasattr(subclass, "dumps")
            and hasattr(subclass, "_parse_line")
            and callable(subclass.dumps)
            and callable(subclass._parse_line)
            or NotImplemented
        )

    @abc.abstractmethod
    def dumps(self, entries: Iterable[tuple[str, str]]) -> str:
        """Returns the serialized representation of `entries`."""
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'dumps'."
        )

    @abc.abstractmethod
    def _parse_line(self, line: str) -> tuple[str, str] | None:
        """
        Returns key and value for a single `line` of a snapshot or
        `None` if it is not a record.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method "
            + "'_parse_line'."
        )

    def loads(self, text: str) -> dict[str, str]:
        """
        Returns entries that are contained in `text`. Lines that do not
        hold a record are skipped.
        """
        entries = {}
        # only "\n" separates records, other line boundaries (as
        # recognized by `str.splitlines`) may occur in values
        for line in text.split("\n"):
            if (record := self._parse_line(line)) is not None:
                entries[record[0]] = record[1]
        return entries
