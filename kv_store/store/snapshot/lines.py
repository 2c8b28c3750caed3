"""Definition of the legacy line-based snapshot format."""

from typing import Iterable

from .interface import SnapshotFormat


class LineFormat(SnapshotFormat):
    """
    Snapshot with one `key=value` record per line.

    The first `=` in a line separates key and value, the value is
    everything after it. Lines without `=` are skipped. There is no
    escaping, so keys must not contain `=` and neither keys nor values
    can contain line breaks.
    """

    NAME = "lines"

    def dumps(self, entries: Iterable[tuple[str, str]]) -> str:
        return "".join(f"{key}={value}\n" for key, value in entries)

    def _parse_line(self, line):
        key, delim, value = line.removesuffix("\r").partition("=")
        if not delim:
            return None
        return key, value
