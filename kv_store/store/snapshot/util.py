"""Utility definitions for the snapshot-subpackage."""

from .interface import SnapshotFormat
from .jsonlike import JSONLikeFormat
from .lines import LineFormat


FORMAT_OPTIONS = {
    JSONLikeFormat.NAME: JSONLikeFormat,
    LineFormat.NAME: LineFormat,
}


def load_format(name: str) -> SnapshotFormat:
    """
    If valid, returns initialized instance of the requested
    `SnapshotFormat`.
    """
    if name not in FORMAT_OPTIONS:
        raise ValueError(
            f"Snapshot format '{name}' is not allowed. Possible values "
            + f"are: {', '.join(FORMAT_OPTIONS.keys())}."
        )
    return FORMAT_OPTIONS[name]()


def detect_format(text: str) -> SnapshotFormat:
    """
    Returns the `SnapshotFormat` that `text` has most likely been
    written in: `JSONLikeFormat` if the first non-blank line is an
    opening brace, `LineFormat` otherwise.
    """
    for line in text.split("\n"):
        if (_line := line.strip(JSONLikeFormat.WHITESPACE)):
            if _line == "{":
                return JSONLikeFormat()
            break
    return LineFormat()
