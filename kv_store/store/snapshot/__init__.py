from .interface import SnapshotFormat
from .jsonlike import JSONLikeFormat
from .lines import LineFormat
from .util import FORMAT_OPTIONS, load_format, detect_format


__all__ = [
    "SnapshotFormat",
    "JSONLikeFormat",
    "LineFormat",
    "FORMAT_OPTIONS",
    "load_format",
    "detect_format",
]
