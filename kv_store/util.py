"""Module providing helper functions for the kv-store package."""

from typing import Optional
import os
from pathlib import Path
from datetime import datetime, timezone, timedelta
from uuid import uuid4


def make_path(path: str | Path) -> Path:
    """
    A convenience-function returning a `Path`-object created from path.

    Keyword arguments:
    path -- filesystem path either as str or Path
    """

    if isinstance(path, str):
        return Path(path)
    return path


def now(keep_micro: bool = False, utcdelta: Optional[int] = None) -> datetime:
    """
    Helper for getting datetime.now() in specific format for UTC + utcdelta.

    Keyword arguments:
    keep_micro -- if `False`, set datetime microseconds to zero
                  (default False)
    utcdelta -- optional timedelta for UTC-timezone in hours
                (default None: if `None`, either the environment
                variable `UTC_TIMEZONE_OFFSET` (if set) or a fallback of
                0 is used)
    """

    if utcdelta is None:
        _utcdelta = int(os.environ.get("UTC_TIMEZONE_OFFSET") or 0)
    else:
        _utcdelta = utcdelta

    if keep_micro:
        return datetime.now(tz=timezone(timedelta(hours=_utcdelta)))
    return datetime.now(
        tz=timezone(timedelta(hours=_utcdelta))
    ).replace(microsecond=0)


def write_text_atomic(
    path: str | Path, text: str, encoding: str = "utf-8"
) -> None:
    """
    Write `text` to `path` by writing a sibling temporary file first
    and then replacing the target. Readers either see the previous file
    or the complete new one.

    Raises `OSError` if either file cannot be written. In that case the
    temporary file is removed and `path` is left untouched.

    Keyword arguments:
    path -- target file
    text -- file contents
    encoding -- file encoding
                (default utf-8)
    """

    _path = make_path(path)
    tmp = _path.with_name(f".{_path.name}.{uuid4().hex[:8]}.tmp")
    try:
        with tmp.open("w", encoding=encoding, newline="") as file:
            file.write(text)
            file.flush()
            os.fsync(file.fileno())
        tmp.replace(_path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
