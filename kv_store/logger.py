"""
This module contains the class definition for the store's logger.
"""

from typing import Optional, TextIO
from enum import Enum
from datetime import datetime as datetime_
import sys
import threading

from kv_store.util import now


class LogMessage:
    """
    Class describing a log entry.

    Keyword arguments:
    body -- message body
    origin -- origin of message creation
    datetime -- record's datetime
                (default None; uses `kv_store.util.now`)
    """

    def __init__(
        self,
        body: str,
        origin: Optional[str] = None,
        datetime: Optional[datetime_] = None,
    ) -> None:
        self.body = body
        self.origin = origin
        if datetime is None:
            self.datetime = now()
        else:
            self.datetime = datetime

    def __repr__(self) -> str:
        return str(self.json)

    @property
    def json(self):
        """Convert to `JSONObject`."""
        return {
            "datetime": self.datetime.isoformat(),
            "origin": self.origin,
            "body": self.body,
        }

    @classmethod
    def from_json(cls, json) -> "LogMessage":
        """Initialize from `JSONObject`."""
        _json = json.copy()
        if _json.get("datetime") is not None:
            _json["datetime"] = datetime_.fromisoformat(_json["datetime"])
        return cls(**_json)

    def format(
        self, *args, origin: Optional[str] = None, **kwargs
    ) -> "LogMessage":
        """
        Returns new `LogMessage` with `body` formatted using `args` and
        `kwargs` (passed into `str.format`).

        Keyword arguments:
        origin -- optional origin-override
                  (default None)
        """
        return LogMessage(
            body=self.body.format(*args, **kwargs),
            origin=origin or self.origin,
        )


class LoggingContext(Enum):
    """
    Enum-class for different types of Logger-keys.
    """

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    @property
    def fancy(self) -> str:
        """
        Get stringified `LoggingContext` decorated with ANSI-color.
        """

        class FancyColors:
            ERROR = "\033[31m"
            WARNING = "\033[33m"
            INFO = "\033[34m"
            RESTORE = "\033[0m"

        return (
            getattr(FancyColors, self.name, FancyColors.RESTORE)
            + self.value
            + FancyColors.RESTORE
        )


class Logger:
    """
    Objects of this class collect messages by context (see also
    `LoggingContext`) and echo every message as a single timestamped
    line. Messages in the `ERROR`-context are written to `err`, all
    others to `out`.

    Keyword arguments:
    default_origin -- optional default origin for logged messages
                      (default None)
    fmt -- format for echoed lines; can contain the keys `datetime`,
           `context`, `origin`, and `body`
           (default None; corresponds to "{datetime} [{context}] {body}")
    out -- stream for non-error lines
           (default None; uses `sys.stdout` at the time of writing)
    err -- stream for error lines
           (default None; uses `sys.stderr` at the time of writing)
    echo -- if `False`, only collect messages without writing lines
            (default True)
    fancy -- if `True`, decorate echoed contexts with ANSI-color
             (default False)
    json -- serialized `Logger`-report to use for initialization
            (default None)
    """

    DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(
        self,
        default_origin: Optional[str] = None,
        fmt: Optional[str] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        echo: bool = True,
        fancy: bool = False,
        json: Optional[dict[str, list[dict[str, Optional[str]]]]] = None,
    ) -> None:
        self.report: dict[LoggingContext, list[LogMessage]] = {}
        self._origin = default_origin
        self._fmt = fmt or "{datetime} [{context}] {body}"
        self._out = out
        self._err = err
        self._echo = echo
        self._fancy = fancy
        self._lock = threading.Lock()
        if json is not None:
            for context, msgs in json.items():
                self.log(
                    LoggingContext[context],
                    *[LogMessage.from_json(msg) for msg in msgs],
                    echo=False,
                )

    @property
    def default_origin(self) -> Optional[str]:
        """Returns `Logger`'s default-origin."""
        return self._origin

    @property
    def json(self) -> dict[str, list[dict[str, Optional[str]]]]:
        """Format report as json."""
        return {k.name: [m.json for m in v] for k, v in self.report.items()}

    @classmethod
    def from_json(cls, json) -> "Logger":
        """Initialize from `JSONObject` without echoing."""
        return cls(json=json)

    def _stream(self, context: LoggingContext) -> TextIO:
        if context is LoggingContext.ERROR:
            return self._err or sys.stderr
        return self._out or sys.stdout

    def line(self, context: LoggingContext, msg: LogMessage) -> str:
        """Returns the echoed line for `msg` in `context`."""
        return self._fmt.format(
            datetime=msg.datetime.strftime(self.DATETIME_FORMAT),
            context=context.fancy if self._fancy else context.value,
            origin=msg.origin,
            body=msg.body,
        )

    def log(
        self,
        context: LoggingContext,
        *args: LogMessage,
        body: Optional[str | list[str]] = None,
        origin: Optional[str] = None,
        echo: Optional[bool] = None,
    ) -> None:
        """
        Add message(s) to log and echo them.

        This method can be called with either
        * args (a reference to a `LogMessage`s is logged as is) or
        * body and origin (new `LogMessage`(s) are generated).

        Keyword arguments:
        context -- log message context
        *args -- `LogMessage`(s) to be logged
        body -- message(s) to be logged
        origin -- origin of message
        echo -- optional override for the `Logger`'s echo-setting
                (default None)
        """
        msgs = []
        for msg in args:
            if not isinstance(msg, LogMessage):
                raise TypeError(
                    "Logger.log args expected type 'LogMessage' "
                    + f"but found '{type(msg).__name__}'."
                )
            msgs.append(msg)

        if body is not None:
            _origin = origin or self.default_origin
            msgs += [
                LogMessage(body=b, origin=_origin)
                for b in (body if isinstance(body, list) else [body])
            ]

        with self._lock:
            self.report.setdefault(context, []).extend(msgs)
            if not (self._echo if echo is None else echo):
                return
            stream = self._stream(context)
            for msg in msgs:
                print(self.line(context, msg), file=stream, flush=True)

    def info(self, body: str) -> None:
        """Shortcut for logging `body` in the `INFO`-context."""
        self.log(LoggingContext.INFO, body=body)

    def error(self, body: str) -> None:
        """Shortcut for logging `body` in the `ERROR`-context."""
        self.log(LoggingContext.ERROR, body=body)

    def fancy(self, fancy: bool = True, fmt: Optional[str] = None) -> str:
        """
        Get stringified `Logger`-report where contexts are (optionally)
        decorated with ANSI-color.

        Keyword arguments:
        fancy -- if `True`, decorate contexts with ANSI-color
        fmt -- optional `LogMessage`-format override; can contain any
               keys present in `LogMessage.json`
               (default None; corresponds to "[{datetime}] {body}")
        """
        _fmt = fmt or "[{datetime}] {body}"
        lines = []
        for context, partial_report in self.report.items():
            if len(partial_report) == 0:
                continue
            lines.append(context.fancy if fancy else context.value)
            lines += ["* " + _fmt.format(**m.json) for m in partial_report]
        return "\n".join(lines)

    def __len__(self):
        return len(self.report)

    def keys(self):
        return list(self.report.keys())

    def __getitem__(self, key):
        return self.report[key]

    def __contains__(self, key):
        return key in self.report

    def __str__(self) -> str:
        return self.fancy(False)

    def __bool__(self) -> bool:
        return len(self.report) != 0
