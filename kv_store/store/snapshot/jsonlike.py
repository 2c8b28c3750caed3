"""
This module contains the definition of the canonical (JSON-like)
snapshot format.
"""

from typing import Iterable

from .interface import SnapshotFormat


class JSONLikeFormat(SnapshotFormat):
    """
    Flat JSON-like snapshot with one entry per line, e.g.
    ```
    {
      "key1": "value1",
      "key2": "value2"
    }
    ```

    Only `"` and `\\` are escaped (and unescaped on load). Any other
    backslash is kept as is. Values containing line breaks cannot be
    represented.

    On load, blank lines, braces, and lines without `:` are skipped.
    Every other line is a record:
    * a quoted key, `:`, and a quoted value, optionally followed by a
      `,`, is unescaped (keys may contain `:` in this shape),
    * anything else is split at the first `:`; surrounding whitespace,
      one pair of quotes per side, and a trailing `,` are removed.
    """

    NAME = "json"
    INDENT = "  "
    WHITESPACE = " \t\r\n"

    @staticmethod
    def escape(text: str) -> str:
        """Returns `text` with `\\` and `"` escaped."""
        return text.replace("\\", "\\\\").replace('"', '\\"')

    @staticmethod
    def _read_quoted(line: str, start: int) -> tuple[str, int] | None:
        """
        Reads quoted string that opens at `line[start]`. Returns the
        unescaped string and the position right after the closing quote
        or `None` if the string is not terminated.
        """
        chars = []
        pos = start + 1
        while pos < len(line):
            char = line[pos]
            if char == '"':
                return "".join(chars), pos + 1
            if char == "\\" and pos + 1 < len(line) and line[pos + 1] in '"\\':
                chars.append(line[pos + 1])
                pos += 2
                continue
            chars.append(char)
            pos += 1
        return None

    def _skip_whitespace(self, line: str, pos: int) -> int:
        while pos < len(line) and line[pos] in self.WHITESPACE:
            pos += 1
        return pos

    def dumps(self, entries: Iterable[tuple[str, str]]) -> str:
        records = [
            f'{self.INDENT}"{self.escape(key)}": "{self.escape(value)}"'
            for key, value in entries
        ]
        return "{\n" + "".join(
            record + ("," if i < len(records) - 1 else "") + "\n"
            for i, record in enumerate(records)
        ) + "}\n"

    def _parse_quoted(self, line: str) -> tuple[str, str] | None:
        """
        Returns unescaped key and value of a fully quoted record or
        `None` if `line` does not have that shape.
        """
        if (key := self._read_quoted(line, 0)) is None:
            return None
        pos = self._skip_whitespace(line, key[1])
        if pos >= len(line) or line[pos] != ":":
            return None
        pos = self._skip_whitespace(line, pos + 1)
        if pos >= len(line) or line[pos] != '"':
            return None
        if (value := self._read_quoted(line, pos)) is None:
            return None
        if line[value[1]:].strip(self.WHITESPACE) not in ("", ","):
            return None
        return key[0], value[0]

    def _parse_split(self, line: str) -> tuple[str, str]:
        """
        Returns key and value of `line` split at the first `:`. A single
        pair of quotes around either side and a trailing `,` after the
        value are removed; escapes are kept as they are.
        """
        key, value = line.split(":", 1)
        return (
            key.strip(self.WHITESPACE).removeprefix('"').removesuffix('"'),
            value.strip(self.WHITESPACE)
            .removeprefix('"')
            .removesuffix(",")
            .rstrip(self.WHITESPACE)
            .removesuffix('"'),
        )

    def _parse_line(self, line):
        _line = line.strip(self.WHITESPACE)
        if _line in ("", "{", "}") or ":" not in _line:
            return None
        if _line.startswith('"') and (
            record := self._parse_quoted(_line)
        ) is not None:
            return record
        return self._parse_split(_line)
