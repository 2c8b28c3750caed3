"""
This module contains the line-oriented command interpreter for a
`Store`.
"""

from typing import Optional, TextIO
import sys

from kv_store.store import Store


class Interpreter:
    """
    Translates lines of user input into `Store`-operations (one
    operation per line). Results are printed to `out`, errors are
    reported through the store's `Logger`.

    Keyword arguments:
    store -- `Store` to operate on
    out -- stream for command output and prompt
           (default None; uses `sys.stdout` at the time of writing)
    prompt -- prompt printed before reading a line in `run`
              (default ">> ")
    """

    HINT = (
        "Available commands: set, get, remove, list, clear, save <file>, "
        + "load <file>, exit"
    )

    def __init__(
        self, store: Store, out: Optional[TextIO] = None, prompt: str = ">> "
    ) -> None:
        self.store = store
        self._out = out
        self.prompt = prompt

    @property
    def out(self) -> TextIO:
        """Returns output stream."""
        return self._out or sys.stdout

    def _print(self, *args, **kwargs) -> None:
        print(*args, file=self.out, **kwargs)

    def dump(self) -> None:
        """Print all entries of the store (sorted by key)."""
        self._print("\n[STORE DUMP]")
        for key, value in sorted(self.store.items()):
            self._print(f"- {key}: {value}")
        self._print()

    def _single_arg(self, cmd: str, args: str, arg: str) -> Optional[str]:
        """
        Returns first word in `args` or `None` after reporting usage
        error.
        """
        if not (words := args.split(maxsplit=1)):
            self.store.logger.error(f"Usage: {cmd} <{arg}>")
            return None
        return words[0]

    def execute(self, line: str) -> bool:
        """
        Run the command given in `line`. Returns `False` if the command
        requests to exit, `True` otherwise.
        """
        words = line.split(maxsplit=1)
        if not words:
            return True
        cmd = words[0]
        args = words[1] if len(words) > 1 else ""

        match cmd:
            case "exit":
                return False
            case "set":
                parts = args.split(maxsplit=1)
                if len(parts) < 2 or not (value := parts[1].strip(" ")):
                    self.store.logger.error("Usage: set <key> <value>")
                    return True
                self.store.set(parts[0], value)
            case "get":
                if (key := self._single_arg(cmd, args, "key")) is None:
                    return True
                if (value := self.store.get(key)) is not None:
                    self._print(f"{key} = {value}")
                else:
                    self._print("Key not found")
            case "remove":
                if (key := self._single_arg(cmd, args, "key")) is not None:
                    self.store.remove(key)
            case "list":
                self.dump()
            case "clear":
                self.store.clear()
            case "save":
                if (path := self._single_arg(cmd, args, "file")) is not None:
                    self.store.save(path)
            case "load":
                if (path := self._single_arg(cmd, args, "file")) is not None:
                    self.store.load(path)
            case _:
                self.store.logger.error(f"Unknown command: {cmd}")
                self._print(self.HINT)
        return True

    def run(self, stdin: Optional[TextIO] = None) -> None:
        """
        Read and execute lines from `stdin` until either an
        `exit`-command or the end of input is reached.

        Keyword arguments:
        stdin -- input stream
                 (default None; uses `sys.stdin`)
        """
        _stdin = stdin or sys.stdin
        while True:
            self._print(self.prompt, end="", flush=True)
            line = _stdin.readline()
            if not line:
                self._print()
                return
            if not self.execute(line.rstrip("\r\n")):
                return
