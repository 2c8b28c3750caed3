"""
Entry point for the interactive kv-store command line application.
"""

from typing import Optional, Sequence, TextIO
import argparse
import json
import sys

from kv_store.config import AppConfig
from kv_store.logger import Logger
from kv_store.store import Store, FORMAT_OPTIONS
from .interpreter import Interpreter


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parses command line arguments."""
    parser = argparse.ArgumentParser(
        prog="kv-store",
        description="Interactive in-memory key-value store.",
    )
    parser.add_argument(
        "--format",
        choices=tuple(FORMAT_OPTIONS.keys()),
        default=None,
        help="snapshot format used by 'save' (default: "
        + "$KV_STORE_SNAPSHOT_FORMAT or json)",
    )
    parser.add_argument(
        "--no-self-test",
        action="store_true",
        help="skip the smoke test at startup",
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="interactive prompt (default: $KV_STORE_PROMPT or '>> ')",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="print the effective configuration as JSON and exit",
    )
    return parser.parse_args(argv)


def self_test(logger: Logger) -> None:
    """
    Run smoke test on a throwaway `Store`. Raises `RuntimeError` if the
    store does not behave as expected.
    """
    store = Store(Logger(echo=False))
    store.set("username", "ada")
    store.set("lang", "Python")
    checks = [
        ("get", store.get("username") == "ada"),
        ("exists", store.exists("lang")),
    ]
    store.remove("lang")
    checks.append(("remove", not store.exists("lang")))
    store.clear()
    checks.append(("clear", not store.exists("username")))

    if failed := [name for name, ok in checks if not ok]:
        raise RuntimeError(f"Self-test failed for: {', '.join(failed)}.")
    logger.info("All tests passed")


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Run the interactive application and return the exit code.

    Keyword arguments:
    argv -- command line arguments
            (default None; uses `sys.argv[1:]`)
    stdin -- input stream
             (default None; uses `sys.stdin`)
    stdout -- stream for command output and informational log
              (default None; uses `sys.stdout`)
    stderr -- stream for error log
              (default None; uses `sys.stderr`)
    """
    args = parse_args(argv)

    config = AppConfig()
    if args.format is not None:
        config.SNAPSHOT_FORMAT = args.format
    if args.no_self_test:
        config.SELF_TEST = False
    if args.prompt is not None:
        config.PROMPT = args.prompt
    config.set_identity()

    if args.show_config:
        print(
            json.dumps(config.SELF_DESCRIPTION, indent=2),
            file=stdout or sys.stdout,
        )
        return 0

    logger = Logger(out=stdout, err=stderr, fancy=config.LOG_FANCY)
    if config.SELF_TEST:
        logger.info("Running self-tests...")
        self_test(logger)

    store = Store(logger, snapshot_format=config.snapshot_format)
    logger.info("Welcome to the Key-Value CLI Store")
    logger.info("Type 'exit' to quit")
    Interpreter(store, out=stdout, prompt=config.PROMPT).run(stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
