"""Configuration class for the kv-store command line application."""

import os
import sys
import importlib.metadata

from kv_store.store.snapshot import SnapshotFormat, load_format


# pylint: disable=invalid-name


class AppConfig:
    """
    Configuration class for the kv-store command line application.

    Settings are read from the environment when this module is
    imported; they can be overridden by subclassing or by assignment
    (followed by a call to `set_identity` to refresh the
    self-description).
    """

    # format used by `save`-commands (see `FORMAT_OPTIONS`)
    SNAPSHOT_FORMAT = os.environ.get("KV_STORE_SNAPSHOT_FORMAT", "json")
    # run smoke test on a throwaway store before starting the prompt
    SELF_TEST = (int(os.environ.get("KV_STORE_SELF_TEST") or 1)) == 1
    PROMPT = os.environ.get("KV_STORE_PROMPT", ">> ")
    # decorate log-contexts with ANSI-color
    LOG_FANCY = (int(os.environ.get("KV_STORE_LOG_FANCY") or 0)) == 1

    def __init__(self) -> None:
        self.SELF_DESCRIPTION = {}
        self.set_identity()

    @property
    def snapshot_format(self) -> SnapshotFormat:
        """
        Returns new instance of the configured `SnapshotFormat`.

        Raises `ValueError` for an unknown format.
        """
        return load_format(self.SNAPSHOT_FORMAT)

    def set_identity(self) -> None:
        """
        Load dictionary with self-description based on current settings.
        """
        try:
            version = importlib.metadata.version("kv-store")
        except importlib.metadata.PackageNotFoundError:
            version = None
        self.SELF_DESCRIPTION = {
            "description": "in-memory key-value store",
            "version": {
                "app": version,
                "python": sys.version,
            },
            "configuration": {
                "settings": {
                    "snapshotFormat": self.SNAPSHOT_FORMAT,
                    "selfTest": self.SELF_TEST,
                    "prompt": self.PROMPT,
                    "logFancy": self.LOG_FANCY,
                },
            },
        }
