"""
Error taxonomy for a single archiver run.

Every stage raises a subclass of ArchiverError; nothing is retried or
recovered. The entry point catches ArchiverError once, prints
"Error <stage>: <message>" and exits with status 1.
"""

from __future__ import annotations

from typing import Optional, Sequence


class ArchiverError(Exception):
    """Base class for all fatal run errors."""

    stage = "running the archiver"


class ConfigError(ArchiverError):
    stage = "loading the config"


class FetchError(ArchiverError):
    stage = "fetching the feed"


class ParseError(ArchiverError):
    stage = "parsing the feed"


class StoreIOError(ArchiverError):
    """The data file exists but could not be opened, read or written."""

    stage = "accessing the data file"


class DecodeError(ArchiverError):
    stage = "parsing JSON data"


class EncodeError(ArchiverError):
    stage = "saving JSON data"


class CommandError(ArchiverError):
    """An external command failed to launch or exited non-zero."""

    stage = "running command"

    def __init__(
        self,
        args: Sequence[str],
        returncode: Optional[int] = None,
        reason: str = "",
    ) -> None:
        self.command = list(args)
        self.returncode = returncode
        if returncode is not None:
            detail = f"exit status {returncode}"
        else:
            detail = reason or "failed to start"
        super().__init__(f"'{' '.join(self.command)}': {detail}")
