"""Logging setup for the ``sleeper-adp`` command line."""

import logging
import sys
from typing import TextIO

_HTTP_LOGGERS = ("httpx", "httpcore")
_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class _CliHandler(logging.StreamHandler):
    """The handler ``configure_logging`` installs on the root logger."""


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """Send log records to *stream* (stderr by default).

    Calling this again swaps out the previously installed CLI handler and
    leaves any other root handlers alone. Per-request httpx logging only
    shows up with *verbose*.
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _CliHandler)]:
        root.removeHandler(existing)

    handler = _CliHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    http_level = logging.NOTSET if verbose else logging.WARNING
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
    return handler
