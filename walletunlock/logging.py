"""
Logging helpers for the unlock tool.
"""

from __future__ import annotations

import logging
import sys
import time


LOG_FORMAT = "%(asctime)sZ %(levelname)s %(name)s %(message)s"


class UTCFormatter(logging.Formatter):
    """Millisecond UTC timestamps, e.g. ``2026-01-02T03:04:05.678Z``."""

    converter = time.gmtime
    default_time_format = "%Y-%m-%dT%H:%M:%S"
    default_msec_format = "%s.%03d"

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT)


def setup_logging(*, level: int = logging.WARNING) -> logging.Logger:
    """Configure the tool logger with a stderr sink; stdout is kept for the result line."""

    formatter = UTCFormatter()
    root = logging.getLogger("walletunlock")
    root.setLevel(level)
    root.handlers.clear()
    root.propagate = False

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    root.debug("Logging configured at level %s", logging.getLevelName(level))
    return root
