"""
TLS certificate file helpers.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("walletunlock.certs")


def certificate_exists(path: Path) -> bool:
    """Return False only when nothing exists at *path*; other stat errors propagate."""

    try:
        Path(path).stat()
    except FileNotFoundError:
        return False
    return True


def load_certificate(path: Path) -> bytes:
    data = Path(path).read_bytes()
    logger.debug("Loaded %d bytes of certificate data from %s", len(data), path)
    return data
