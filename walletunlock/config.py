"""
Configuration for a single unlock run.

Values come from command-line flags only. The resulting ``UnlockConfig`` is
immutable and handed explicitly to every step that needs it.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .certs import certificate_exists
from .errors import CertificateNotFoundError, ConfigError

DEFAULT_SERVER = "localhost:8332"
DEFAULT_SECONDS = 60
MAX_UNLOCK_SECONDS = 60 * 60


def app_data_dir(app_name: str) -> Path:
    """Per-user application data directory, following each platform's convention."""

    app_name = app_name.lstrip(".")
    if not app_name:
        return Path(".")
    upper = app_name[0].upper() + app_name[1:]
    lower = app_name[0].lower() + app_name[1:]
    home = Path.home()

    if sys.platform.startswith("win"):
        app_data = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA")
        if app_data:
            return Path(app_data) / upper
    elif sys.platform == "darwin":
        return home / "Library" / "Application Support" / upper
    return home / f".{lower}"


def default_cert_file() -> Path:
    return app_data_dir("btcwallet") / "rpc.cert"


@dataclass(frozen=True, slots=True)
class UnlockConfig:
    server: str = DEFAULT_SERVER
    rpc_user: str = ""
    cert_file: Path = field(default_factory=default_cert_file)
    seconds: int = DEFAULT_SECONDS

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "UnlockConfig":
        return cls(
            server=args.server,
            rpc_user=args.rpc_user,
            cert_file=Path(args.cert_file).expanduser(),
            seconds=int(args.seconds),
        )

    def validate(self) -> None:
        if not self.rpc_user:
            raise ConfigError("No RPC username (use -u to set)")
        if self.seconds < 0:
            raise ConfigError("Negative seconds option (use -s to set)")
        if self.seconds > MAX_UNLOCK_SECONDS:
            raise ConfigError("Insane seconds value exceeds 1hr (use -s to set)")
        if not certificate_exists(self.cert_file):
            raise CertificateNotFoundError(self.cert_file)
