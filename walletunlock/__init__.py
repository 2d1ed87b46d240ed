"""Unlock a wallet service for a bounded time over authenticated JSON-RPC."""

from .client import RPCClient, WalletClient
from .config import UnlockConfig, app_data_dir
from .errors import UnlockError

__all__ = [
    "RPCClient",
    "UnlockConfig",
    "UnlockError",
    "WalletClient",
    "app_data_dir",
]
