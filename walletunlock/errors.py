"""
Error types reported by the unlock tool.
"""

from __future__ import annotations

from pathlib import Path


class UnlockError(Exception):
    """Base exception for every failure the tool reports to the operator."""


class ConfigError(UnlockError):
    """Raised when command-line configuration validation fails."""


class CertificateNotFoundError(ConfigError):
    """Raised when the TLS certificate file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"TLS certificate file `{path}` not found (use -cert to set)")
        self.path = path


class PromptError(UnlockError):
    """Raised when a secret cannot be read from the terminal."""


class RPCError(UnlockError):
    """Base exception for RPC problems."""


class RPCRequestError(RPCError):
    """The wallet service answered with an HTTP response that carries no JSON-RPC reply."""

    def __init__(self, status: int, body: str):
        detail = body.strip()
        summary = f"RPC HTTP error {status}"
        super().__init__(f"{summary}: {detail}" if detail else summary)
        self.status = status
        self.body = body


class RPCResponseError(RPCError):
    """Raised when the JSON-RPC response includes an error."""

    def __init__(self, code: int | None, message: str | None):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
