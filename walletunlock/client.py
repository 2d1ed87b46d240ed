"""JSON-RPC over HTTPS client for the wallet service."""

from __future__ import annotations

import base64
import http.client
import json
import logging
import ssl
from typing import Any, Protocol

from .config import UnlockConfig
from .errors import RPCError, RPCRequestError, RPCResponseError

logger = logging.getLogger("walletunlock.client")


class WalletClient(Protocol):
    def unlock(self, passphrase: str, seconds: int) -> None:
        ...


def build_ssl_context(certificates: bytes) -> ssl.SSLContext:
    """Trust only the PEM certificates in *certificates* as the TLS root."""

    return ssl.create_default_context(cadata=certificates.decode("ascii", errors="ignore"))


class RPCClient:
    """Thin HTTPS client for wallet JSON-RPC in HTTP POST mode."""

    def __init__(
        self,
        server: str,
        username: str,
        password: str,
        certificates: bytes,
        timeout: float | None = None,
    ):
        self.server = server
        self.username = username
        self.password: str | None = password
        self.timeout = timeout
        self.context = build_ssl_context(certificates)
        self._next_id = 1

    @classmethod
    def from_config(cls, config: UnlockConfig, password: str, certificates: bytes) -> "RPCClient":
        return cls(config.server, config.rpc_user, password, certificates)

    def _connection(self) -> http.client.HTTPSConnection:
        if self.timeout is None:
            return http.client.HTTPSConnection(self.server, context=self.context)
        return http.client.HTTPSConnection(self.server, timeout=self.timeout, context=self.context)

    def call(self, method: str, params: list[Any] | None = None) -> Any:
        if self.password is None:
            raise RPCError("RPC client has been closed")
        request_id = self._next_id
        self._next_id += 1
        payload = json.dumps(
            {
                "jsonrpc": "1.0",
                "id": request_id,
                "method": method,
                "params": params or [],
            }
        )
        auth_token = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8")).decode("ascii")
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Basic {auth_token}",
        }
        logger.debug("Calling %s on https://%s/", method, self.server)
        conn = self._connection()
        try:
            conn.request("POST", "/", body=payload, headers=headers)
            response = conn.getresponse()
            body = response.read().decode("utf-8", errors="replace")
        finally:
            conn.close()
        logger.debug("RPC %s answered with HTTP %s", method, response.status)

        try:
            data = json.loads(body)
        except ValueError:
            data = None
        if isinstance(data, dict):
            error = data.get("error")
            if error:
                if isinstance(error, dict):
                    raise RPCResponseError(error.get("code"), error.get("message"))
                raise RPCResponseError(None, str(error))
        if response.status != 200 or not isinstance(data, dict):
            raise RPCRequestError(response.status, body)
        return data.get("result")

    def unlock(self, passphrase: str, seconds: int) -> None:
        self.call("walletpassphrase", [passphrase, seconds])

    def close(self) -> None:
        self.password = None
