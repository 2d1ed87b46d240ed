#!/usr/bin/env python3
"""Wallet unlock CLI entrypoint."""

from __future__ import annotations

import argparse
import http.client
import logging
import sys
from typing import IO, Callable

from .certs import load_certificate
from .client import RPCClient, WalletClient
from .config import DEFAULT_SECONDS, DEFAULT_SERVER, UnlockConfig, default_cert_file
from .errors import UnlockError
from .logging import setup_logging
from .prompt import SecretBuffer, prompt_secret

logger = logging.getLogger("walletunlock.cli")

Connector = Callable[[UnlockConfig, str, bytes], WalletClient]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Unlock a wallet for a limited time", allow_abbrev=False
    )
    parser.add_argument(
        "-c", dest="server", default=DEFAULT_SERVER, help="network address (host:port) of wallet RPC server"
    )
    parser.add_argument("-u", dest="rpc_user", default="", help="RPC username")
    parser.add_argument("-cert", dest="cert_file", default=str(default_cert_file()), help="certificate file for RPC TLS")
    parser.add_argument("-s", dest="seconds", type=int, default=DEFAULT_SECONDS, help="seconds to keep wallet unlocked")
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Diagnostic log level (logs go to stderr)",
    )
    return parser


def run(
    config: UnlockConfig,
    *,
    prompt: Callable[[str], str] | None = None,
    connect: Connector | None = None,
    stdout: IO[str] | None = None,
) -> None:
    prompt = prompt or prompt_secret
    connect = connect or RPCClient.from_config
    out = stdout if stdout is not None else sys.stdout

    config.validate()
    logger.debug(
        "Unlocking wallet at %s as %s for %d seconds (cert %s)",
        config.server,
        config.rpc_user,
        config.seconds,
        config.cert_file,
    )
    certificates = load_certificate(config.cert_file)

    rpc_pass = SecretBuffer(prompt("RPC password"))
    client: WalletClient | None = None
    try:
        client = connect(config, rpc_pass.reveal(), certificates)
        del certificates
        with SecretBuffer(prompt("Wallet passphrase")) as passphrase:
            client.unlock(passphrase.reveal(), config.seconds)
    finally:
        rpc_pass.wipe()
        close = getattr(client, "close", None)
        if close is not None:
            close()

    print(f"Wallet unlocked for {config.seconds} seconds.", file=out)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    config = UnlockConfig.from_args(args)
    try:
        run(config)
    except (UnlockError, OSError, http.client.HTTPException) as exc:
        logger.debug("Unlock failed", exc_info=True)
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
