"""
CLI entry point for unlocking a wallet from a source checkout.
"""

from __future__ import annotations

from walletunlock.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
