"""
Interactive secret capture.

Secrets are read from the controlling terminal with echo turned off and kept
in a ``SecretBuffer`` so they can be zeroed once the RPC call is done.
"""

from __future__ import annotations

import contextlib
import getpass
import sys
from typing import IO, Iterator

from .errors import PromptError

if sys.platform != "win32":
    import termios


class SecretBuffer:
    """Best-effort in-memory secret container backed by a mutable bytearray."""

    def __init__(self, secret: str):
        self._buf: bytearray | None = bytearray(secret.encode("utf-8"))

    def reveal(self) -> str:
        if self._buf is None:
            raise ValueError("Secret has already been wiped")
        return self._buf.decode("utf-8")

    def wipe(self) -> None:
        if self._buf is not None:
            for i in range(len(self._buf)):
                self._buf[i] = 0
            self._buf = None

    @property
    def wiped(self) -> bool:
        return self._buf is None

    def __enter__(self) -> "SecretBuffer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.wipe()

    def __repr__(self) -> str:
        return "SecretBuffer(<wiped>)" if self.wiped else "SecretBuffer(<hidden>)"


@contextlib.contextmanager
def echo_disabled(fd: int) -> Iterator[None]:
    """Turn terminal echo off for *fd* and restore the previous mode afterwards."""

    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~termios.ECHO
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def prompt_secret(label: str, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> str:
    """Print ``"<label>: "`` and read one line from the terminal without echoing it."""

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if sys.platform == "win32":  # pragma: no cover
        try:
            return getpass.getpass(f"{label}: ", stream=stdout)
        except (EOFError, OSError) as exc:
            raise PromptError(f"Failed to read {label}: {exc}") from exc

    stdout.write(f"{label}: ")
    stdout.flush()
    if stdin is None or not stdin.isatty():
        stdout.write("\n")
        stdout.flush()
        raise PromptError(f"Failed to read {label}: input is not a terminal")

    try:
        with echo_disabled(stdin.fileno()):
            line = stdin.readline()
    except (OSError, UnicodeDecodeError, termios.error) as exc:
        raise PromptError(f"Failed to read {label}: {exc}") from exc
    finally:
        stdout.write("\n")
        stdout.flush()

    if not line:
        raise PromptError(f"Failed to read {label}: end of input")
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
