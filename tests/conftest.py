import base64
import json
import ssl
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"
CERT_FILE = DATA_DIR / "rpc.cert"
KEY_FILE = DATA_DIR / "rpc.key"
UNTRUSTED_CERT_FILE = DATA_DIR / "other.cert"

RPC_USER = "alice"
RPC_PASSWORD = "rpcpass"
WALLET_PASSPHRASE = "correct horse"


class StubWalletServer:
    """Minimal HTTPS JSON-RPC wallet service answering ``walletpassphrase``."""

    def __init__(self) -> None:
        self.requests: list[dict] = []
        self.unlocked_for: int | None = None
        stub = self

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self) -> None:
                expected = base64.b64encode(f"{RPC_USER}:{RPC_PASSWORD}".encode("utf-8")).decode("ascii")
                if self.headers.get("Authorization") != f"Basic {expected}":
                    self._reply(401, b"")
                    return
                length = int(self.headers.get("Content-Length", "0"))
                request = json.loads(self.rfile.read(length))
                stub.requests.append(request)
                reply = {"result": None, "error": None, "id": request["id"]}
                if request["method"] != "walletpassphrase":
                    reply["error"] = {"code": -32601, "message": "Method not found"}
                elif request["params"][0] != WALLET_PASSPHRASE:
                    reply["error"] = {"code": -14, "message": "The wallet passphrase entered was incorrect."}
                else:
                    stub.unlocked_for = request["params"][1]
                self._reply(200, json.dumps(reply).encode("utf-8"))

            def _reply(self, status: int, body: bytes) -> None:
                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format, *args) -> None:
                pass

        self.httpd = HTTPServer(("127.0.0.1", 0), Handler)
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        context.load_cert_chain(CERT_FILE, KEY_FILE)
        self.httpd.socket = context.wrap_socket(self.httpd.socket, server_side=True)
        self.address = f"127.0.0.1:{self.httpd.server_address[1]}"
        self._thread = threading.Thread(target=self.httpd.serve_forever, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self.httpd.shutdown()
        self.httpd.server_close()
        self._thread.join(timeout=5)


@pytest.fixture
def wallet_server():
    server = StubWalletServer()
    server.start()
    try:
        yield server
    finally:
        server.stop()
