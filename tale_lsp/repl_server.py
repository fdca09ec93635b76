from __future__ import annotations

"""
Simple TCP REPL server for TALE.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(def x 1)"}
- Response: {"ok": true, "result": <rendered value>} or {"ok": false, "error": <message>}

A single Interpreter is kept alive so that definitions persist across
evaluations and clients. Evaluations are serialized through a lock since
environments are not safe for concurrent use.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from tale import config
from tale.errors import TaleError
from tale.interpreter import Interpreter
from tale.printer import to_string

logger = logging.getLogger(__name__)

HOST, PORT = config.DEFAULT_REPL_HOST, config.DEFAULT_REPL_PORT


class ReplServer:
    def __init__(self, host: str = HOST, port: int = PORT, interp: Interpreter | None = None):
        self.host = host
        self.port = port
        self.interp = interp if interp is not None else Interpreter()
        self._lock = threading.Lock()

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("TALE REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                logger.debug("client connected from %s", addr)
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def handle_request(self, line: bytes) -> dict:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}

        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        try:
            with self._lock:
                result = self.interp.eval(code)
        except TaleError as ex:
            return {"ok": False, "error": str(ex)}
        except RecursionError:
            return {"ok": False, "error": "maximum recursion depth exceeded"}
        return {"ok": True, "result": to_string(result)}

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client %s disconnected", addr)


if __name__ == "__main__":
    ReplServer(*config.get_repl_address()).serve_forever()
