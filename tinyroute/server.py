"""A threaded HTTP server that dispatches requests through a router."""

from __future__ import annotations

import logging
import socket
import threading

from tinyroute.http import HttpMessage
from tinyroute.router import Router
from tinyroute.sockets import ServerSocket

log = logging.getLogger(__name__)

RECV_SIZE = 4095
_ACCEPT_POLL = 0.2


class ServerError(Exception):
    """Raised when the server cannot be set up."""


class Server(Router):
    """A router that listens on a TCP port and answers HTTP requests."""

    def __init__(self, port: int) -> None:
        super().__init__()
        self._socket = ServerSocket(timeout=_ACCEPT_POLL)
        try:
            self._socket.create()
            self._socket.bind(port)
        except OSError as exc:
            self._socket.close()
            raise ServerError(
                f"Failed to bind server socket on port {port}"
            ) from exc
        self._running = threading.Event()
        self._running.set()

    def start(self) -> None:
        """Serve connections until :meth:`stop` is called, one thread each."""
        try:
            self._socket.listen()
        except OSError as exc:
            raise ServerError("Failed to listen on server socket") from exc
        log.info("Server listening...")
        while self._running.is_set():
            try:
                client = self._socket.accept()
            except TimeoutError:
                continue
            except OSError:
                if not self._running.is_set():
                    break
                continue
            threading.Thread(target=self._serve, args=(client,), daemon=True).start()

    def stop(self) -> None:
        """Stop accepting connections and close the listening socket."""
        self._running.clear()
        self._socket.close()

    def handle(self, raw: str | bytes) -> str:
        """Answer one raw request and return the serialized response."""
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        request = HttpMessage.from_raw(raw)
        response = HttpMessage.from_raw("")
        response.set_status("200", "OK")
        self.call(request.url, request.method, request, response)
        return response.serialize()

    def _serve(self, client: socket.socket) -> None:
        with client:
            try:
                data = client.recv(RECV_SIZE)
                if data:
                    self._socket.send(client, self.handle(data))
            except OSError:
                log.exception("Connection error")
            except Exception:
                log.exception("Handler failed")