"""Thin TCP socket wrappers for the server and the client side."""

from __future__ import annotations

import socket

DEFAULT_BACKLOG = 5


def _encode(message: str | bytes) -> bytes:
    return message.encode("utf-8") if isinstance(message, str) else message


class ServerSocket:
    """A listening IPv4 TCP socket bound to all interfaces."""

    def __init__(self, timeout: float | None = None) -> None:
        self._sock: socket.socket | None = None
        self._timeout = timeout

    def __enter__(self) -> ServerSocket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _open(self) -> socket.socket:
        if self._sock is None:
            raise OSError("server socket is not open")
        return self._sock

    def create(self) -> None:
        """Open a fresh socket, closing any previous one."""
        self.close()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        if self._timeout is not None:
            self._sock.settimeout(self._timeout)

    def bind(self, port: int) -> None:
        """Bind to ``port`` on every local interface."""
        self._open().bind(("", port))

    def listen(self, backlog: int = DEFAULT_BACKLOG) -> None:
        """Start accepting connections."""
        self._open().listen(backlog)

    def accept(self) -> socket.socket:
        """Wait for a client and return its connection."""
        connection, _ = self._open().accept()
        return connection

    def send(self, client: socket.socket, message: str | bytes) -> None:
        """Send the whole of ``message`` to ``client``."""
        client.sendall(_encode(message))

    def close(self) -> None:
        """Close the socket; closing twice is harmless."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None


class ClientSocket:
    """An IPv4 TCP socket that connects to a numeric address."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = socket.socket(
            socket.AF_INET, socket.SOCK_STREAM
        )

    def __enter__(self) -> ClientSocket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _open(self) -> socket.socket:
        if self._sock is None:
            raise OSError("client socket is closed")
        return self._sock

    def request(self, hostname: str, port: int, message: str | bytes) -> None:
        """Connect to ``hostname:port`` and send ``message``.

        ``hostname`` must be a dotted IPv4 address; anything else raises
        ValueError. Connection failures raise the usual OSError subclasses.
        """
        sock = self._open()
        try:
            socket.inet_pton(socket.AF_INET, hostname)
        except OSError as exc:
            raise ValueError(f"invalid address: {hostname}") from exc
        sock.connect((hostname, port))
        sock.sendall(_encode(message))

    def recv(self, bufsize: int = 4096) -> bytes:
        """Read at most ``bufsize`` bytes; empty when the peer has closed."""
        return self._open().recv(bufsize)

    def close(self) -> None:
        """Close the socket; closing twice is harmless."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None