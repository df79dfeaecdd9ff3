"""A minimal HTTP GET client."""

from __future__ import annotations

from tinyroute.http import HttpMessage
from tinyroute.sockets import ClientSocket

RECV_SIZE = 4095


def fetch(host: str, port: int, path: str) -> HttpMessage:
    """Send a GET for ``path`` to ``host:port`` and parse the reply.

    Only a single read of the reply is made. An empty reply gives an empty
    message.
    """
    request = f"GET {path} HTTP/1.1\r\nHost: {host}\r\n\r\n"
    with ClientSocket() as client:
        client.request(host, port, request)
        data = client.recv(RECV_SIZE)
    return HttpMessage.from_raw(data.decode("utf-8", errors="replace"))