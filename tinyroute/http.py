"""Parsing and serialization of HTTP/1.x requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_VERSION = "HTTP/1.1"


@dataclass
class HttpMessage:
    """An HTTP request or response with its start line, headers and body."""

    is_request: bool = True
    version: str = ""
    method: str = ""
    url: str = ""
    status_code: str = ""
    status_message: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_raw(cls, raw: str) -> HttpMessage:
        """Parse a raw HTTP message.

        A first line starting with ``HTTP/`` makes a response, anything else a
        request. The start line is split on whitespace and only its first three
        words are kept. Header lines without ``": "`` are ignored, and NUL
        characters are dropped from the body.
        """
        first, _, rest = raw.partition("\n")
        words = first.removesuffix("\r").split()[:3]
        words += [""] * (3 - len(words))

        if words[0].startswith("HTTP/"):
            message = cls(
                is_request=False,
                version=words[0],
                status_code=words[1],
                status_message=words[2],
            )
        else:
            message = cls(
                is_request=True,
                method=words[0],
                url=words[1],
                version=words[2],
            )

        while rest:
            line, _, rest = rest.partition("\n")
            if not line or line == "\r":
                break
            line = line.removesuffix("\r")
            name, sep, value = line.partition(": ")
            if sep:
                message.headers[name] = value

        message.body = rest.replace("\0", "")
        return message

    def serialize(self) -> str:
        """Render the message as wire text, headers in sorted order."""
        if self.is_request:
            start = f"{self.method} {self.url} {self.version}"
        else:
            start = f"{self.version} {self.status_code} {self.status_message}"
        lines = [start]
        lines.extend(f"{name}: {self.headers[name]}" for name in sorted(self.headers))
        return "\r\n".join(lines) + "\r\n\r\n" + self.body

    def header(self, name: str) -> str:
        """Return the value of header ``name``, or an empty string."""
        return self.headers.get(name, "")

    def set_status(self, code: str, message: str) -> None:
        """Turn the message into an HTTP/1.1 response with the given status."""
        self.is_request = False
        self.status_code = code
        self.status_message = message
        self.version = DEFAULT_VERSION

    def set_header(self, name: str, value: str) -> None:
        """Set header ``name`` to ``value``, replacing any earlier value."""
        self.headers[name] = value

    def set_body(self, body: str) -> None:
        """Set the body and its Content-Length header (in UTF-8 bytes)."""
        self.body = body
        self.headers["Content-Length"] = str(len(body.encode("utf-8")))