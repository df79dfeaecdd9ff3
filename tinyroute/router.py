"""A router that registers handlers and mounts other routers."""

from __future__ import annotations

from tinyroute.http import HttpMessage
from tinyroute.links import Handler, LinkParser


class Router:
    """Collects routes and dispatches requests to them."""

    def __init__(self) -> None:
        self.links = LinkParser()

    def route(self, path: str, method: str, handler: Handler) -> None:
        """Register ``handler`` for ``method`` at ``path``."""
        self.links.add_route(path, method, handler)

    def mount(self, path: str, other: Router) -> None:
        """Make the routes of ``other`` available under ``path``."""
        self.links.mount(path, other.links.root)

    def call(
        self, path: str, method: str, request: HttpMessage, response: HttpMessage
    ) -> None:
        """Dispatch a request to the matching handler."""
        self.links.call(path, method, request, response)