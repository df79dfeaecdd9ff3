"""A route tree mapping URL paths and methods to handlers."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field

from tinyroute.http import HttpMessage

Handler = Callable[[HttpMessage, HttpMessage], None]

DYNAMIC_KEY = ":"


class LinkType(enum.Enum):
    """Whether a path segment is literal or a ``:name`` placeholder."""

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass
class Node:
    """One path segment in the route tree."""

    kind: LinkType = LinkType.STATIC
    children: dict[str, Node] = field(default_factory=dict)
    methods: dict[str, Handler] = field(default_factory=dict)


def tokenize(path: str) -> list[str]:
    """Split a path on ``/``, dropping empty segments."""
    return [segment for segment in path.split("/") if segment]


def _key(segment: str) -> str:
    return DYNAMIC_KEY if segment.startswith(DYNAMIC_KEY) else segment


class LinkParser:
    """Route tree with static segments and ``:name`` wildcard segments."""

    def __init__(self) -> None:
        self.root = Node()

    def add_route(self, path: str, method: str, handler: Handler) -> None:
        """Register ``handler`` for ``method`` at ``path``."""
        node = self.root
        for segment in tokenize(path):
            key = _key(segment)
            if key not in node.children:
                kind = LinkType.DYNAMIC if key == DYNAMIC_KEY else LinkType.STATIC
                node.children[key] = Node(kind)
            node = node.children[key]
        node.methods[method] = handler

    def mount(self, base: str, subroot: Node) -> None:
        """Attach the children of ``subroot`` under the path ``base``.

        Children with the same key as existing ones replace them; handlers
        registered on ``subroot`` itself are not carried over.
        """
        node = self.root
        for segment in tokenize(base):
            node = node.children.setdefault(_key(segment), Node())
        node.children.update(subroot.children)

    def call(
        self, path: str, method: str, request: HttpMessage, response: HttpMessage
    ) -> None:
        """Dispatch to the matching handler, or fill in a 404 or 405 response."""
        node = self.root
        for segment in tokenize(path):
            child = node.children.get(segment) or node.children.get(DYNAMIC_KEY)
            if child is None:
                response.set_status("404", "Not Found")
                response.set_body("404 Not Found")
                return
            node = child

        handler = node.methods.get(method)
        if handler is None:
            response.set_status("405", "Method Not Allowed")
            response.set_body("405 Method Not Allowed")
            return
        handler(request, response)