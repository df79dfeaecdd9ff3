"""The demo application: a few routes and a mounted API router."""

from __future__ import annotations

import argparse
import sys

from tinyroute.http import HttpMessage
from tinyroute.router import Router
from tinyroute.server import Server, ServerError

DEFAULT_PORT = 8080


def _home(request: HttpMessage, response: HttpMessage) -> None:
    response.set_header("Content-Type", "text/plain")
    response.set_body("Welcome to the home page!\n")


def _user(request: HttpMessage, response: HttpMessage) -> None:
    response.set_header("Content-Type", "application/json")
    response.set_body('{ "message": "User details here" }')


def _status(request: HttpMessage, response: HttpMessage) -> None:
    response.set_header("Content-Type", "application/json")
    response.set_body('{ "status": "OK", "uptime": 12345 }')


def _echo(request: HttpMessage, response: HttpMessage) -> None:
    response.set_header("Content-Type", "text/plain")
    response.set_body("You posted:\n" + request.body)


def build_app(port: int = DEFAULT_PORT) -> Server:
    """Create the demo server bound to ``port`` with all its routes."""
    app = Server(port)
    app.route("/", "GET", _home)
    app.route("/user/:id", "GET", _user)

    api = Router()
    api.route("/status", "GET", _status)
    api.route("/echo", "POST", _echo)
    app.mount("/api", api)
    return app


def main(argv: list[str] | None = None) -> int:
    """Run the demo server until interrupted."""
    parser = argparse.ArgumentParser(prog="tinyroute", description="Run the demo server.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    try:
        app = build_app(args.port)
    except ServerError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Starting server on http://localhost:{args.port}")
    try:
        app.start()
    except KeyboardInterrupt:
        pass
    except ServerError as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        app.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())