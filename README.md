# tinyroute

A small HTTP/1.1 server built on plain TCP sockets. Routes live in a tree
of path segments, a segment written as `:name` matches any single segment,
and one router can be mounted under a path prefix of another.

## Installation

```
pip install .
```

## Running the demo application

```
tinyroute
tinyroute --port 9000
```

The server listens on all interfaces, on port 8080 unless `--port` is
given, and runs until interrupted with Ctrl-C. If the port cannot be bound,
the command prints the error and exits with status 1.

| Method | Path          | Response body                               |
|--------|---------------|---------------------------------------------|
| GET    | `/`           | `Welcome to the home page!`                 |
| GET    | `/user/:id`   | `{ "message": "User details here" }`        |
| GET    | `/api/status` | `{ "status": "OK", "uptime": 12345 }`       |
| POST   | `/api/echo`   | `You posted:` and a newline, then the body  |

A path with no route returns `404 Not Found`. A known path used with a
method that has no handler returns `405 Method Not Allowed`.

`tinyroute.app.build_app(port)` creates the same server without starting
it.

## Using it as a library

```python
from tinyroute.router import Router
from tinyroute.server import Server

app = Server(8080)  # binds now; raises ServerError if it cannot

def home(request, response):
    response.set_header("Content-Type", "text/plain")
    response.set_body("hello\n")

app.route("/", "GET", home)

api = Router()

def echo(request, response):
    response.set_body(request.body)

api.route("/echo", "POST", echo)
app.mount("/api", api)

app.start()  # blocks; call app.stop() from another thread to end it
```

A handler is called as `handler(request, response)`. Both arguments are
`tinyroute.http.HttpMessage` objects; the response starts as
`HTTP/1.1 200 OK` and the handler changes it in place. Each connection is
served in its own thread. If a handler raises, the error is logged and the
connection is closed without a reply.

`Server.handle(raw)` takes one raw request (text or bytes) and returns the
serialized response without opening a socket, which makes routes easy to
test.

### Routing rules

- Paths are split on `/` and empty segments are dropped, so `/a//b/` and
  `a/b` are the same route.
- A segment that matches a route exactly is preferred over a `:name`
  segment at the same place.
- The whole request URL is matched, including any query string.
- `Router.mount(path, other)` places the child routes of `other` under
  `path`. Children with the same first segment as existing ones replace
  them, and a handler registered at the root of `other` itself is not
  carried over.

The lower-level tree is available as `tinyroute.links.LinkParser`, with
`add_route`, `mount` and `call`; `tinyroute.links.tokenize(path)` gives the
segments of a path.

### Messages

`HttpMessage.from_raw(text)` parses a request or, if the first line starts
with `HTTP/`, a response. Header lines without `": "` are ignored.
`serialize()` turns a message back into text, with headers in sorted order.
`header(name)` returns a header's value, or an empty string if it is not
set. `set_status(code, message)` turns the message into an HTTP/1.1
response. `set_body(body)` also sets `Content-Length` to the body's length
in UTF-8 bytes.

### Client

`tinyroute.client.fetch(host, port, path)` sends a GET request and returns
the parsed reply. `host` must be a dotted IPv4 address; anything else
raises `ValueError`.

### Sockets

`tinyroute.sockets.ServerSocket` and `ClientSocket` are small wrappers over
IPv4 TCP sockets. Both can be used as context managers and can be closed
more than once.

## What it does not do

- Values of `:name` segments are matched but not passed to handlers.
- Query strings are not parsed, and a request carrying one will usually
  not match its route.
- Each request and each reply is read with a single receive of at most
  4095 bytes; larger messages are cut off. There is no keep-alive,
  chunked encoding or TLS.
- The client does not resolve host names.