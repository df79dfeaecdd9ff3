import pytest

from tinyroute.http import HttpMessage
from tinyroute.links import LinkParser, LinkType, Node, tokenize


def _body_handler(text):
    def handler(request, response):
        response.set_body(text)

    return handler


def _dispatch(parser, path, method="GET"):
    request = HttpMessage.from_raw(f"{method} {path} HTTP/1.1\r\n\r\n")
    response = HttpMessage()
    response.set_status("200", "OK")
    parser.call(path, method, request, response)
    return response


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/a//b/", ["a", "b"]),
        ("", []),
        ("/", []),
        ("user/:id", ["user", ":id"]),
    ],
)
def test_tokenize(path, expected):
    assert tokenize(path) == expected


def test_static_route_dispatches():
    parser = LinkParser()
    parser.add_route("/hello", "GET", _body_handler("hi there"))
    response = _dispatch(parser, "/hello")
    assert response.status_code == "200"
    assert response.body == "hi there"


def test_root_route():
    parser = LinkParser()
    parser.add_route("/", "GET", _body_handler("home"))
    assert _dispatch(parser, "/").body == "home"


def test_dynamic_route_matches_any_segment():
    parser = LinkParser()
    parser.add_route("/user/:id", "GET", _body_handler("user"))
    assert _dispatch(parser, "/user/42").body == "user"
    assert _dispatch(parser, "/user/abc").body == "user"


def test_dynamic_node_stored_under_colon_key():
    parser = LinkParser()
    parser.add_route("/user/:id", "GET", _body_handler("user"))
    user = parser.root.children["user"]
    assert user.kind is LinkType.STATIC
    assert list(user.children) == [":"]
    assert user.children[":"].kind is LinkType.DYNAMIC


def test_static_takes_precedence_over_dynamic():
    parser = LinkParser()
    parser.add_route("/user/:id", "GET", _body_handler("dynamic"))
    parser.add_route("/user/me", "GET", _body_handler("static"))
    assert _dispatch(parser, "/user/me").body == "static"
    assert _dispatch(parser, "/user/7").body == "dynamic"


def test_unknown_path_gives_404():
    parser = LinkParser()
    parser.add_route("/a", "GET", _body_handler("a"))
    response = _dispatch(parser, "/b")
    assert response.status_code == "404"
    assert response.status_message == "Not Found"
    assert response.body == "404 Not Found"


def test_wrong_method_gives_405():
    parser = LinkParser()
    parser.add_route("/a", "GET", _body_handler("a"))
    response = _dispatch(parser, "/a", method="POST")
    assert response.status_code == "405"
    assert response.body == "405 Method Not Allowed"


def test_intermediate_node_without_handler_gives_405():
    parser = LinkParser()
    parser.add_route("/a/b", "GET", _body_handler("ab"))
    assert _dispatch(parser, "/a").status_code == "405"


def test_handler_receives_request():
    seen = []
    parser = LinkParser()
    parser.add_route("/echo", "POST", lambda req, res: seen.append(req.body))
    request = HttpMessage.from_raw("POST /echo HTTP/1.1\r\n\r\npayload")
    parser.call("/echo", "POST", request, HttpMessage())
    assert seen == ["payload"]


def test_mount_subtree():
    sub = LinkParser()
    sub.add_route("/status", "GET", _body_handler("ok"))
    parser = LinkParser()
    parser.mount("/api", sub.root)
    assert _dispatch(parser, "/api/status").body == "ok"
    assert _dispatch(parser, "/status").status_code == "404"


def test_mount_replaces_existing_child():
    parser = LinkParser()
    parser.add_route("/api/status", "GET", _body_handler("old"))
    sub = LinkParser()
    sub.add_route("/status", "GET", _body_handler("new"))
    parser.mount("/api", sub.root)
    assert _dispatch(parser, "/api/status").body == "new"


def test_mount_does_not_copy_root_handlers():
    sub = LinkParser()
    sub.add_route("/", "GET", _body_handler("sub root"))
    parser = LinkParser()
    parser.mount("/api", sub.root)
    assert _dispatch(parser, "/api").status_code == "405"


def test_mount_shares_nodes():
    sub_root = Node()
    parser = LinkParser()
    parser.mount("/x", Node(children={"y": sub_root}))
    assert parser.root.children["x"].children["y"] is sub_root