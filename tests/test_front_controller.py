"""Tests for frontdoor.server.front_controller: ASGI delivery of actions."""

from pathlib import Path
from typing import Any

import pytest

from frontdoor.config import FrontdoorConfig, RedirectConfig, RouterConfig
from frontdoor.pipeline import RequestPipeline
from frontdoor.server.front_controller import (
    FrontController,
    context_from_scope,
    send_action,
)


def _make_scope(
    path: str = "/",
    *,
    query: bytes = b"",
    host: str = "example.com",
    scheme: str = "https",
    port: int = 443,
    raw_path: bytes | None = None,
) -> dict[str, Any]:
    scope: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "method": "GET",
        "scheme": scheme,
        "path": path,
        "query_string": query,
        "headers": [(b"host", host.encode("latin-1"))] if host else [],
        "server": ("127.0.0.1", port),
    }
    if raw_path is not None:
        scope["raw_path"] = raw_path
    return scope


async def _call(app: FrontController, scope: dict[str, Any]) -> tuple[int, dict[str, str], bytes]:
    """Run one request and collect status, headers, and body."""
    messages: list[dict[str, Any]] = []

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message: dict[str, Any]) -> None:
        messages.append(message)

    await app(scope, receive, send)
    start, body = messages
    headers = {k.decode("latin-1"): v.decode("latin-1") for k, v in start["headers"]}
    return start["status"], headers, body["body"]


def _app(site: Path, **redirects: Any) -> FrontController:
    pipeline = RequestPipeline.from_config(
        {"/": "index.html", "/about/": "about.txt", "/gone/": "missing.html"},
        FrontdoorConfig(
            router=RouterConfig(root_path=f"{site}/"),
            redirects=RedirectConfig(**redirects),
        ),
    )
    return FrontController(pipeline)


@pytest.fixture
def site(tmp_path: Path) -> Path:
    (tmp_path / "index.html").write_text("<h1>Home</h1>")
    (tmp_path / "about.txt").write_text("About us")
    return tmp_path


class TestContextFromScope:
    def test_secure_scope(self) -> None:
        ctx = context_from_scope(_make_scope("/x/", query=b"a=1"))
        assert ctx.path == "/x/"
        assert ctx.query == "a=1"
        assert ctx.host == "example.com"
        assert ctx.is_secure is True
        assert ctx.port == 443

    def test_plain_scope(self) -> None:
        ctx = context_from_scope(_make_scope(scheme="http", port=80))
        assert ctx.is_secure is False

    def test_forwarded_proto(self) -> None:
        scope = _make_scope(scheme="http", port=8000)
        scope["headers"].append((b"x-forwarded-proto", b"https"))
        assert context_from_scope(scope).is_secure is True

    def test_path_stays_percent_encoded(self) -> None:
        scope = _make_scope("/a?b/", raw_path=b"/a%3Fb/")
        assert context_from_scope(scope).path == "/a%3Fb/"

    def test_path_encoded_without_raw_path(self) -> None:
        assert context_from_scope(_make_scope("/café menu/")).path == "/caf%C3%A9%20menu/"


class TestSendAction:
    @pytest.mark.anyio
    async def test_redirect(self) -> None:
        sent: list[dict[str, Any]] = []

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await send_action(send, 301, location="/a/")
        start, body = sent
        assert start["status"] == 301
        assert (b"location", b"/a/") in start["headers"]
        assert (b"content-length", b"0") in start["headers"]
        assert body == {"type": "http.response.body", "body": b""}

    @pytest.mark.anyio
    async def test_body_without_location(self) -> None:
        sent: list[dict[str, Any]] = []

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await send_action(send, 404, b"Silence is golden!")
        start, body = sent
        assert all(name != b"location" for name, _ in start["headers"])
        assert (b"content-type", b"text/plain; charset=utf-8") in start["headers"]
        assert body["body"] == b"Silence is golden!"


class TestFrontController:
    @pytest.mark.anyio
    async def test_serves_resolved_file(self, site: Path) -> None:
        status, headers, body = await _call(_app(site), _make_scope("/"))
        assert status == 200
        assert headers["content-type"] == "text/html"
        assert body == b"<h1>Home</h1>"
        assert headers["content-length"] == str(len(body))

    @pytest.mark.anyio
    async def test_trailing_slash_redirect(self, site: Path) -> None:
        status, headers, body = await _call(_app(site), _make_scope("/about", query=b"t=1"))
        assert status == 301
        assert headers["location"] == "/about/?t=1"
        assert body == b""

    @pytest.mark.anyio
    async def test_https_redirect(self, site: Path) -> None:
        scope = _make_scope("/about/", scheme="http", port=80)
        status, headers, _ = await _call(_app(site), scope)
        assert status == 301
        assert headers["location"] == "https://example.com/about/"

    @pytest.mark.anyio
    async def test_script_rejected(self, site: Path) -> None:
        status, _, body = await _call(_app(site), _make_scope("/index.php"))
        assert status == 404
        assert body == b"Silence is golden!"

    @pytest.mark.anyio
    async def test_unknown_route(self, site: Path) -> None:
        status, _, body = await _call(_app(site), _make_scope("/nope/"))
        assert status == 404
        assert body == b"Not Found"

    @pytest.mark.anyio
    async def test_resolved_but_missing_file(self, site: Path) -> None:
        status, _, _ = await _call(_app(site), _make_scope("/gone/"))
        assert status == 404

    @pytest.mark.anyio
    async def test_missing_host_is_bad_request(self, site: Path) -> None:
        scope = _make_scope("/about/", host="")
        del scope["server"]
        status, _, body = await _call(_app(site), scope)
        assert status == 400
        assert body == b"Bad Request"

    @pytest.mark.anyio
    async def test_custom_serve(self, site: Path) -> None:
        served: list[str] = []

        async def serve(path: str, scope: Any, receive: Any, send: Any) -> None:
            served.append(path)
            await send({"type": "http.response.start", "status": 204, "headers": []})
            await send({"type": "http.response.body", "body": b""})

        app = FrontController(_app(site).pipeline, serve=serve)
        status, _, _ = await _call(app, _make_scope("/about/"))
        assert status == 204
        assert served == [f"{site}/about.txt"]

    @pytest.mark.anyio
    async def test_non_ascii_path_redirect(self, site: Path) -> None:
        scope = _make_scope("/€", raw_path=b"/%E2%82%AC")
        status, headers, _ = await _call(_app(site), scope)
        assert status == 301
        assert headers["location"] == "/%E2%82%AC/"
        assert headers["location"].isascii()

    @pytest.mark.anyio
    async def test_non_ascii_path_without_raw_path(self, site: Path) -> None:
        status, headers, _ = await _call(_app(site), _make_scope("/€"))
        assert status == 301
        assert headers["location"] == "/%E2%82%AC/"

    @pytest.mark.anyio
    async def test_encoded_question_mark_redirect(self, site: Path) -> None:
        scope = _make_scope("/a?b", query=b"x=1", raw_path=b"/a%3Fb")
        status, headers, _ = await _call(_app(site), scope)
        assert status == 301
        assert headers["location"] == "/a%3Fb/?x=1"
        assert headers["location"].isascii()

    @pytest.mark.anyio
    async def test_encoded_question_mark_is_not_bad_request(self, site: Path) -> None:
        status, _, body = await _call(_app(site), _make_scope("/a?b/", raw_path=b"/a%3Fb/"))
        assert status == 404
        assert body == b"Not Found"

    @pytest.mark.anyio
    async def test_space_in_path_redirect(self, site: Path) -> None:
        status, headers, _ = await _call(_app(site), _make_scope("/my page"))
        assert status == 301
        assert headers["location"] == "/my%20page/"

    @pytest.mark.anyio
    async def test_unix_socket_without_host_header(self, site: Path) -> None:
        scope = _make_scope("/about/", host="")
        scope["server"] = ("/run/frontdoor.sock", None)
        status, _, _ = await _call(_app(site), scope)
        assert status == 400

    @pytest.mark.anyio
    async def test_lifespan(self, site: Path) -> None:
        incoming = [{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}]
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return incoming.pop(0)

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await _app(site)({"type": "lifespan"}, receive, send)
        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]
