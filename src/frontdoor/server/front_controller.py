"""Front controller: ASGI app wrapping a RequestPipeline.

The only component that touches raw ASGI. Builds a RequestContext from
the scope, asks the pipeline for an action, and delivers it.
"""

import logging
import mimetypes
from collections.abc import Awaitable, Callable
from typing import TypeAlias

import anyio

from frontdoor._internal.asgi import HTTPScope, Receive, Scope, Send
from frontdoor.errors import ContextError
from frontdoor.http.actions import Action, NotFound, Redirect, Rejected, Resolved
from frontdoor.http.context import RequestContext, is_secure_request
from frontdoor.pipeline import RequestPipeline

logger = logging.getLogger("frontdoor.server")

# Serves a resolved resource: (absolute_path, scope, receive, send)
ServeHandler: TypeAlias = Callable[[str, Scope, Receive, Send], Awaitable[None]]

TEXT_PLAIN = "text/plain; charset=utf-8"


def context_from_scope(scope: Scope) -> RequestContext:
    """Build a RequestContext from an ASGI HTTP scope.

    The path stays percent-encoded so redirect locations built from it are
    valid header values and an encoded ``%3F`` is never read as a query.
    """
    http = HTTPScope.from_scope(scope)
    return RequestContext(
        path=http.request_path,
        query=http.query_string.decode("latin-1"),
        host=http.host,
        is_secure=is_secure_request(http.https_indicator, http.port),
        port=http.port,
    )


async def send_action(
    send: Send,
    status: int,
    body: bytes = b"",
    *,
    content_type: str = TEXT_PLAIN,
    location: str | None = None,
) -> None:
    """Emit one complete ASGI response for a pipeline decision."""
    headers = [(b"content-type", content_type.encode("latin-1"))]
    if location is not None:
        headers.append((b"location", location.encode("latin-1")))
    headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body})


async def serve_file(path: str, send: Send) -> None:
    """Send the resolved resource from disk, or 404 if it isn't a file."""
    file_path = anyio.Path(path)
    if not await file_path.is_file():
        logger.warning("Resolved resource %s does not exist", path)
        await send_action(send, NotFound().status, b"Not Found")
        return

    content_type, _ = mimetypes.guess_type(path)
    await send_action(
        send,
        200,
        await file_path.read_bytes(),
        content_type=content_type or "application/octet-stream",
    )


class FrontController:
    """ASGI 3.0 application running every request through a pipeline.

    Usage::

        pipeline = RequestPipeline.from_config(load_routes("routes.json"), config)
        app = FrontController(pipeline)

    By default a ``Resolved`` action is answered by reading the file at the
    resolved path. Pass ``serve`` to hand resolved requests to something
    else (a template engine, another ASGI app, ...).
    """

    __slots__ = ("_serve", "pipeline")

    def __init__(self, pipeline: RequestPipeline, *, serve: ServeHandler | None = None) -> None:
        self.pipeline = pipeline
        self._serve = serve

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        try:
            action = self.pipeline.handle(context_from_scope(scope))
        except ContextError as exc:
            logger.warning("Bad request context for %s: %s", scope.get("path"), exc)
            await send_action(send, 400, b"Bad Request")
            return

        await self._deliver(action, scope, receive, send)

    async def _deliver(self, action: Action, scope: Scope, receive: Receive, send: Send) -> None:
        match action:
            case Resolved(path=path) if self._serve is not None:
                await self._serve(path, scope, receive, send)
            case Resolved(path=path):
                await serve_file(path, send)
            case Redirect(location=location, status=status):
                await send_action(send, status, location=location)
            case Rejected(status=status, body=body):
                await send_action(send, status, body.encode("utf-8"))
            case NotFound(status=status):
                await send_action(send, status, b"Not Found")

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan events; there is nothing to set up."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
