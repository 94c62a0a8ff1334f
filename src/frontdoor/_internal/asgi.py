"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias
from urllib.parse import quote

# Raw ASGI types (matching the spec)
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """The parts of an ASGI HTTP scope the front controller reads."""

    scheme: str
    path: str
    raw_path: bytes
    query_string: bytes
    headers: tuple[tuple[bytes, bytes], ...]
    server: tuple[str, int | None] | None

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        server = scope.get("server")
        return cls(
            scheme=scope.get("scheme", "http"),
            path=scope["path"],
            raw_path=scope.get("raw_path") or b"",
            query_string=scope.get("query_string", b""),
            headers=tuple(scope.get("headers", ())),
            server=tuple(server) if server else None,
        )

    @property
    def request_path(self) -> str:
        """Path as sent on the wire, still percent-encoded.

        ``path`` is decoded by the server, so it can hold characters that are
        not valid in a ``Location`` header or that read as a query separator.
        """
        if self.raw_path:
            return self.raw_path.decode("latin-1")
        return quote(self.path, safe="/")

    def header(self, name: str) -> str | None:
        """First value of header ``name`` (case-insensitive), latin-1 decoded."""
        raw_name = name.lower().encode("latin-1")
        for key, value in self.headers:
            if key.lower() == raw_name:
                return value.decode("latin-1")
        return None

    @property
    def port(self) -> int | None:
        return self.server[1] if self.server else None

    @property
    def host(self) -> str | None:
        """``Host`` header, else the server address (with a non-default port)."""
        host = self.header("host")
        if host:
            return host
        if self.server is None:
            return None
        name, port = self.server
        if port is None:
            # Unix socket: name is a filesystem path, not a host
            return None
        if port == _DEFAULT_PORTS.get(self.scheme):
            return name
        return f"{name}:{port}"

    @property
    def https_indicator(self) -> str | None:
        """Secure-transport indicator from the scheme or proxy headers."""
        if self.scheme == "https":
            return "on"
        if (self.header("x-forwarded-proto") or "").lower() == "https":
            return "on"
        return self.header("x-forwarded-ssl")
