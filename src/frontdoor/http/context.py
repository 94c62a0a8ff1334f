"""Immutable per-request context.

Everything the redirect chain and the router are allowed to know about
the inbound request. Built once by the host layer and passed explicitly;
nothing in frontdoor reads ambient request state.
"""

from __future__ import annotations

from dataclasses import dataclass

from frontdoor.errors import MalformedContextField

HTTPS_PORT = 443

# Values of an HTTPS indicator that mean "not secure" (CGI convention)
_DISABLED_INDICATORS = frozenset({"", "0", "off"})


def https_indicator_enabled(indicator: str | None) -> bool:
    """True if a secure-transport indicator is present and not disabled."""
    if indicator is None:
        return False
    return indicator.strip().lower() not in _DISABLED_INDICATORS


def is_secure_request(indicator: str | None, port: int | None) -> bool:
    """Decide whether a request arrived over TLS.

    Either test is sufficient: proxies that terminate TLS upstream forward
    only the indicator, while direct connections may only show the port.
    """
    return https_indicator_enabled(indicator) or port == HTTPS_PORT


def _has_control_chars(value: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value)


@dataclass(frozen=True, slots=True)
class RequestContext:
    """The inbound request, as seen by the decision pipeline.

    ``host`` and ``port`` may be ``None`` when the host layer could not
    determine them; checks that need them raise ``MissingContextField``.
    Construction rejects values that could never be routed or redirected
    safely with ``MalformedContextField``.
    """

    path: str
    query: str = ""
    host: str | None = None
    is_secure: bool = False
    port: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.startswith("/"):
            raise MalformedContextField("path", f"must start with '/', got {self.path!r}")
        if "?" in self.path or "#" in self.path:
            raise MalformedContextField("path", "must not contain a query or fragment")
        if _has_control_chars(self.path):
            raise MalformedContextField("path", "contains control characters")

        if not isinstance(self.query, str):
            raise MalformedContextField("query", f"must be a string, got {self.query!r}")
        if "#" in self.query:
            raise MalformedContextField("query", "must not contain a fragment")
        if _has_control_chars(self.query):
            raise MalformedContextField("query", "contains control characters")

        if self.host is not None:
            if not isinstance(self.host, str):
                raise MalformedContextField("host", f"must be a string, got {self.host!r}")
            if "/" in self.host or any(ch.isspace() for ch in self.host):
                raise MalformedContextField("host", f"not a valid host: {self.host!r}")

    @classmethod
    def from_uri(
        cls,
        uri: str,
        *,
        host: str | None = None,
        port: int | None = None,
        https: str | None = None,
    ) -> RequestContext:
        """Build a context from a raw request URI (path plus query).

        The URI is split at the first ``?``. ``https`` is the raw
        secure-transport indicator (e.g. ``"on"``), combined with ``port``
        to compute ``is_secure``.
        """
        path, _, query = uri.partition("?")
        return cls(
            path=path,
            query=query,
            host=host,
            is_secure=is_secure_request(https, port),
            port=port,
        )

    @property
    def url(self) -> str:
        """Path plus query string, without a dangling ``?``."""
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path
