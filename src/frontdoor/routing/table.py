"""Immutable route table with normalized keys.

Keys are request paths that begin and end with ``/``; values are resource
paths relative to the router's root.
"""

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from frontdoor.errors import ConfigurationError


def normalize_key(path: str) -> str:
    """Normalize a route key: a leading ``/`` is required, a trailing one is added.

    Examples::

        "/about"   -> "/about/"
        "/about/"  -> "/about/"
        "/"        -> "/"
        "about"    -> ConfigurationError
    """
    if not path.startswith("/"):
        msg = f"Route key {path!r} must start with '/'."
        raise ConfigurationError(msg)
    if not path.endswith("/"):
        path += "/"
    return path


class RouteTable(Mapping[str, str]):
    """Read-only mapping from normalized request path to relative resource.

    Usage::

        table = RouteTable({"/": "/views/home.php", "/about": "/views/about.php"})
        table["/about/"]  # "/views/about.php"

    Keys missing their trailing slash are normalized. Non-string entries,
    keys without a leading slash, and keys that collide after normalization
    raise ``ConfigurationError``.
    """

    __slots__ = ("_entries",)

    def __init__(self, routes: Mapping[str, str] | None = None) -> None:
        entries: dict[str, str] = {}
        for key, value in (routes or {}).items():
            if not isinstance(key, str) or not isinstance(value, str):
                msg = f"Route entries must map str to str, got {key!r}: {value!r}"
                raise ConfigurationError(msg)
            normalized = normalize_key(key)
            if normalized in entries:
                msg = f"Route key {key!r} duplicates {normalized!r} after normalization."
                raise ConfigurationError(msg)
            entries[normalized] = value
        self._entries = MappingProxyType(entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({dict(self._entries)!r})"


def load_routes(path: str | Path) -> RouteTable:
    """Load a route table from a JSON object of ``{"/key/": "resource"}``."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Route file {str(path)!r} is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc
    if not isinstance(raw, dict):
        msg = f"Route file {str(path)!r} must contain a JSON object."
        raise ConfigurationError(msg)
    return RouteTable(raw)
