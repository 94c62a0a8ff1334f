"""Exact-match router.

Resolves a request path to ``root_path + relative_resource`` through a
single dictionary lookup. No params, no wildcards, no method dispatch.
"""

from collections.abc import Mapping

from frontdoor.config import RouterConfig
from frontdoor.http.actions import Action, NotFound, Resolved
from frontdoor.http.context import RequestContext
from frontdoor.routing.table import RouteTable


def strip_subfolder(path: str, subfolder: str) -> str | None:
    """Remove a mount prefix from ``path`` on a segment boundary.

    Returns ``None`` when ``path`` is outside the subfolder::

        strip_subfolder("/shop/cart/", "/shop")  -> "/cart/"
        strip_subfolder("/shop", "/shop")        -> "/"
        strip_subfolder("/shopping/", "/shop")   -> None
    """
    if not subfolder:
        return path
    if path == subfolder:
        return "/"
    if path.startswith(subfolder + "/"):
        return path[len(subfolder) :]
    return None


class Router:
    """Resolve request paths against an immutable route table.

    Usage::

        router = Router(
            {"/": "views/home.html", "/cart/": "views/cart.html"},
            RouterConfig(root_path="/srv/site/", home_subfolder="/shop"),
        )
        router.resolve("/shop/cart")  # Resolved("/srv/site/views/cart.html")

    Holds no per-request state, so one instance can serve any number of
    concurrent requests.
    """

    __slots__ = ("_config", "_table")

    def __init__(
        self,
        routes: RouteTable | Mapping[str, str],
        config: RouterConfig | None = None,
    ) -> None:
        self._table = routes if isinstance(routes, RouteTable) else RouteTable(routes)
        self._config = config or RouterConfig()

    @property
    def routes(self) -> RouteTable:
        return self._table

    @property
    def root_path(self) -> str:
        return self._config.root_path

    @property
    def home_subfolder(self) -> str:
        return self._config.home_subfolder

    def resolve(self, request_path: str, context: RequestContext | None = None) -> Action:
        """Map ``request_path`` to a resource, or ``NotFound``.

        ``context`` is accepted for symmetry with the redirect chain; the
        lookup itself only depends on the path (the query never matters).
        """
        path = strip_subfolder(request_path, self._config.home_subfolder)
        if path is None:
            if self._config.strict_subfolder:
                return NotFound()
            # Advisory mount: fall through to a raw lookup
            path = request_path

        if not path.endswith("/"):
            path += "/"

        relative = self._table.get(path)
        if relative is None:
            return NotFound()
        return Resolved(self._config.root_path + relative)
