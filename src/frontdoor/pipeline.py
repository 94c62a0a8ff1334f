"""Request pipeline: redirect chain first, then the router.

One ``RequestContext`` in, one ``Action`` out. The pipeline is a pure
decision function: the host layer owns all I/O.
"""

import logging
from collections.abc import Mapping

from frontdoor.config import FrontdoorConfig
from frontdoor.http.actions import Action
from frontdoor.http.context import RequestContext
from frontdoor.redirects.chain import Redirector
from frontdoor.routing.router import Router
from frontdoor.routing.table import RouteTable

logger = logging.getLogger("frontdoor.pipeline")


class RequestPipeline:
    """Compose a ``Redirector`` and a ``Router``.

    Usage::

        pipeline = RequestPipeline.from_config(
            {"/": "views/home.html"},
            FrontdoorConfig(router=RouterConfig(root_path="/srv/site/")),
        )
        action = pipeline.handle(RequestContext.from_uri("/", host="example.com", port=443))
    """

    __slots__ = ("redirector", "router")

    def __init__(self, redirector: Redirector, router: Router) -> None:
        self.redirector = redirector
        self.router = router

    @classmethod
    def from_config(
        cls,
        routes: RouteTable | Mapping[str, str],
        config: FrontdoorConfig | None = None,
    ) -> "RequestPipeline":
        """Build both components from a route table and a config bundle."""
        config = config or FrontdoorConfig()
        return cls(Redirector(config.redirects), Router(routes, config.router))

    def handle(self, context: RequestContext) -> Action:
        """Decide what to do with one request.

        Raises ``ContextError`` if a check needs a field the context lacks.
        """
        action = self.redirector.run(context)
        if action is None:
            action = self.router.resolve(context.path, context)
        logger.debug("%s -> %r", context.url, action)
        return action
