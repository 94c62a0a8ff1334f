"""frontdoor: canonical redirects and exact-match routing for front controllers.

One request context in, one action out::

    from frontdoor import RequestContext, RequestPipeline

    pipeline = RequestPipeline.from_config({"/": "views/home.html"})
    action = pipeline.handle(
        RequestContext.from_uri("/about", host="www.example.com", port=80)
    )
    # Redirect(location="/about/", status=301)

Serving over ASGI::

    from frontdoor.server.front_controller import FrontController

    app = FrontController(pipeline)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "Action",
    "ConfigurationError",
    "ContextError",
    "FrontdoorConfig",
    "FrontdoorError",
    "MalformedContextField",
    "MissingContextField",
    "NotFound",
    "RedirectConfig",
    "Redirect",
    "Redirector",
    "Rejected",
    "RequestContext",
    "RequestPipeline",
    "Resolved",
    "RouteTable",
    "Router",
    "RouterConfig",
    "load_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import frontdoor`` fast while providing a clean top-level API.
    """
    if name in ("FrontdoorConfig", "RedirectConfig", "RouterConfig"):
        from frontdoor import config

        return getattr(config, name)

    if name in (
        "ConfigurationError",
        "ContextError",
        "FrontdoorError",
        "MalformedContextField",
        "MissingContextField",
    ):
        from frontdoor import errors

        return getattr(errors, name)

    if name in ("Action", "NotFound", "Redirect", "Rejected", "Resolved"):
        from frontdoor.http import actions

        return getattr(actions, name)

    if name == "RequestContext":
        from frontdoor.http.context import RequestContext

        return RequestContext

    if name in ("RouteTable", "load_routes"):
        from frontdoor.routing import table

        return getattr(table, name)

    if name == "Router":
        from frontdoor.routing.router import Router

        return Router

    if name == "Redirector":
        from frontdoor.redirects.chain import Redirector

        return Redirector

    if name == "RequestPipeline":
        from frontdoor.pipeline import RequestPipeline

        return RequestPipeline

    msg = f"module 'frontdoor' has no attribute {name!r}"
    raise AttributeError(msg)
