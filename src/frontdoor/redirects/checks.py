"""The four canonicalization checks.

Each check is a pure function of the request context and redirect config.
It returns ``None`` to pass, or a terminal action to short-circuit the
chain. None of them perform I/O.
"""

from frontdoor.config import RedirectConfig
from frontdoor.errors import MissingContextField
from frontdoor.http.actions import Redirect, Rejected
from frontdoor.http.context import RequestContext

WWW_PREFIX = "www."
SCRIPT_SUFFIX = ".php"
SCRIPT_REJECTION_BODY = "Silence is golden!"


def is_script_path(path: str) -> bool:
    """True if ``path`` ends with ``.php``, optionally followed by one ``/``."""
    if path.endswith("/"):
        path = path[:-1]
    return path.endswith(SCRIPT_SUFFIX)


def has_www_prefix(host: str) -> bool:
    """True if ``host`` starts with the literal ``www.`` prefix."""
    return host.startswith(WWW_PREFIX)


def _require_host(context: RequestContext) -> str:
    if not context.host:
        raise MissingContextField("host")
    return context.host


def block_script_access(
    context: RequestContext, config: RedirectConfig
) -> Rejected | None:
    """Reject direct requests for implementation scripts."""
    if is_script_path(context.path):
        return Rejected(404, SCRIPT_REJECTION_BODY)
    return None


def enforce_trailing_slash(
    context: RequestContext, config: RedirectConfig
) -> Redirect | None:
    """Redirect ``/page?q`` to ``/page/?q``."""
    if context.path.endswith("/"):
        return None
    location = context.path + "/"
    if context.query:
        location += "?" + context.query
    return Redirect(location, config.redirect_status)


def canonicalize_host(
    context: RequestContext, config: RedirectConfig
) -> Redirect | None:
    """Redirect to the preferred www / non-www host form."""
    host = _require_host(context)
    if config.prefer_www:
        if has_www_prefix(host):
            return None
        target = WWW_PREFIX + host
    else:
        if not has_www_prefix(host):
            return None
        target = host[len(WWW_PREFIX) :]

    location = target + context.url
    if config.absolute_host_redirects:
        scheme = "https" if context.is_secure else "http"
        location = f"{scheme}://{location}"
    return Redirect(location, config.redirect_status)


def enforce_https(
    context: RequestContext, config: RedirectConfig
) -> Redirect | None:
    """Redirect plain-HTTP requests to the same URL over HTTPS."""
    if not config.force_https or context.is_secure:
        return None
    host = _require_host(context)
    return Redirect(f"https://{host}{context.url}", config.redirect_status)
