"""Redirector: runs the canonicalization checks in order.

The first check that returns an action wins; later checks never run.
"""

import logging
from collections.abc import Callable
from typing import TypeAlias

from frontdoor.config import RedirectConfig
from frontdoor.http.actions import Redirect, Rejected
from frontdoor.http.context import RequestContext
from frontdoor.redirects.checks import (
    block_script_access,
    canonicalize_host,
    enforce_https,
    enforce_trailing_slash,
)

logger = logging.getLogger("frontdoor.redirects")

# A check returns None to pass, or a terminal action to stop the chain
Check: TypeAlias = Callable[[RequestContext, RedirectConfig], Redirect | Rejected | None]

DEFAULT_CHECKS: tuple[Check, ...] = (
    block_script_access,
    enforce_trailing_slash,
    canonicalize_host,
    enforce_https,
)


class Redirector:
    """Ordered, short-circuiting redirect chain.

    Usage::

        redirector = Redirector(RedirectConfig(prefer_www=True))
        action = redirector.run(context)
        if action is not None:
            ...  # send the redirect / rejection

    Checks run in a fixed order:

    1. ``block_script_access``: 404 for direct ``.php`` requests
    2. ``enforce_trailing_slash``: ``/page`` → ``/page/``
    3. ``canonicalize_host``: www / non-www
    4. ``enforce_https``: http → https (only with ``force_https``)
    """

    __slots__ = ("_checks", "_config")

    def __init__(self, config: RedirectConfig | None = None) -> None:
        self._config = config or RedirectConfig()
        self._checks = DEFAULT_CHECKS

    @property
    def config(self) -> RedirectConfig:
        return self._config

    @property
    def checks(self) -> tuple[Check, ...]:
        return self._checks

    def run(self, context: RequestContext) -> Redirect | Rejected | None:
        """Run the chain. Returns the first terminal action, or ``None``."""
        for check in self._checks:
            action = check(context, self._config)
            if action is not None:
                logger.debug("%s fired for %s: %r", check.__name__, context.url, action)
                return action
        return None
