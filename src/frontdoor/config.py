"""Frontdoor configuration.

Frozen dataclasses, immutable after creation, validated once at startup::

    config = FrontdoorConfig(
        router=RouterConfig(root_path="/srv/site", home_subfolder="/shop"),
        redirects=RedirectConfig(prefer_www=True),
    )
"""

import os
from dataclasses import dataclass, field

from frontdoor.errors import ConfigurationError


def normalize_subfolder(subfolder: str) -> str:
    """Normalize a mount prefix: leading slash required, no trailing slash.

    ``""`` and ``"/"`` both mean "mounted at root" and normalize to ``""``.
    """
    if not isinstance(subfolder, str):
        msg = f"home_subfolder must be a string, got {type(subfolder).__name__}"
        raise ConfigurationError(msg)
    if not subfolder or subfolder == "/":
        return ""
    if not subfolder.startswith("/"):
        msg = f"home_subfolder must start with '/', got {subfolder!r}"
        raise ConfigurationError(msg)
    return subfolder.rstrip("/")


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Where routed resources live and where the app is mounted.

    ``root_path`` defaults to the working directory at construction time.
    Resolved paths are ``root_path + relative`` (plain concatenation), so
    include a trailing separator in ``root_path`` if the table values don't
    start with one.
    """

    root_path: str = field(default_factory=os.getcwd)
    home_subfolder: str = ""
    strict_subfolder: bool = False  # 404 paths outside home_subfolder

    def __post_init__(self) -> None:
        if not isinstance(self.root_path, str):
            msg = f"root_path must be a string, got {type(self.root_path).__name__}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "home_subfolder", normalize_subfolder(self.home_subfolder))


@dataclass(frozen=True, slots=True)
class RedirectConfig:
    """Canonicalization preferences for the redirect chain."""

    prefer_www: bool = False
    force_https: bool = True
    redirect_status: int = 301
    # Prefix host-form redirects with the request's scheme
    absolute_host_redirects: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.redirect_status, int) or isinstance(self.redirect_status, bool):
            msg = f"redirect_status must be an int, got {type(self.redirect_status).__name__}"
            raise ConfigurationError(msg)
        if not 300 <= self.redirect_status < 400:
            msg = f"redirect_status must be a 3xx code, got {self.redirect_status}"
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class FrontdoorConfig:
    """Router and redirect settings bundled for adapters and the CLI."""

    router: RouterConfig = field(default_factory=RouterConfig)
    redirects: RedirectConfig = field(default_factory=RedirectConfig)
