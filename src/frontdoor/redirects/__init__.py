"""Redirect chain: ordered canonicalization checks run before routing.

Order matters: path form is fixed before host form, and host form before
scheme, so a request needs at most one hop per concern.
"""

from frontdoor.redirects.chain import Check, Redirector
from frontdoor.redirects.checks import (
    block_script_access,
    canonicalize_host,
    enforce_https,
    enforce_trailing_slash,
)

__all__ = [
    "Check",
    "Redirector",
    "block_script_access",
    "canonicalize_host",
    "enforce_https",
    "enforce_trailing_slash",
]
