"""Terminal actions produced by the pipeline.

Exactly one action is produced per request. The host layer turns it into
an actual response; frontdoor itself never sends anything.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Resolved:
    """The request maps to the resource at ``path``."""

    path: str


@dataclass(frozen=True, slots=True)
class NotFound:
    """No route matches the request path."""

    status: int = 404


@dataclass(frozen=True, slots=True)
class Redirect:
    """Send the client to ``location``."""

    location: str
    status: int = 301


@dataclass(frozen=True, slots=True)
class Rejected:
    """Refuse the request with ``status`` and ``body`` verbatim."""

    status: int
    body: str = ""


Action: TypeAlias = Resolved | NotFound | Redirect | Rejected
