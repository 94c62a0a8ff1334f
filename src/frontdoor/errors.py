"""Frontdoor exception hierarchy.

Shared across the route table, Router, Redirector, and the host adapters
so every module raises and catches the same types.
"""


class FrontdoorError(Exception):
    """Base for all frontdoor-specific errors."""


class ConfigurationError(FrontdoorError):
    """Raised when a route table or config value is invalid.

    Raised at construction time so a misconfigured process never starts
    serving requests.
    """


class ContextError(FrontdoorError):
    """Base for problems with a single request's context."""

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(f"{field}: {detail}")


class MissingContextField(ContextError):  # noqa: N818
    """A field a check depends on is absent from the request context."""

    def __init__(self, field: str) -> None:
        super().__init__(field, "required request field is missing")


class MalformedContextField(ContextError):  # noqa: N818
    """A request context field is present but cannot be used safely."""
