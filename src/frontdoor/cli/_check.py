"""``frontdoor check``: run one URL through the pipeline and print the action.

Exits 0 when the URL resolves to a resource, 1 for every other outcome
(redirect, rejection, not found, or a configuration/context error).
"""

import argparse
import sys

from frontdoor.config import FrontdoorConfig, RedirectConfig, RouterConfig
from frontdoor.errors import FrontdoorError
from frontdoor.http.actions import NotFound, Redirect, Rejected, Resolved
from frontdoor.http.context import HTTPS_PORT, RequestContext
from frontdoor.pipeline import RequestPipeline
from frontdoor.routing.table import load_routes


def describe(action: Resolved | NotFound | Redirect | Rejected) -> str:
    """One-line, human-readable rendering of an action."""
    match action:
        case Resolved(path=path):
            return f"RESOLVED {path}"
        case Redirect(location=location, status=status):
            return f"REDIRECT {status} {location}"
        case Rejected(status=status, body=body):
            return f"REJECTED {status} {body}"
        case _:
            return f"NOT FOUND {action.status}"


def run_check(args: argparse.Namespace) -> None:
    """Dry-run ``args.url`` against ``args.routes_file``."""
    try:
        table = load_routes(args.routes_file)
        router_config = (
            RouterConfig(root_path=args.root, home_subfolder=args.subfolder)
            if args.root is not None
            else RouterConfig(home_subfolder=args.subfolder)
        )
        config = FrontdoorConfig(
            router=router_config,
            redirects=RedirectConfig(prefer_www=args.prefer_www, force_https=not args.no_https),
        )
        pipeline = RequestPipeline.from_config(table, config)
        context = RequestContext.from_uri(
            args.url,
            host=args.host,
            port=HTTPS_PORT if args.secure else 80,
        )
        action = pipeline.handle(context)
    except (FrontdoorError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(describe(action))
    if not isinstance(action, Resolved):
        raise SystemExit(1)
