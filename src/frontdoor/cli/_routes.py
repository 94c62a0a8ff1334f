"""``frontdoor routes``: list a route table.

Loads a JSON route table and prints each normalized key with the
resource it resolves to.
"""

import argparse
import sys

from frontdoor.errors import FrontdoorError
from frontdoor.routing.table import load_routes


def run_routes(args: argparse.Namespace) -> None:
    """Print a KEY / RESOURCE table for ``args.routes_file``."""
    try:
        table = load_routes(args.routes_file)
    except (FrontdoorError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not table:
        print("No routes defined.")
        return

    root = args.root or ""
    rows = sorted((key, root + resource) for key, resource in table.items())

    max_key = max(max(len(key) for key, _ in rows), 3)  # "KEY" header
    fmt = f"{{:<{max_key}}}  {{}}"
    print(fmt.format("KEY", "RESOURCE"))
    sep_len = max_key + 2 + max(len(resource) for _, resource in rows)
    print("-" * min(sep_len, 80))
    for key, resource in rows:
        print(fmt.format(key, resource))
