"""Frontdoor CLI: inspect a route table and dry-run requests.

Entry point registered as ``frontdoor`` in ``pyproject.toml``::

    [project.scripts]
    frontdoor = "frontdoor.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``frontdoor`` command."""
    parser = argparse.ArgumentParser(
        prog="frontdoor",
        description="frontdoor: canonical redirects and exact-match routing for front controllers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- frontdoor routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List a route table")
    routes_parser.add_argument("routes_file", help="JSON route table")
    routes_parser.add_argument("--root", default=None, help="Root path prefixed to resources")

    # -- frontdoor check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Dry-run one request URL")
    check_parser.add_argument("routes_file", help="JSON route table")
    check_parser.add_argument("url", help="Request URI, e.g. /about?tab=team")
    check_parser.add_argument("--root", default=None, help="Root path prefixed to resources")
    check_parser.add_argument("--subfolder", default="", help="Mount prefix, e.g. /shop")
    check_parser.add_argument(
        "--prefer-www",
        action="store_true",
        help="Canonicalize toward the www. host",
    )
    check_parser.add_argument(
        "--no-https",
        action="store_true",
        help="Don't redirect plain-HTTP requests",
    )
    check_parser.add_argument("--host", default="localhost", help="Request Host")
    check_parser.add_argument(
        "--secure",
        action="store_true",
        help="Treat the request as arriving over HTTPS",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from frontdoor.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from frontdoor.cli._check import run_check

        run_check(args)
