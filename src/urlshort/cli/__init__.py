"""urlshort CLI — serve, validate, and list redirect files.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort — redirect short paths, greet everything else.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort serve ---------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve a redirect file")
    serve_parser.add_argument("redirects", help="Redirect file (.yaml, .yml, or .json)")
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument("--debug", action="store_true", help="Debug mode (verbose logs)")
    serve_parser.add_argument("--greeting", default=None, help="Fallback response body")

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a redirect file")
    check_parser.add_argument("redirects", help="Redirect file (.yaml, .yml, or .json)")

    # -- urlshort routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the redirects in a file")
    routes_parser.add_argument("redirects", help="Redirect file (.yaml, .yml, or .json)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from urlshort.cli._serve import serve

        serve(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
    elif args.command == "routes":
        from urlshort.cli._check import list_routes

        list_routes(args)
