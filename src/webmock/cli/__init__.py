"""Webmock CLI — serve a cassette, list its routes.

Entry point registered as ``webmock`` in ``pyproject.toml``::

    [project.scripts]
    webmock = "webmock.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``webmock`` command."""
    parser = argparse.ArgumentParser(
        prog="webmock",
        description="Webmock — an embeddable HTTP stub server for test suites.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- webmock serve ----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve a cassette file or directory")
    serve_parser.add_argument("path", help="Cassette file or directory of cassettes")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind host address")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=0,
        help="Bind port number (default: any free port)",
    )
    serve_parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level",
    )

    # -- webmock routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes a cassette defines")
    routes_parser.add_argument("path", help="Cassette file or directory of cassettes")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from webmock.cli._serve import run_serve

        run_serve(args)
    elif args.command == "routes":
        from webmock.cli._routes import run_routes

        run_routes(args)
