"""``webmock routes`` — list the routes a cassette defines.

Prints METHOD, PATH and STATUS in registration order; when two rows
match the same request, the lower one wins.
"""

import argparse
import sys

from webmock.cassette.loader import load_cassette
from webmock.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Load ``args.path`` and print its routes as a table."""
    try:
        routes = load_cassette(args.path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes defined.")
        return

    rows = [
        (route.method, route.host + route.target, str(route.render_status)) for route in routes
    ]

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "STATUS"))
    print("-" * min(max_method + max_path + 10, 80))
    for method, target, status in rows:
        print(fmt.format(method, target, status))
