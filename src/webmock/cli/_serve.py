"""``webmock serve`` — serve a cassette in the foreground.

Loads the cassette before binding, so a broken cassette exits with an
error instead of starting a half-configured server.
"""

import argparse
import logging
import sys
import threading

from webmock.app import MockServer
from webmock.config import ServerConfig
from webmock.errors import ConfigurationError, ServerError


def run_serve(args: argparse.Namespace, *, stop: threading.Event | None = None) -> None:
    """Serve ``args.path`` until interrupted (or until *stop* is set)."""
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    server = MockServer(ServerConfig(host=args.host, port=args.port, log_level=args.log_level))
    try:
        server.load_cassette(args.path)
        server.start()
    except (ConfigurationError, ServerError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Serving {len(server.routes)} routes on {server.url}", flush=True)
    try:
        (stop or threading.Event()).wait()
    except KeyboardInterrupt:
        pass
    finally:
        server.stop()
