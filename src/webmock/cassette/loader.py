"""Cassette loading — YAML documents to Routes.

A pure parse-and-map layer: nothing here touches a registry. Callers
(``MockServer.load_cassette``, ``webmock routes``) decide what to do with
the routes. Every failure raises before any route is returned, so a
broken cassette never leaves a half-loaded server behind.
"""

import logging
from pathlib import Path

import yaml

from webmock.cassette.schema import CassetteEntry, parse_entry
from webmock.errors import CassetteError, CassetteNotFound, ConfigurationError
from webmock.routing.route import Route
from webmock.routing.uri import parse_stub_uri

logger = logging.getLogger("webmock.cassette")


def entry_to_route(entry: CassetteEntry, index: int, source: str) -> Route:
    """Map one cassette entry onto a Route (status 0 renders as 200)."""
    try:
        host, path, query = parse_stub_uri(entry.request.path)
        return Route(
            method=entry.request.method,
            path=path,
            query=query,
            request_headers=entry.request.headers,
            status=entry.response.status,
            body=entry.response.body,
            response_headers=entry.response.headers,
            host=host,
        )
    except ConfigurationError as exc:
        raise CassetteError(source, f"entry {index}: {exc}") from exc


def parse_cassette(text: str, source: str = "<string>") -> list[Route]:
    """Parse cassette document text into Routes, in document order.

    Raises:
        CassetteError: If the text is not YAML, is empty, or is not a
            list of valid entries.
    """
    try:
        # BaseLoader keeps every scalar as the literal text written
        document = yaml.load(text, Loader=yaml.BaseLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise CassetteError(source, f"invalid YAML: {exc}") from exc

    if document is None:
        raise CassetteError(source, "empty cassette")
    if not isinstance(document, list):
        raise CassetteError(source, "expected a list of request/response entries")

    return [
        entry_to_route(parse_entry(raw, index, source), index, source)
        for index, raw in enumerate(document)
    ]


def load_cassette_file(path: str | Path) -> list[Route]:
    """Load one cassette file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CassetteNotFound(str(path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CassetteError(str(path), f"cannot read file: {exc}") from exc

    routes = parse_cassette(text, str(path))
    logger.debug("Loaded %d routes from %s", len(routes), path)
    return routes


def load_cassette_dir(path: str | Path) -> list[Route]:
    """Load every file directly inside *path*, in file-name order.

    Subdirectories are skipped. File order is registration order, and
    so decides which route wins when two files stub the same request.
    """
    path = Path(path)
    try:
        files = sorted((p for p in path.iterdir() if p.is_file()), key=lambda p: p.name)
    except OSError as exc:
        raise CassetteError(str(path), f"cannot read directory: {exc}") from exc

    routes: list[Route] = []
    for file in files:
        routes.extend(load_cassette_file(file))
    return routes


def load_cassette(path: str | Path) -> list[Route]:
    """Load a cassette file or a directory of cassette files.

    Raises:
        CassetteNotFound: If *path* does not exist.
        CassetteError: If a file is unreadable or malformed.
    """
    path = Path(path)
    if not path.exists():
        raise CassetteNotFound(str(path))
    if path.is_dir():
        return load_cassette_dir(path)
    return load_cassette_file(path)
