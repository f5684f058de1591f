"""Stub options — functional mutators over a Route.

Each option is a callable ``Route -> Route`` returning a new frozen
route. ``MockServer.stub()`` applies them in the order given, so a later
option overrides an earlier one on the same field::

    server.stub(
        "GET",
        "/users",
        "[]",
        with_headers("Accept: application/json; X-Api-Key: secret"),
        with_response(status=201, headers={"Content-Type": "application/json"}),
    )
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from http import HTTPStatus
from typing import Any, TypeAlias

from webmock.errors import ConfigurationError
from webmock.routing.route import Route
from webmock.routing.uri import parse_stub_uri

logger = logging.getLogger("webmock.routing")

StubOption: TypeAlias = Callable[[Route], Route]


def parse_header_spec(spec: str) -> dict[str, str]:
    """Parse ``"Name: value; Other: value"`` into a header dict.

    Names and values are stripped of surrounding whitespace. Only the
    first colon separates name from value, so ``"Host: a:8080"`` keeps
    the port. Empty segments are skipped.
    """
    headers: dict[str, str] = {}
    for segment in spec.split(";"):
        if not segment.strip():
            continue
        name, sep, value = segment.partition(":")
        name = name.strip()
        if not sep or not name:
            msg = f"Invalid header requirement {segment.strip()!r}: expected 'Name: value'"
            raise ConfigurationError(msg)
        headers[name] = value.strip()
    return headers


def _is_known_status(status: int) -> bool:
    try:
        HTTPStatus(status)
    except ValueError:
        return False
    return True


def with_headers(spec: str) -> StubOption:
    """Require request headers, given as ``"Name: value; Other: value"``.

    Matching is a subset check: the request may carry other headers.
    Replaces any header requirement set by an earlier option.
    """
    headers = parse_header_spec(spec)

    def apply(route: Route) -> Route:
        return replace(route, request_headers=headers)

    return apply


def with_response(
    status: int = 0,
    body: str | bytes = "",
    headers: Mapping[str, str] | None = None,
) -> StubOption:
    """Override the rendered response.

    Each part is optional: a zero status, empty body or empty header map
    leaves the route's current value alone. Unknown status codes are
    ignored.
    """

    def apply(route: Route) -> Route:
        changes: dict[str, Any] = {}
        if status:
            if _is_known_status(status):
                changes["status"] = status
            else:
                logger.warning(
                    "Ignoring unknown status %d for %s %s", status, route.method, route.path
                )
        if body:
            changes["body"] = body
        if headers:
            changes["response_headers"] = headers
        return replace(route, **changes) if changes else route

    return apply


def with_status(status: int) -> StubOption:
    """Shorthand for ``with_response(status=status)``."""
    return with_response(status=status)


def with_body(body: str | bytes) -> StubOption:
    """Shorthand for ``with_response(body=body)``."""
    return with_response(body=body)


def with_response_headers(headers: Mapping[str, str]) -> StubOption:
    """Shorthand for ``with_response(headers=headers)``."""
    return with_response(headers=headers)


def build_route(method: str, uri: str, body: str | bytes = "", *options: StubOption) -> Route:
    """Build a Route from a stub call.

    Raises:
        ConfigurationError: If *method* is empty.
        InvalidStubURI: If *uri* cannot be parsed.
    """
    if not method:
        msg = f"Stub for {uri!r} has no HTTP method."
        raise ConfigurationError(msg)

    host, path, query = parse_stub_uri(uri)
    route = Route(method=method, path=path, query=query, body=body, host=host)
    for option in options:
        route = option(route)
    return route
