"""Routing — stub routes, the ordered registry and the matcher.

Routes are built from stub calls or cassettes, appended to the registry,
and matched against one registry snapshot per request.
"""

from webmock.routing.matcher import match, route_matches
from webmock.routing.options import (
    StubOption,
    build_route,
    with_body,
    with_headers,
    with_response,
    with_response_headers,
    with_status,
)
from webmock.routing.registry import RouteRegistry
from webmock.routing.route import Route
from webmock.routing.uri import parse_stub_uri

__all__ = [
    "Route",
    "RouteRegistry",
    "StubOption",
    "build_route",
    "match",
    "parse_stub_uri",
    "route_matches",
    "with_body",
    "with_headers",
    "with_response",
    "with_response_headers",
    "with_status",
]
