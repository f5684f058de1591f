"""Request matching — strict, total, last registration wins."""

from collections.abc import Mapping, Sequence

from webmock.http.headers import Headers
from webmock.http.request import StubRequest
from webmock.routing.route import Route


def headers_match(required: Mapping[str, str], headers: Headers) -> bool:
    """True if every required header is present with exactly that value.

    Names are looked up case-insensitively; values compare exactly
    against the first value the request carries. Extra request headers
    are ignored.
    """
    return all(headers.get(name) == value for name, value in required.items())


def route_matches(route: Route, request: StubRequest) -> bool:
    """Whether *route* applies to *request*: path, method, raw query and headers."""
    return (
        route.path == request.path
        and route.method == request.method
        and route.query == request.raw_query
        and headers_match(route.request_headers, request.headers)
    )


def match(routes: Sequence[Route], request: StubRequest) -> Route | None:
    """Select the route for *request*, or None when nothing matches.

    When several routes match, the one registered last wins, so a test
    can shadow an earlier stub by registering an overlapping one.
    """
    for route in reversed(routes):
        if route_matches(route, request):
            return route
    return None
