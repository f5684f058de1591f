"""Rendering — turn the matched route (or no route) into a Response."""

from webmock.http.response import NOT_FOUND, Response
from webmock.routing.route import Route


def render(route: Route | None) -> Response:
    """Build the response for a match result.

    No route renders the empty 404. A route renders its status (200
    when unset), each of its response headers once, and its body
    verbatim.
    """
    if route is None:
        return NOT_FOUND
    return Response(
        body=route.body,
        status=route.render_status,
        headers=tuple(route.response_headers.items()),
    )
