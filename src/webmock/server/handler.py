"""ASGI handler — one request through match, render and send.

The only component that touches raw HTTP scopes. Takes exactly one
registry snapshot per request so a concurrent ``stub()`` or ``reset()``
is seen either entirely or not at all.
"""

import logging

from webmock._internal.asgi import Receive, Scope, Send
from webmock.http.request import StubRequest
from webmock.http.response import SERVER_ERROR
from webmock.routing.matcher import match
from webmock.routing.registry import RouteRegistry
from webmock.server.render import render
from webmock.server.sender import send_response

logger = logging.getLogger("webmock.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    registry: RouteRegistry,
) -> None:
    """Process a single HTTP request."""
    if scope["type"] != "http":
        return

    request = StubRequest.from_asgi(scope)

    try:
        route = match(registry.snapshot(), request)
        response = render(route)
    except Exception:
        logger.exception("500 %s %s", request.method, request.url)
        response = SERVER_ERROR
    else:
        logger.debug("%d %s %s", response.status, request.method, request.url)

    await send_response(response, send)
