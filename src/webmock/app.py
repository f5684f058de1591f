"""The mock server.

Stubs can be registered, loaded from cassettes or reset at any time,
before or while the server is running; each request sees either all of
a change or none of it.
"""

import logging
from pathlib import Path
from types import TracebackType

from webmock._internal.asgi import Receive, Scope, Send
from webmock.cassette.loader import load_cassette
from webmock.config import ServerConfig
from webmock.routing.options import StubOption, build_route
from webmock.routing.registry import RouteRegistry
from webmock.routing.route import Route
from webmock.server.handler import handle_request
from webmock.server.runner import BackgroundServer

logger = logging.getLogger("webmock.server")


class MockServer:
    """An embeddable HTTP stub server.

    Register stubs, point the code under test at ``server.url``, and
    every matching request gets the canned response. Unmatched requests
    get an empty 404.

    Usage::

        with MockServer() as server:
            server.stub("GET", "/users?page=2", "[]", with_status(200))
            response = httpx.get(server.url + "/users?page=2")

    The instance is also a plain ASGI 3 application, so it can be
    mounted in any ASGI server or driven by ``webmock.testing.TestClient``.
    """

    __slots__ = ("_registry", "_runner", "config")

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self._registry = RouteRegistry()
        self._runner = BackgroundServer(self, self.config)

    # -- Stubs --

    def stub(self, method: str, uri: str, body: str | bytes = "", *options: StubOption) -> Route:
        """Register one stub and return its Route.

        Args:
            method: HTTP method, matched case-sensitively (``"GET"``).
            uri: Path with optional raw query (``"/get?foo=bar"``). A
                scheme and host may be included; only path and query
                are matched.
            body: Response body, sent verbatim.
            options: ``with_headers(...)``, ``with_response(...)`` and
                friends, applied in order.

        Raises:
            ConfigurationError: If the method is empty or a header
                requirement is malformed.
            InvalidStubURI: If *uri* cannot be parsed.
        """
        route = build_route(method, uri, body, *options)
        self._registry.register(route)
        return route

    def load_cassette(self, path: str | Path) -> list[Route]:
        """Register every stub from a cassette file or directory.

        Nothing is registered if any file fails to load.

        Raises:
            CassetteNotFound: If *path* does not exist.
            CassetteError: If a file is unreadable or malformed.
        """
        routes = load_cassette(path)
        self._registry.extend(routes)
        logger.debug("Loaded cassette %s (%d routes)", path, len(routes))
        return routes

    def reset(self) -> None:
        """Remove every registered stub."""
        self._registry.reset()

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes, in registration order."""
        return self._registry.snapshot()

    # -- Lifecycle --

    @property
    def url(self) -> str:
        """Base URL (``http://127.0.0.1:PORT``). Available before ``start()``."""
        return self._runner.url

    @property
    def running(self) -> bool:
        return self._runner.running

    def start(self) -> None:
        """Start serving on a background thread."""
        self._runner.start()

    def stop(self) -> None:
        """Stop serving and release the port."""
        self._runner.stop()

    def __enter__(self) -> "MockServer":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"MockServer({len(self._registry)} routes, running={self.running})"

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, registry=self._registry)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge the lifespan protocol; there is nothing to set up."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
