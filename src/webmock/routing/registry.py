"""Route registry — the ordered stubs of one server.

Free-threading safety:
    - Routes are frozen dataclasses (immutable)
    - The sequence is a tuple, replaced wholesale on every mutation
    - Writers serialize on a Lock; readers take the current tuple
      without locking, so a request always matches against one
      consistent snapshot, never a half-updated one
"""

import logging
import threading
from collections.abc import Iterable, Iterator

from webmock.routing.route import Route

logger = logging.getLogger("webmock.routing")


class RouteRegistry:
    """Ordered, append-only (until reset) collection of Routes.

    Usage::

        registry = RouteRegistry()
        registry.register(Route("GET", "/abc", body="ok"))
        routes = registry.snapshot()
    """

    __slots__ = ("_lock", "_routes")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._routes: tuple[Route, ...] = ()

    def register(self, route: Route) -> None:
        """Append a route. Duplicates are kept; the newest one wins at match time."""
        with self._lock:
            self._routes = (*self._routes, route)
        logger.debug("Registered %s %s", route.method, route.target)

    def extend(self, routes: Iterable[Route]) -> None:
        """Append several routes as one publication."""
        new = tuple(routes)
        with self._lock:
            self._routes = (*self._routes, *new)
        logger.debug("Registered %d routes", len(new))

    def reset(self) -> None:
        """Drop every route."""
        with self._lock:
            self._routes = ()
        logger.debug("Registry reset")

    def snapshot(self) -> tuple[Route, ...]:
        """Return the current routes in registration order."""
        return self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteRegistry({len(self._routes)} routes)"
