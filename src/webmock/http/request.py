"""Immutable view of an incoming request.

Only what matching needs: method, decoded path, raw query string and
headers. The body is never read; stubs do not inspect payloads.
"""

from dataclasses import dataclass
from typing import Any

from webmock.http.headers import Headers


@dataclass(frozen=True, slots=True)
class StubRequest:
    """An immutable HTTP request as seen by the matcher."""

    method: str
    path: str
    raw_query: str
    headers: Headers

    @property
    def url(self) -> str:
        """Request target (path + raw query string)."""
        if self.raw_query:
            return f"{self.path}?{self.raw_query}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> "StubRequest":
        """Create a StubRequest from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            raw_query=scope.get("query_string", b"").decode("latin-1"),
            headers=Headers(tuple(scope.get("headers", ()))),
        )
