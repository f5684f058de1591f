"""HTTP response value.

The renderer builds one per request; the sender turns it into ASGI
messages, and ``TestClient`` hands one back to the test.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable HTTP response: body, status and header pairs in order."""

    body: str | bytes = b""
    status: int = 200
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8 when given as text."""
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    @property
    def text(self) -> str:
        return self.body_bytes.decode("utf-8")

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first header value for *name* (case-insensitive)."""
        name_lower = name.lower()
        for key, value in self.headers:
            if key.lower() == name_lower:
                return value
        return default


NOT_FOUND = Response(status=404)
SERVER_ERROR = Response(status=500)
