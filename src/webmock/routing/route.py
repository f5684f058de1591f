"""Route frozen dataclass — one registered stub."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from webmock.errors import ConfigurationError

# Tab is the only control character a header line may carry
_HEADER_CONTROL = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def _frozen_headers(headers: Mapping[str, str], kind: str) -> Mapping[str, str]:
    """Copy *headers* into a read-only view, rejecting what HTTP cannot carry.

    Header lines travel as latin-1 bytes with no line breaks.
    """
    for name, value in headers.items():
        text = f"{name}: {value}"
        try:
            text.encode("latin-1")
        except UnicodeEncodeError:
            msg = f"{kind} header {name!r}: {value!r} is not latin-1 encodable"
            raise ConfigurationError(msg) from None
        if not name or _HEADER_CONTROL.search(text):
            msg = f"{kind} header {name!r}: {value!r} is not a valid header line"
            raise ConfigurationError(msg)
    return MappingProxyType(dict(headers))


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen stub definition: the request shape and the canned response.

    ``method`` and ``path`` are compared exactly; ``query`` is the raw
    query string, compared byte for byte. ``request_headers`` is a subset
    requirement. A ``status`` of 0 means "unset" and renders as 200.

    Header maps are copied into read-only views on construction, so a
    registered route cannot change underneath a running match.

    Raises:
        ConfigurationError: If a header name or value cannot be sent
            as an HTTP header line.
    """

    method: str
    path: str
    query: str = ""
    request_headers: Mapping[str, str] = field(default_factory=dict)
    status: int = 0
    body: str | bytes = ""
    response_headers: Mapping[str, str] = field(default_factory=dict)
    host: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "request_headers", _frozen_headers(self.request_headers, "Request")
        )
        object.__setattr__(
            self, "response_headers", _frozen_headers(self.response_headers, "Response")
        )

    @property
    def render_status(self) -> int:
        """Status code sent on the wire (200 when unset)."""
        return self.status or 200

    @property
    def target(self) -> str:
        """Path plus raw query, as a client would request it."""
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path
