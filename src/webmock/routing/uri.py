"""Stub URI parsing.

Splits a stub URI into host, decoded path and raw query with the
standard library URL parser, rejecting anything an HTTP client could
never send.
"""

import re
from urllib.parse import unquote, urlsplit

from webmock.errors import InvalidStubURI

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL = re.compile(r"[\x00-\x1f\x7f]")


def parse_stub_uri(uri: str) -> tuple[str, str, str]:
    """Split *uri* into ``(host, path, raw_query)``.

    The path is percent-decoded, matching the decoded path the server
    hands to the matcher. The query is returned verbatim: ``?b=2&a=1``
    and ``?a=1&b=2`` are different stubs.

    Examples::

        "/get?foo=bar&a=b"            -> ("", "/get", "foo=bar&a=b")
        "http://api.test/v1/users"    -> ("api.test", "/v1/users", "")
        "/caf%C3%A9"                  -> ("", "/café", "")

    Raises:
        InvalidStubURI: If the URI is empty, contains control
            characters, has a malformed percent-escape in its path, or
            is rejected by ``urlsplit``.
    """
    if not uri:
        raise InvalidStubURI(uri, "empty URI")
    if _CONTROL.search(uri):
        raise InvalidStubURI(uri, "control character in URI")

    try:
        parts = urlsplit(uri)
        # .port validates the port lazily
        parts.port  # noqa: B018
    except ValueError as exc:
        raise InvalidStubURI(uri, str(exc)) from exc

    if _BAD_ESCAPE.search(parts.path):
        raise InvalidStubURI(uri, "invalid percent-escape in path")

    host = parts.hostname or ""
    path = unquote(parts.path)
    if host and not path:
        path = "/"
    return host, path, parts.query
