"""Webmock exception hierarchy.

Shared across the routing, cassette and server modules so every module
raises and catches the same types. A request that matches no stub is not
an error: it is answered with a 404 and never raised.
"""


class WebmockError(Exception):
    """Base for all webmock-specific errors."""


class ConfigurationError(WebmockError):
    """Raised when a stub or cassette definition is invalid.

    Always raised at setup time, before the offending routes are
    registered, so a broken test fixture fails loudly instead of
    serving half a configuration.
    """


class InvalidStubURI(ConfigurationError):  # noqa: N818
    """A stub URI could not be split into path and query."""

    def __init__(self, uri: str, reason: str) -> None:
        self.uri = uri
        self.reason = reason
        super().__init__(f"invalid stub URI {uri!r}: {reason}")


class CassetteError(ConfigurationError):
    """A cassette file is unreadable or malformed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class CassetteNotFound(CassetteError):  # noqa: N818
    """The cassette path does not exist."""

    def __init__(self, source: str) -> None:
        super().__init__(source, "file or directory does not exist")


class ServerError(WebmockError):
    """The background server failed to start or was driven out of order."""
