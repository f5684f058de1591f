"""Webmock — an embeddable HTTP stub server for test suites.

Register the requests you expect and the responses to send back, then
point the code under test at the server's base URL.

Basic usage::

    from webmock import MockServer, with_headers, with_response

    with MockServer() as server:
        server.stub("GET", "/abc", "ok")
        server.stub(
            "GET",
            "/users?page=2",
            '{"users": []}',
            with_headers("Accept: application/json"),
            with_response(headers={"Content-Type": "application/json"}),
        )
        client = MyApiClient(base_url=server.url)

Cassettes (YAML request/response lists)::

    server.load_cassette("tests/cassettes/")
"""

__version__ = "0.1.0"
__all__ = [
    "CassetteError",
    "CassetteNotFound",
    "ConfigurationError",
    "InvalidStubURI",
    "MockServer",
    "Response",
    "Route",
    "RouteRegistry",
    "ServerConfig",
    "ServerError",
    "StubOption",
    "WebmockError",
    "load_cassette",
    "parse_cassette",
    "with_body",
    "with_headers",
    "with_response",
    "with_response_headers",
    "with_status",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "MockServer": "webmock.app",
    "ServerConfig": "webmock.config",
    "Response": "webmock.http.response",
    "Route": "webmock.routing.route",
    "RouteRegistry": "webmock.routing.registry",
    "StubOption": "webmock.routing.options",
    "with_body": "webmock.routing.options",
    "with_headers": "webmock.routing.options",
    "with_response": "webmock.routing.options",
    "with_response_headers": "webmock.routing.options",
    "with_status": "webmock.routing.options",
    "load_cassette": "webmock.cassette.loader",
    "parse_cassette": "webmock.cassette.loader",
    "CassetteError": "webmock.errors",
    "CassetteNotFound": "webmock.errors",
    "ConfigurationError": "webmock.errors",
    "InvalidStubURI": "webmock.errors",
    "ServerError": "webmock.errors",
    "WebmockError": "webmock.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import webmock`` fast (no uvicorn import) until a server is
    actually needed.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
