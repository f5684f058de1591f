"""Shared fixtures for the webmock test suite."""

from collections.abc import Iterator

import pytest

from webmock.app import MockServer
from webmock.config import ServerConfig


@pytest.fixture
def live_server() -> Iterator[MockServer]:
    """A MockServer running under uvicorn on a free port."""
    server = MockServer(ServerConfig(startup_timeout=10.0))
    server.start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def cassette_dir(tmp_path):
    """A directory holding two cassettes that both stub ``GET /shared``."""
    (tmp_path / "01_base.yaml").write_text(
        "- request: {method: get, path: /shared}\n"
        "  response: {status: 200, body: from-base}\n"
        "- request: {method: get, path: /only-base}\n"
        "  response: {body: base}\n"
    )
    (tmp_path / "02_override.yml").write_text(
        "- request: {method: get, path: /shared}\n"
        "  response: {status: 202, body: from-override}\n"
    )
    return tmp_path
