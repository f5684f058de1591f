"""Tests for ServerConfig."""

import dataclasses

import pytest

from webmock.config import ServerConfig


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 0
        assert config.log_level == "warning"
        assert config.access_log is False
        assert config.startup_timeout == 5.0

    def test_override(self) -> None:
        config = ServerConfig(port=8089, log_level="debug")
        assert config.port == 8089
        assert config.log_level == "debug"
        assert config.host == "127.0.0.1"

    def test_frozen(self) -> None:
        config = ServerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 9000  # type: ignore[misc]
