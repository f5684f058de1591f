"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Mock server configuration. Immutable after creation.

    All fields have sensible defaults for use inside a test suite::

        config = ServerConfig(port=8089, log_level="info")
    """

    # Bind address; port 0 lets the OS pick a free port
    host: str = "127.0.0.1"
    port: int = 0

    # uvicorn's own logger level and access log
    log_level: str = "warning"
    access_log: bool = False

    # Seconds to wait for the background server to come up / drain
    startup_timeout: float = 5.0
    shutdown_timeout: float = 5.0

    backlog: int = 2048
