"""Background server — uvicorn on a daemon thread.

The listening socket is bound before uvicorn starts, so the OS-assigned
port (and the base URL) is known before ``start()`` and held until
``stop()``.
"""

import logging
import socket
import threading
import time
from typing import Any

import uvicorn

from webmock.config import ServerConfig
from webmock.errors import ServerError

logger = logging.getLogger("webmock.server")


def format_url(host: str, port: int) -> str:
    """Base URL for a bound address (IPv6 hosts are bracketed)."""
    if ":" in host:
        return f"http://[{host}]:{port}"
    return f"http://{host}:{port}"


def _open_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


class BackgroundServer:
    """Serve an ASGI app from a daemon thread.

    Usage::

        runner = BackgroundServer(app, ServerConfig())
        runner.start()
        print(runner.url)
        runner.stop()
    """

    __slots__ = ("_app", "_config", "_last_address", "_server", "_socket", "_thread")

    def __init__(self, app: Any, config: ServerConfig) -> None:
        self._app = app
        self._config = config
        self._socket: socket.socket | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._last_address: tuple[str, int] | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def address(self) -> tuple[str, int]:
        """Bound ``(host, port)``; binds the socket on first access.

        After ``stop()`` this is the address last served on, and no
        socket is held until the next ``start()``.
        """
        if self._last_address is not None:
            return self._last_address
        return self._bind().getsockname()[:2]

    @property
    def url(self) -> str:
        return format_url(*self.address)

    def _bind(self) -> socket.socket:
        if self._socket is not None:
            return self._socket
        host, port = self._config.host, self._config.port

        sock = None
        if port == 0 and self._last_address is not None:
            # Prefer the previous port so the URL survives a restart
            try:
                sock = _open_socket(host, self._last_address[1])
            except OSError:
                logger.debug("Port %d no longer free, binding a new one", self._last_address[1])

        if sock is None:
            try:
                sock = _open_socket(host, port)
            except OSError as exc:
                msg = f"Cannot bind {host}:{port}: {exc}"
                raise ServerError(msg) from exc
        self._socket = sock
        self._last_address = sock.getsockname()[:2]
        return sock

    def start(self) -> None:
        """Start serving and block until uvicorn is accepting connections.

        Raises:
            ServerError: If already started, or if the server does not
                come up within ``startup_timeout`` seconds.
        """
        if self._thread is not None:
            msg = "Server is already running. Call stop() before starting it again."
            raise ServerError(msg)

        sock = self._bind()
        config = uvicorn.Config(
            self._app,
            log_level=self._config.log_level,
            access_log=self._config.access_log,
            # Leave the host application's logging configuration alone
            log_config=None,
            lifespan="on",
            backlog=self._config.backlog,
            timeout_graceful_shutdown=self._config.shutdown_timeout,
        )
        server = uvicorn.Server(config)
        thread = threading.Thread(
            target=server.run,
            kwargs={"sockets": [sock]},
            name="webmock-server",
            daemon=True,
        )
        self._server = server
        self._thread = thread
        thread.start()

        deadline = time.monotonic() + self._config.startup_timeout
        while not server.started:
            if not thread.is_alive():
                self._cleanup()
                msg = "Server thread exited during start-up."
                raise ServerError(msg)
            if time.monotonic() > deadline:
                self.stop()
                msg = f"Server did not start within {self._config.startup_timeout}s."
                raise ServerError(msg)
            time.sleep(0.01)

        logger.info("Serving on %s", self.url)

    def stop(self) -> None:
        """Stop accepting, wait for the thread, and release the port."""
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(self._config.shutdown_timeout)
            if self._thread.is_alive():
                logger.warning(
                    "Server thread did not exit within %ss", self._config.shutdown_timeout
                )
            else:
                logger.info("Server stopped")
        self._cleanup()

    def _cleanup(self) -> None:
        if self._socket is not None:
            self._socket.close()
        self._socket = None
        self._server = None
        self._thread = None
