"""Test utilities for webmock.

Provides an in-process ASGI test client. The ``webmock_server`` pytest
fixture lives in ``webmock.testing.plugin`` and is loaded automatically
through the ``pytest11`` entry point::

    from webmock.testing import TestClient
"""

from webmock.testing.client import TestClient

__all__ = ["TestClient"]
