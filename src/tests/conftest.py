# AUTOGENERATED! DO NOT EDIT! File to edit: pts/tests/conftest.pct.py

# %% pts/tests/conftest.pct.py 3
import signal
import socket
import threading

import pytest

from padserve.config import ServeConfig
from padserve.lifecycle import ShutdownCoordinator, serve
from padserve.server import PadHandler, create_server

# %% pts/tests/conftest.pct.py 4
def find_free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]

# %% pts/tests/conftest.pct.py 5
class ServerHarness:
    """A server plus its coordinator and serving thread."""

    def __init__(self, config: ServeConfig | None = None, handler_class=PadHandler):
        self.config = config or ServeConfig(host="127.0.0.1", port=0)
        self.server = create_server(self.config, handler_class=handler_class)
        self.coordinator = ShutdownCoordinator(self.server).start()
        self.thread = threading.Thread(target=serve, args=(self.server, self.coordinator), daemon=True)
        self.thread.start()

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self.server.port}/"

    def terminate(self, timeout: float = 10.0) -> None:
        self.coordinator.notify(signal.SIGTERM)
        self.thread.join(timeout=timeout)

# %% pts/tests/conftest.pct.py 6
@pytest.fixture
def free_port():
    return find_free_port()

# %% pts/tests/conftest.pct.py 7
@pytest.fixture
def server_factory():
    """Build ``ServerHarness`` instances; any still running are terminated on teardown."""
    harnesses = []

    def _make(config: ServeConfig | None = None, handler_class=PadHandler) -> ServerHarness:
        harness = ServerHarness(config, handler_class=handler_class)
        harnesses.append(harness)
        return harness

    yield _make
    for harness in harnesses:
        if harness.thread.is_alive():
            harness.terminate()

# %% pts/tests/conftest.pct.py 8
@pytest.fixture
def running_server(server_factory):
    """A server for the default greeting."""
    return server_factory()
