# AUTOGENERATED! DO NOT EDIT! File to edit: pts/padserve/03_lifecycle.pct.py

# %% pts/padserve/03_lifecycle.pct.py 3
import queue
import signal
import threading

from rich.console import Console

from padserve.config import ServeConfig
from padserve.server import PadServer, create_server

console = Console()

# %% pts/padserve/03_lifecycle.pct.py 5
SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)

_STOP = None  # sentinel that ends the coordinator without a shutdown

# %% pts/padserve/03_lifecycle.pct.py 7
class ShutdownCoordinator:
    """Observe a signal channel and stop *server* on the first signal."""

    def __init__(self, server: PadServer):
        self.server = server
        self.channel: queue.SimpleQueue = queue.SimpleQueue()
        self.received: int | None = None
        self._previous: dict[int, object] = {}
        self._thread = threading.Thread(target=self._watch, name="padserve-shutdown", daemon=True)

    def start(self) -> "ShutdownCoordinator":
        self._thread.start()
        return self

    def subscribe(self, signals=SHUTDOWN_SIGNALS) -> None:
        """Route *signals* into the channel. Must be called from the main thread."""
        for signum in signals:
            self._previous[signum] = signal.signal(signum, self._on_signal)

    def unsubscribe(self) -> None:
        """Restore the handlers replaced by ``subscribe``."""
        for signum, handler in self._previous.items():
            signal.signal(signum, handler)
        self._previous.clear()

    def _on_signal(self, signum, frame) -> None:
        self.channel.put(signum)

    def notify(self, signum: int) -> None:
        """Feed *signum* into the channel as if it had been delivered."""
        self.channel.put(signum)

    def _watch(self) -> None:
        signum = self.channel.get()
        if signum is _STOP:
            return
        self.received = signum
        console.print(f"Received {signal.Signals(signum).name}, shutting down gracefully")
        self.server.terminating = True
        # Blocks until serve_forever has returned in the serving thread
        self.server.shutdown()

    def stop(self) -> None:
        """End the coordinator thread if no signal ever arrived."""
        if self._thread.is_alive():
            self.channel.put(_STOP)
        self._thread.join()

# %% pts/padserve/03_lifecycle.pct.py 9
def serve(server: PadServer, coordinator: ShutdownCoordinator) -> None:
    """Run the accept loop until *coordinator* stops it, then drain.

    ``server_close`` closes the listening socket before joining the request
    threads, so new connections are refused while in-flight ones finish.
    """
    try:
        server.serve_forever()
    finally:
        server.server_close()
        coordinator.stop()

# %% pts/padserve/03_lifecycle.pct.py 10
def run(config: ServeConfig) -> int:
    """Process entry point: bind, serve until a shutdown signal, exit 0."""
    server = create_server(config)
    coordinator = ShutdownCoordinator(server).start()
    coordinator.subscribe()
    console.print(f"Server running on port {server.port}")
    try:
        serve(server, coordinator)
    finally:
        coordinator.unsubscribe()
    console.print("Process terminated")
    return 0
