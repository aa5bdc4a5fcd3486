# AUTOGENERATED! DO NOT EDIT! File to edit: pts/padserve/02_server.pct.py

# %% pts/padserve/02_server.pct.py 3
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from rich.console import Console
from rich.markup import escape

from padserve.config import ServeConfig
from padserve.leftpad import left_pad

console = Console()

# %% pts/padserve/02_server.pct.py 5
CONTENT_TYPE = "text/plain"
KEEP_ALIVE_TIMEOUT = 5.0  # seconds an idle persistent connection is kept
MAX_LINE = 65537  # same cap http.server applies to request lines

# %% pts/padserve/02_server.pct.py 7
class PadServer(ThreadingHTTPServer):
    """HTTP server that answers every request with a fixed body."""
    daemon_threads = False
    block_on_close = True

    def __init__(self, address: tuple[str, int], handler_class, body: bytes, verbose: bool = False):
        self.body = body
        self.verbose = verbose
        self.terminating = False
        super().__init__(address, handler_class)

    @property
    def port(self) -> int:
        return self.server_address[1]

# %% pts/padserve/02_server.pct.py 9
class PadHandler(BaseHTTPRequestHandler):
    """Reply ``200`` with the server's body to any request."""
    protocol_version = "HTTP/1.1"
    timeout = KEEP_ALIVE_TIMEOUT

    def _drain_chunks(self) -> None:
        while True:
            size_line = self.rfile.readline(MAX_LINE)
            size = int(size_line.split(b";", 1)[0].strip() or b"0", 16)
            if size == 0:
                break
            self.rfile.read(size + 2)  # chunk data plus CRLF
        # trailer section ends at the first empty line
        while self.rfile.readline(MAX_LINE) not in (b"\r\n", b"\n", b""):
            pass

    def _discard_body(self) -> bool:
        """Read and drop any request body.

        Returns ``False`` when the end of the body can't be found, in which
        case the connection must not be reused.
        """
        encoding = self.headers.get("Transfer-Encoding", "").strip().lower()
        try:
            if encoding.endswith("chunked"):
                self._drain_chunks()
                return True
            if encoding and encoding != "identity":
                return False
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            return False
        if length > 0:
            self.rfile.read(length)
        return True

    def _respond(self, include_body: bool = True) -> None:
        reusable = self._discard_body()
        body = self.server.body
        self.send_response(200)
        self.send_header("Content-Type", CONTENT_TYPE)
        self.send_header("Content-Length", str(len(body)))
        if self.server.terminating or not reusable:
            self.send_header("Connection", "close")
            self.close_connection = True
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def do_GET(self) -> None:
        self._respond()

    def do_HEAD(self) -> None:
        self._respond(include_body=False)

    def __getattr__(self, name: str):
        # handle_one_request looks up do_<METHOD>; every other method answers like GET
        if name.startswith("do_"):
            return self.do_GET
        raise AttributeError(name)

    def log_message(self, fmt: str, *args) -> None:
        if self.server.verbose:
            console.print(f"[dim]{self.address_string()} - {escape(fmt % args)}[/dim]")

# %% pts/padserve/02_server.pct.py 11
def render_body(config: ServeConfig) -> bytes:
    """The response body for *config*: the padded greeting, UTF-8 encoded."""
    return left_pad(config.greeting, config.width).encode("utf-8")

# %% pts/padserve/02_server.pct.py 12
def create_server(config: ServeConfig, handler_class=PadHandler) -> PadServer:
    """Bind a ``PadServer`` for *config*. Raises ``OSError`` if the port is taken."""
    return PadServer(
        (config.host, config.port),
        handler_class,
        body=render_body(config),
        verbose=config.verbose,
    )
