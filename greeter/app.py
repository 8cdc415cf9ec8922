from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import os

DEFAULT_PORT = 3000
HEALTH_PATH = "/health"
HEALTH_BODY = b"OK"
GREETING_BODY = b"Hello 8.3C!"

DRAIN_CHUNK_SIZE = 64 * 1024


def read_port(environ=os.environ) -> int:
    """Port from $PORT, falling back to 3000 when unset, empty or not a number."""
    raw = (environ.get("PORT") or "").strip()
    if not raw.isascii() or not raw.isdigit():
        return DEFAULT_PORT
    return int(raw)


def resolve_response(path: str):
    # exact match only: "/health?x=1" and "/health/" get the greeting
    if path == HEALTH_PATH:
        return 200, HEALTH_BODY
    return 200, GREETING_BODY


class Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def _respond(self):
        self._discard_body()
        status, body = resolve_response(self.request_target)
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def _discard_body(self):
        if self.headers.get("Transfer-Encoding"):
            self.close_connection = True
            return
        try:
            remaining = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            self.close_connection = True
            return
        while remaining > 0:
            chunk = self.rfile.read(min(remaining, DRAIN_CHUNK_SIZE))
            if not chunk:
                break
            remaining -= len(chunk)

    def parse_request(self):
        if not super().parse_request():
            return False
        # self.path has "//" collapsed on newer interpreters; match the target as sent
        self.request_target = self.requestline.split()[1]
        return True

    def __getattr__(self, name):
        # any method token the transport parses is answered the same way
        if name.startswith("do_"):
            return self._respond
        raise AttributeError(name)

    def log_message(self, format, *args):
        return


def build_server(port: int, host: str = "0.0.0.0") -> ThreadingHTTPServer:
    return ThreadingHTTPServer((host, port), Handler)


def run(port=None):
    if port is None:
        port = read_port()
    server = build_server(port)
    print(f"[server] Listening on {server.server_address[1]}", flush=True)
    server.serve_forever()


if __name__ == "__main__":
    run()
