"""HTTP sidecar server for number-extractor.

A small stdlib HTTP server on localhost, for hosts that would rather
POST OCR text than import the package.

Endpoints:
    POST /classify   — Classify text: {"text": "...", "record": false}
    GET  /history    — Recorded numbers, newest first
    POST /clear      — Clear the history
    GET  /health     — Health check

All endpoints expect/return JSON.
"""

from __future__ import annotations
import json
import os
from http.server import HTTPServer, BaseHTTPRequestHandler
from pathlib import Path
from typing import Any

from .engine import Engine
from .history import History
from .history_sqlite import SqliteHistory
from .log import get_logger

log = get_logger("number_extractor.server")

DEFAULT_PORT = int(os.environ.get("NUMBER_EXTRACTOR_PORT", "18792"))
DEFAULT_DB = os.environ.get(
    "NUMBER_EXTRACTOR_DB",
    str(Path.home() / ".number-extractor" / "history.db"),
)


class ExtractorHandler(BaseHTTPRequestHandler):
    """HTTP request handler.  ``engine`` and ``history`` are bound by make_server."""

    engine: Engine
    history: History | SqliteHistory

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        data = json.loads(body) if body else {}
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        return data

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        log.debug("request", path=self.path, detail=format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok", "history_size": self.history.size})
        elif self.path == "/history":
            self._respond(200, {"history": self.history.dump()})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            body = self._read_json()
        except ValueError as e:     # includes json.JSONDecodeError
            self._respond(400, {"error": str(e)})
            return

        try:
            if self.path == "/classify":
                text = body.get("text", "")
                result = self.engine.classify(text if isinstance(text, str) else "")
                if body.get("record"):
                    self.history.add_result(result)
                self._respond(200, result.to_dict())

            elif self.path == "/clear":
                self.history.clear()
                self._respond(200, {"status": "cleared"})

            else:
                self._respond(404, {"error": "not found"})

        except Exception as e:
            log.error("request failed", path=self.path, error=str(e), error_type=type(e).__name__)
            self._respond(500, {"error": str(e)})


def make_server(
    port: int = DEFAULT_PORT,
    *,
    history: History | SqliteHistory | None = None,
    engine: Engine | None = None,
    host: str = "127.0.0.1",
) -> HTTPServer:
    """Build (but do not start) a sidecar server.  Port 0 picks a free port."""
    handler = type("BoundExtractorHandler", (ExtractorHandler,), {
        "engine": engine or Engine(),
        "history": history if history is not None else History(),
    })
    return HTTPServer((host, port), handler)


def serve(port: int = DEFAULT_PORT, db_path: str = DEFAULT_DB) -> None:
    """Start the HTTP sidecar with a persistent history."""
    history = SqliteHistory(db_path=db_path)
    server = make_server(port, history=history)
    log.info("sidecar listening", url=f"http://127.0.0.1:{server.server_port}", history_db=db_path)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("shutting down")
    finally:
        server.server_close()
        history.close()


if __name__ == "__main__":
    import argparse
    from .log import configure_logging
    parser = argparse.ArgumentParser(description="number-extractor HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--db", default=DEFAULT_DB)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    configure_logging(args.log_level)
    serve(port=args.port, db_path=args.db)
