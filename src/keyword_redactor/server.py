"""HTTP sidecar server for keyword-redactor.

Runs a lightweight stdlib HTTP server on localhost so that services in other
languages can mask text before logging or storing it.

Endpoints:
    POST /redact          - Mask text, returns {"text": ...}
    POST /scan            - Mask text, returns text plus occurrence/mask report
    GET  /keywords        - Active keyword table
    GET  /health          - Health check

Body format: {"text": "...", "keywords": [...]}.  ``keywords`` is optional
and overrides the server's table for that request only.
"""

from __future__ import annotations
import json
import logging
import os
from http.server import HTTPServer, BaseHTTPRequestHandler
from typing import Any

from .cli import result_to_json
from .redactor import Redactor, RedactorConfig
from .registry import KeywordRegistry

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = int(os.environ.get("KEYWORD_REDACTOR_PORT", "18792"))

# Shared state
_redactor: Redactor | None = None


class BadRequest(ValueError):
    """Request body the sidecar cannot work with."""


def _get_redactor() -> Redactor:
    global _redactor
    if _redactor is None:
        _redactor = Redactor()
    return _redactor


def set_redactor(redactor: Redactor | None) -> None:
    """Replace the shared redactor (None resets to the default table)."""
    global _redactor
    _redactor = redactor


def _redactor_for(body: dict[str, Any]) -> Redactor:
    base = _get_redactor()
    if body.get("keywords") is None:
        return base
    return Redactor(RedactorConfig(
        keywords=KeywordRegistry.from_config(body["keywords"]),
        allow_list=base.config.allow_list,
    ))


class KeywordRedactorHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the redaction sidecar."""

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        try:
            body = self.rfile.read(length).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BadRequest("body must be UTF-8") from exc
        try:
            data = json.loads(body) if body else {}
        except json.JSONDecodeError as exc:
            raise BadRequest(f"invalid JSON: {exc.msg}") from exc
        if not isinstance(data, dict):
            raise BadRequest("body must be a JSON object")
        return data

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok", "keywords": len(_get_redactor().keywords)})
        elif self.path == "/keywords":
            self._respond(200, {"keywords": _get_redactor().keywords.as_dict()})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            body = self._read_json()
            if self.path not in ("/redact", "/scan"):
                self._respond(404, {"error": "not found"})
                return

            text = body.get("text", "")
            if not isinstance(text, str):
                raise BadRequest("'text' must be a string")
            result = _redactor_for(body).redact(text)

            if self.path == "/redact":
                self._respond(200, {"text": result.text})
            else:
                self._respond(200, result_to_json(result))

        except BadRequest as e:
            self._respond(400, {"error": str(e)})
        except Exception as e:
            logger.exception("Request to %s failed", self.path)
            self._respond(500, {"error": str(e)})


def make_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> HTTPServer:
    return HTTPServer((host, port), KeywordRedactorHandler)


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Start the redaction HTTP sidecar."""
    server = make_server(host, port)
    logger.info("keyword-redactor sidecar listening on http://%s:%d", host, server.server_port)
    logger.info("  keywords: %s", ", ".join(_get_redactor().keywords.names))
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    finally:
        server.server_close()


if __name__ == "__main__":
    import argparse
    from .logging_utils import configure_logging

    parser = argparse.ArgumentParser(description="keyword-redactor HTTP sidecar")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--log-level", default=os.environ.get("KEYWORD_REDACTOR_LOG_LEVEL", "INFO"))
    args = parser.parse_args()
    configure_logging(args.log_level)
    serve(host=args.host, port=args.port)
