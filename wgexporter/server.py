"""HTTP exposition of the collector on a single URL path."""

from __future__ import annotations

import http.server
import socket
from urllib.parse import urlparse

from loguru import logger
from prometheus_client import REGISTRY, CollectorRegistry, MetricsHandler

from wgexporter.exceptions import WgExporterError
from wgexporter.models import ExporterSettings

# Per-connection socket timeout (seconds), covers both reading the request and writing the response.
REQUEST_TIMEOUT = 30


class WireGuardMetricsHandler(MetricsHandler):
    """MetricsHandler that only answers on ``metrics_path`` and reports failed collections."""

    metrics_path: str = "/metrics"
    timeout = REQUEST_TIMEOUT

    def do_GET(self) -> None:
        if urlparse(self.path).path != self.metrics_path:
            self.send_error(404, "Not Found", f"metrics are served on {self.metrics_path}")
            return
        try:
            super().do_GET()
        except WgExporterError as e:
            logger.error(f"Collection failed: {e}")
            body = f"collection failed: {e}\n".encode()
            self.send_response(500)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        logger.debug(f"{self.address_string()} - {format % args}")


def make_handler(metrics_path: str, registry: CollectorRegistry = REGISTRY) -> type[WireGuardMetricsHandler]:
    """Return a handler class bound to ``metrics_path`` and ``registry``."""
    return type(
        "BoundWireGuardMetricsHandler",
        (WireGuardMetricsHandler,),
        {"metrics_path": metrics_path, "registry": registry},
    )


class ExporterHTTPServer(http.server.ThreadingHTTPServer):
    """IPv4 threading server, one thread per scrape."""


class ExporterHTTPServerV6(ExporterHTTPServer):
    address_family = socket.AF_INET6


def make_server(settings: ExporterSettings, registry: CollectorRegistry = REGISTRY) -> ExporterHTTPServer:
    """Bind a server for ``settings.listen_address``; IPv6 when the host contains ``:``.

    Raises:
        ValueError: invalid listen address.
        OSError: the address cannot be bound.
    """
    host, port = settings.listen_host_port()
    handler = make_handler(settings.metrics_path, registry)
    server_cls = ExporterHTTPServerV6 if ":" in host else ExporterHTTPServer
    return server_cls((host, port), handler)


def serve(settings: ExporterSettings, registry: CollectorRegistry = REGISTRY) -> None:
    """Serve metrics until interrupted."""
    server = make_server(settings, registry)
    logger.info(f"Starting WireGuard exporter on {settings.listen_address}{settings.metrics_path}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
