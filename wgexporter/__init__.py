"""Prometheus exporter for WireGuard peer statistics.

Reads a WireGuard configuration file to map peer public keys to friendly
names, queries ``wg show <interface> dump`` on every scrape and republishes
per-peer transfer counters and handshake timestamps.
"""

__version__ = "0.0.1"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from wgexporter.collector import WireGuardCollector  # noqa: E402
from wgexporter.directory import build_peer_directory  # noqa: E402
from wgexporter.exceptions import (  # noqa: E402
    ConfigUnreadableError,
    StatusCommandError,
    WgExporterError,
)
from wgexporter.models import (  # noqa: E402
    CollectionResult,
    CollectionSummary,
    ExporterSettings,
    PeerDirectory,
    PeerRecord,
    StatusSample,
)
from wgexporter.status import collect_status, parse_dump, run_wg_dump  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "build_peer_directory",
    "collect_status",
    "parse_dump",
    "run_wg_dump",
    "WireGuardCollector",
    "WgExporterError",
    "ConfigUnreadableError",
    "StatusCommandError",
    "CollectionResult",
    "CollectionSummary",
    "ExporterSettings",
    "PeerDirectory",
    "PeerRecord",
    "StatusSample",
]
