"""CLI entry point for the exporter: standalone-capable."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable

from loguru import logger
from prometheus_client import REGISTRY, CollectorRegistry

from wgexporter.collector import WireGuardCollector
from wgexporter.models import ExporterSettings
from wgexporter.server import serve

ENV_PREFIX = "WG_EXPORTER_"


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the exporter."""
    defaults = ExporterSettings()
    parser = argparse.ArgumentParser(
        description="Prometheus exporter for WireGuard peers with friendly names from the config file.",
    )
    parser.add_argument(
        "-a",
        "--metrics-path",
        default=_env("METRICS_PATH", defaults.metrics_path),
        help=f"URL path for surfacing collected metrics (default: {defaults.metrics_path})",
    )
    parser.add_argument(
        "-p",
        "--listen-address",
        default=_env("LISTEN_ADDRESS", defaults.listen_address),
        help=f"Address for the exporter, [HOST]:PORT (default: {defaults.listen_address})",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=_env("CONFIG", defaults.config_path),
        help=f"Path to the WireGuard config file (default: {defaults.config_path})",
    )
    parser.add_argument(
        "-i",
        "--interface",
        default=_env("INTERFACE", defaults.interface),
        help=f"WireGuard interface (default: {defaults.interface})",
    )
    parser.add_argument(
        "--wg-binary",
        default=_env("WG_BINARY", defaults.wg_binary),
        help=f"wg executable to run (default: {defaults.wg_binary})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def settings_from_args(parsed: argparse.Namespace) -> ExporterSettings:
    """Freeze parsed flags into the settings passed to the collector."""
    metrics_path = parsed.metrics_path if parsed.metrics_path.startswith("/") else "/" + parsed.metrics_path
    return ExporterSettings(
        metrics_path=metrics_path,
        listen_address=parsed.listen_address,
        config_path=parsed.config,
        interface=parsed.interface,
        wg_binary=parsed.wg_binary,
    )


def main(
    args: list[str] | None = None,
    registry: CollectorRegistry = REGISTRY,
    startup_hook: Callable[[ExporterSettings], None] | None = None,
) -> None:
    """Main entry point for the exporter CLI.

    ``startup_hook`` is called with the final settings before the server binds.
    """
    parsed = parse_args(args)

    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    settings = settings_from_args(parsed)
    try:
        settings.listen_host_port()
    except ValueError as e:
        logger.error(f"Invalid listen address {settings.listen_address}: {e}")
        sys.exit(1)

    if startup_hook is not None:
        startup_hook(settings)

    logger.info(f"Config path is: {settings.config_path}")
    logger.info(f"Interface exporting is: {settings.interface}")

    registry.register(WireGuardCollector(settings))
    try:
        serve(settings, registry)
    except (OSError, OverflowError) as e:
        logger.error(f"Cannot listen on {settings.listen_address}: {e}")
        sys.exit(1)
