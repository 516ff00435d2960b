"""Prometheus collector: one full collection cycle per scrape."""

from __future__ import annotations

from typing import Iterator

from loguru import logger
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric

from wgexporter.directory import build_peer_directory
from wgexporter.exceptions import StatusCommandError
from wgexporter.models import CollectionResult, ExporterSettings
from wgexporter.status import collect_status

NAMESPACE = "wireguard"
PEER_LABELS = ["interface", "public_key", "name"]


class WireGuardCollector:
    """Custom collector: re-reads the config and re-runs ``wg`` on every ``collect()``.

    A config file that cannot be read propagates as ``ConfigUnreadableError``
    so the scrape fails while the server keeps running. A failing ``wg``
    command is only logged and the scrape returns no WireGuard series at all.
    """

    def __init__(self, settings: ExporterSettings) -> None:
        self.settings = settings

    @staticmethod
    def _families() -> tuple[CounterMetricFamily, CounterMetricFamily, GaugeMetricFamily, GaugeMetricFamily]:
        bytes_received = CounterMetricFamily(
            f"{NAMESPACE}_bytes_received",
            "Total number of bytes received.",
            labels=PEER_LABELS,
        )
        bytes_sent = CounterMetricFamily(
            f"{NAMESPACE}_bytes_sent",
            "Total number of bytes sent.",
            labels=PEER_LABELS,
        )
        last_handshake = GaugeMetricFamily(
            f"{NAMESPACE}_last_handshake",
            "UNIX timestamp seconds of the last handshake",
            labels=PEER_LABELS,
        )
        counter_config = GaugeMetricFamily(
            f"{NAMESPACE}_counter_config",
            "Configuration counter.",
            labels=["interface"],
        )
        return bytes_received, bytes_sent, last_handshake, counter_config

    def describe(self) -> list[Metric]:
        """Metric families without samples; keeps registration from running a collection."""
        return list(self._families())

    def run_cycle(self) -> CollectionResult | None:
        """Build the peer directory and join it with live status.

        Returns ``None`` when the status command failed.
        """
        directory = build_peer_directory(self.settings.config_path)
        try:
            return collect_status(directory, self.settings.interface, self.settings.wg_binary)
        except StatusCommandError as e:
            logger.error(f"Error running command: {e}")
            return None

    def collect(self) -> Iterator[Metric]:
        result = self.run_cycle()
        if result is None:
            return

        bytes_received, bytes_sent, last_handshake, counter_config = self._families()
        for sample in result.samples:
            labels = sample.label_values()
            bytes_received.add_metric(labels, sample.bytes_received)
            bytes_sent.add_metric(labels, sample.bytes_sent)
            last_handshake.add_metric(labels, sample.last_handshake)
        counter_config.add_metric([result.summary.interface_name], float(result.summary.peer_count))

        yield bytes_received
        yield bytes_sent
        yield last_handshake
        yield counter_config
