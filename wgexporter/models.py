"""Pydantic models for WireGuard peer data and exporter settings."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PeerRecord(BaseModel):
    """A ``[Peer]`` entry from the WireGuard configuration file."""

    public_key: str
    display_name: str = ""


# Public key (with its trailing ``=``) -> PeerRecord, rebuilt on every scrape.
PeerDirectory = dict[str, PeerRecord]


class StatusSample(BaseModel):
    """Live counters for one peer row of ``wg show <interface> dump``."""

    interface_name: str
    public_key: str
    last_handshake: float = 0.0
    bytes_received: float = 0.0
    bytes_sent: float = 0.0
    display_name: str = ""

    def label_values(self) -> list[str]:
        """Label values shared by all per-peer series: interface, public_key, name."""
        return [self.interface_name, self.public_key, self.display_name]


class CollectionSummary(BaseModel):
    interface_name: str
    peer_count: int = 0


class CollectionResult(BaseModel):
    """Everything one collection cycle produced, samples in dump order."""

    samples: list[StatusSample] = Field(default_factory=list)
    summary: CollectionSummary


class ExporterSettings(BaseModel):
    """Process configuration, captured once at startup."""

    metrics_path: str = "/metrics"
    listen_address: str = ":9586"
    config_path: str = "/etc/wireguard/wg0.conf"
    interface: str = "wg0"
    wg_binary: str = "wg"

    def listen_host_port(self) -> tuple[str, int]:
        """Split ``listen_address`` into ``(host, port)``; ``:9586`` binds all interfaces.

        ``[::1]:9586`` yields host ``::1``. Raises ValueError for a
        non-numeric port or one outside 0-65535.
        """
        host, sep, port = self.listen_address.rpartition(":")
        if not sep:
            host, port = "", self.listen_address
        port_num = int(port)
        if not 0 <= port_num <= 65535:
            raise ValueError(f"port out of range 0-65535: {port_num}")
        return host.strip("[]"), port_num
