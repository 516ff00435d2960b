"""Tests for wgexporter/models.py"""

import pytest

from wgexporter.models import CollectionResult, CollectionSummary, ExporterSettings, PeerRecord, StatusSample


class TestPeerRecord:
    """Tests for PeerRecord."""

    def test_name_defaults_to_empty(self):
        """display_name is empty unless set."""
        assert PeerRecord(public_key="abc=").display_name == ""


class TestStatusSample:
    """Tests for StatusSample."""

    def test_numeric_defaults(self):
        """Counters default to 0.0."""
        sample = StatusSample(interface_name="wg0", public_key="abc=")
        assert (sample.last_handshake, sample.bytes_received, sample.bytes_sent) == (0.0, 0.0, 0.0)

    def test_label_values_order(self):
        """Label values are interface, public key, name."""
        sample = StatusSample(interface_name="wg0", public_key="abc=", display_name="alice")
        assert sample.label_values() == ["wg0", "abc=", "alice"]


class TestCollectionResult:
    """Tests for CollectionResult."""

    def test_samples_default_empty(self):
        """No samples by default."""
        result = CollectionResult(summary=CollectionSummary(interface_name="wg0"))
        assert result.samples == []
        assert result.summary.peer_count == 0


class TestExporterSettings:
    """Tests for ExporterSettings."""

    def test_defaults(self):
        """Defaults mirror the classic exporter."""
        settings = ExporterSettings()
        assert settings.metrics_path == "/metrics"
        assert settings.listen_address == ":9586"
        assert settings.config_path == "/etc/wireguard/wg0.conf"
        assert settings.interface == "wg0"
        assert settings.wg_binary == "wg"

    @pytest.mark.parametrize(
        "address, expected",
        [
            (":9586", ("", 9586)),
            ("0.0.0.0:9586", ("0.0.0.0", 9586)),
            ("127.0.0.1:8080", ("127.0.0.1", 8080)),
            ("9586", ("", 9586)),
            ("[::1]:9586", ("::1", 9586)),
        ],
    )
    def test_listen_host_port(self, address, expected):
        """Listen address splits into host and port."""
        assert ExporterSettings(listen_address=address).listen_host_port() == expected

    @pytest.mark.parametrize("address", ["localhost:http", "127.0.0.1:70000", ":-1", "host:"])
    def test_listen_host_port_invalid(self, address):
        """Non-numeric or out-of-range port raises ValueError."""
        with pytest.raises(ValueError):
            ExporterSettings(listen_address=address).listen_host_port()

    def test_listen_host_port_bounds(self):
        """Ports 0 and 65535 are accepted."""
        assert ExporterSettings(listen_address=":0").listen_host_port() == ("", 0)
        assert ExporterSettings(listen_address=":65535").listen_host_port() == ("", 65535)
