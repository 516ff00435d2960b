"""Shared fixtures for the wgexporter test suite."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from wgexporter.models import ExporterSettings, PeerRecord

ALICE_KEY = "xTIBA5rboUvnH4htodjb6e697QjLERt1NAB4mZqp8Dg="
BOB_KEY = "TrMvSoP4jYQlY6RIzBgbssQqY3vxI2Pi+y71lOWWXX0="
CAROL_KEY = "gN65BkIKy1eCE9pP1wdc8ROUtkHLF2PfAqYdyYBz6EA="

SAMPLE_CONFIG = f"""\
[Interface]
Address = 10.0.0.1/24
ListenPort = 51820
PrivateKey = yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk=

[Peer]
friendly_name = alice
PublicKey = {ALICE_KEY}
AllowedIPs = 10.0.0.2/32

[Peer]
# friendly_name = bob
PublicKey = {BOB_KEY}
AllowedIPs = 10.0.0.3/32

[Peer]
PublicKey = {CAROL_KEY}
friendly_name = carol
AllowedIPs = 10.0.0.4/32
"""

SAMPLE_DUMP = (
    "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk=\tHIgo9xNzJMWLKASShiTqIybxZ0U3wGLiUeJ1PKf8ykw=\t51820\toff\n"
    f"{ALICE_KEY}\t(none)\t192.0.2.10:51820\t10.0.0.2/32\t1700000000\t1024\t2048\t25\n"
    f"{BOB_KEY}\t(none)\t198.51.100.7:40000\t10.0.0.3/32\t1700000100\t4096\t8192\toff\n"
    f"{CAROL_KEY}\t(none)\t(none)\t10.0.0.4/32\t0\t0\t0\toff\n"
)


@pytest.fixture()
def sample_config(tmp_path):
    """Write SAMPLE_CONFIG to a temp file and return its path as str."""
    path = tmp_path / "wg0.conf"
    path.write_text(SAMPLE_CONFIG)
    return str(path)


@pytest.fixture()
def write_config(tmp_path):
    """Factory fixture writing arbitrary config text, returns the path as str."""

    def _write(text: str, name: str = "wg0.conf") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return _write


@pytest.fixture()
def sample_directory():
    """Peer directory matching SAMPLE_CONFIG."""
    return {
        ALICE_KEY: PeerRecord(public_key=ALICE_KEY, display_name="alice"),
        BOB_KEY: PeerRecord(public_key=BOB_KEY, display_name="bob"),
        CAROL_KEY: PeerRecord(public_key=CAROL_KEY, display_name=""),
    }


@pytest.fixture()
def settings_factory():
    """Factory fixture returning ExporterSettings with customizable fields."""

    def _make(**kwargs):
        defaults = {
            "metrics_path": "/metrics",
            "listen_address": "127.0.0.1:0",
            "config_path": "/etc/wireguard/wg0.conf",
            "interface": "wg0",
            "wg_binary": "wg",
        }
        defaults.update(kwargs)
        return ExporterSettings(**defaults)

    return _make


@pytest.fixture()
def completed_process():
    """Factory fixture mimicking subprocess.run's CompletedProcess (bytes stdout)."""

    def _make(stdout: str = SAMPLE_DUMP, returncode: int = 0):
        result = Mock()
        result.stdout = stdout.encode()
        result.returncode = returncode
        return result

    return _make


@pytest.fixture()
def keys():
    """Public keys used by SAMPLE_CONFIG and SAMPLE_DUMP."""
    return SimpleNamespace(alice=ALICE_KEY, bob=BOB_KEY, carol=CAROL_KEY)


@pytest.fixture()
def sample_dump():
    """Raw `wg show wg0 dump` output for the three sample peers."""
    return SAMPLE_DUMP
