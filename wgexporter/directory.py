"""Peer directory builder: maps public keys to ``friendly_name`` labels.

WireGuard has no notion of a peer name, so the convention is a custom
``friendly_name`` key inside each ``[Peer]`` block::

    [Peer]
    friendly_name = alice
    PublicKey = abc123...=
    AllowedIPs = 10.0.0.2/32

Lines are classified by substring containment, in this order:

    ``[Peer]``         opens a block (no-op when already inside one)
    ``AllowedIPs``     closes the block and forgets the pending name
    ``friendly_name``  sets the pending name (last one wins)
    ``PublicKey``      records the key with whatever name is pending *now*

A ``PublicKey`` that precedes its block's ``friendly_name`` is therefore
recorded with an empty name.
"""

from __future__ import annotations

from loguru import logger

from wgexporter.exceptions import ConfigUnreadableError
from wgexporter.models import PeerDirectory, PeerRecord

PEER_MARKER = "[Peer]"
END_OF_BLOCK_KEY = "AllowedIPs"
FRIENDLY_NAME_KEY = "friendly_name"
PUBLIC_KEY_KEY = "PublicKey"


def _value_of(line: str) -> str:
    """Return the trimmed text between the first and second ``=`` of ``line``.

    Base64 public keys end in ``=``, which is cut off here and re-appended by
    the caller.
    """
    parts = line.split("=")
    if len(parts) < 2:
        logger.debug(f"No '=' in line: {line!r}")
        return ""
    return parts[1].strip()


def build_peer_directory(config_path: str) -> PeerDirectory:
    """Parse a WireGuard config file into a public key -> PeerRecord mapping.

    Raises:
        ConfigUnreadableError: the file cannot be opened or read.
    """
    directory: PeerDirectory = {}
    in_block = False
    pending_name = ""

    try:
        with open(config_path, encoding="utf-8", errors="replace") as f:
            for line in f:
                if PEER_MARKER in line and not in_block:
                    in_block = True
                elif END_OF_BLOCK_KEY in line:
                    in_block = False
                    pending_name = ""
                elif FRIENDLY_NAME_KEY in line:
                    pending_name = _value_of(line)
                elif PUBLIC_KEY_KEY in line:
                    public_key = _value_of(line) + "="
                    directory[public_key] = PeerRecord(public_key=public_key, display_name=pending_name)
    except OSError as e:
        raise ConfigUnreadableError(f"Cannot read WireGuard config {config_path}: {e}", path=config_path) from e

    logger.debug(f"Loaded {len(directory)} peer(s) from {config_path}")
    return directory
