"""Status joiner: runs ``wg show <interface> dump`` and joins it with the peer directory."""

from __future__ import annotations

import subprocess

from loguru import logger

from wgexporter.exceptions import StatusCommandError
from wgexporter.models import CollectionResult, CollectionSummary, PeerDirectory, StatusSample

# Peer row layout of `wg show <iface> dump`:
#   public-key preshared-key endpoint allowed-ips latest-handshake transfer-rx transfer-tx persistent-keepalive
FIELD_PUBLIC_KEY = 0
FIELD_LAST_HANDSHAKE = 4
FIELD_BYTES_RECEIVED = 5
FIELD_BYTES_SENT = 6
MIN_PEER_FIELDS = 7


def run_wg_dump(interface: str, wg_binary: str = "wg") -> str:
    """Run ``wg show <interface> dump`` and return stdout and stderr combined.

    Raises:
        StatusCommandError: the command could not be launched or exited non-zero.
    """
    cmd = [wg_binary, "show", interface, "dump"]
    try:
        result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
    except OSError as e:
        raise StatusCommandError(f"Cannot run {' '.join(cmd)}: {e}") from e

    output = result.stdout.decode("utf-8", errors="replace")
    if result.returncode != 0:
        raise StatusCommandError(
            f"{' '.join(cmd)} exited with status {result.returncode}: {output.strip()}",
            returncode=result.returncode,
            output=output,
        )
    return output


def _parse_float(value: str, what: str) -> float:
    """Parse a dump counter, ``0.0`` on failure. Underscore digit grouping is not a number here."""
    try:
        if "_" in value:
            raise ValueError(f"invalid digit separator in {value!r}")
        return float(value)
    except ValueError as e:
        logger.warning(f"Error parsing {what}: {e}")
        return 0.0


def parse_dump(output: str, directory: PeerDirectory, interface: str) -> CollectionResult:
    """Turn dump output into one StatusSample per peer row plus a summary.

    The first line (interface row) is always dropped and empty lines are
    skipped. Every other line counts toward ``peer_count``, even when it is
    too short to become a sample or its numbers fall back to ``0.0``.
    """
    samples: list[StatusSample] = []
    count = 0

    for line in output.split("\n")[1:]:
        if line == "":
            continue
        count += 1

        fields = line.split()
        if len(fields) < MIN_PEER_FIELDS:
            logger.warning(f"Skipping malformed dump line ({len(fields)} fields, need {MIN_PEER_FIELDS}): {line!r}")
            continue

        public_key = fields[FIELD_PUBLIC_KEY]
        last_handshake = _parse_float(fields[FIELD_LAST_HANDSHAKE], "last handshake")
        bytes_received = _parse_float(fields[FIELD_BYTES_RECEIVED], "bytes received")
        bytes_sent = _parse_float(fields[FIELD_BYTES_SENT], "bytes sent")

        peer = directory.get(public_key)
        display_name = peer.display_name if peer else ""
        if display_name:
            logger.debug(f"User for key {public_key} is {display_name}")
        else:
            logger.debug(f"User name not set for key: {public_key}")

        samples.append(
            StatusSample(
                interface_name=interface,
                public_key=public_key,
                last_handshake=last_handshake,
                bytes_received=bytes_received,
                bytes_sent=bytes_sent,
                display_name=display_name,
            )
        )

    return CollectionResult(
        samples=samples,
        summary=CollectionSummary(interface_name=interface, peer_count=count),
    )


def collect_status(directory: PeerDirectory, interface: str, wg_binary: str = "wg") -> CollectionResult:
    """Run the dump command for ``interface`` and join it with ``directory``.

    Raises:
        StatusCommandError: propagated from :func:`run_wg_dump`.
    """
    output = run_wg_dump(interface, wg_binary)
    return parse_dump(output, directory, interface)
