"""
Checksum coverage and verification for the payload's tag 63.

The covered text is every record except the checksum record, in wire order,
followed by the checksum record's header ``"6304"`` but not its value. The
CRC runs over the UTF-8 bytes of that text.
"""
from __future__ import annotations

import re

from thaiqr.core.binary import crc16_ccitt_false, crc16_hex
from thaiqr.errors import ChecksumMismatchError, PayloadFormatError

CRC_TAG = "63"
CRC_LENGTH = 4
CRC_HEADER = f"{CRC_TAG}{CRC_LENGTH:02d}"

_HEX = re.compile(r"[0-9A-Fa-f]+")


def checksum_input(body: str) -> str:
    """Append the checksum record header to the serialized records it covers."""
    return body + CRC_HEADER


def compute_checksum(body: str) -> str:
    """Return the 4-digit uppercase hex CRC for ``body`` plus the checksum header."""
    return crc16_hex(checksum_input(body).encode("utf-8"))


def parse_checksum(claimed: str) -> int:
    if not claimed or not _HEX.fullmatch(claimed):
        raise PayloadFormatError(f"Checksum '{claimed}' is not a hexadecimal value")
    return int(claimed, 16)


def verify_checksum(prefix: str, claimed: str) -> None:
    """
    Check ``claimed`` against the CRC of ``prefix``.

    Args:
        prefix: The full covered text, already ending with ``"6304"``.
        claimed: The checksum value found in the payload.

    Raises:
        PayloadFormatError: If ``claimed`` is empty or not hexadecimal.
        ChecksumMismatchError: If the values disagree.
    """
    claimed_value = parse_checksum(claimed)
    valid = crc16_ccitt_false(prefix.encode("utf-8"))
    if valid != claimed_value:
        raise ChecksumMismatchError(expected=f"{valid:04X}", actual=claimed)
