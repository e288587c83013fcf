"""
Tokenizer for EMVCo-style TLV strings.

Each record is a 2-digit tag id, a 2-digit decimal length and a value of
exactly that many characters. Positions and lengths count Unicode code
points, not bytes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from thaiqr.core.checksum import CRC_TAG, checksum_input
from thaiqr.errors import PayloadFormatError
from thaiqr.parsing.tlv.encode import encode_tlv_record

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def is_decimal(text: str) -> bool:
    return bool(text) and all(ch in _DIGITS for ch in text)


@dataclass(frozen=True)
class TLVScan:
    """
    Result of tokenizing one TLV string.

    Attributes:
        tags: Tag id -> value, last occurrence wins.
        checksum_body: Every non-checksum record re-serialized in input order.
        claimed_checksum: The value of tag 63, or ``""`` when absent.
    """
    tags: dict[str, str] = field(default_factory=dict)
    checksum_body: str = ""
    claimed_checksum: str = ""

    @property
    def checksum_input(self) -> str:
        return checksum_input(self.checksum_body)


def parse_tlv(payload: str) -> TLVScan:
    """
    Decode a TLV string into its records.

    Args:
        payload: The TLV text, e.g. a scanned QR payload or a nested group value.

    Returns:
        A ``TLVScan`` with the tag map and the checksum coverage.

    Raises:
        PayloadFormatError: If a tag, length or value is truncated, or a tag
            id or length is not decimal.
    """
    tags: dict[str, str] = {}
    covered: list[str] = []
    claimed = ""
    total = len(payload)
    i = 0
    while i < total:
        if total - i < 2:
            raise PayloadFormatError(f"Truncated tag at position {i}")
        tag = payload[i:i + 2]
        if not is_decimal(tag):
            raise PayloadFormatError(f"Invalid tag id '{tag}' at position {i}")
        i += 2

        if total - i < 2:
            raise PayloadFormatError(f"Truncated length for tag {tag}")
        raw_length = payload[i:i + 2]
        if not is_decimal(raw_length):
            raise PayloadFormatError(f"Invalid length '{raw_length}' for tag {tag}")
        length = int(raw_length)
        i += 2

        if total - i < length:
            raise PayloadFormatError(
                f"Truncated value for tag {tag}: declared {length}, {total - i} available"
            )
        value = payload[i:i + length]
        i += length

        if tag in tags:
            logger.debug("Duplicate tag %s, keeping the last value", tag)
        tags[tag] = value
        if tag == CRC_TAG:
            claimed = value
        else:
            covered.append(encode_tlv_record(tag, value))

    return TLVScan(tags=tags, checksum_body="".join(covered), claimed_checksum=claimed)
