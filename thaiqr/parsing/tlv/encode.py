"""
TLV record encoding and the final payload serializer.
"""
from __future__ import annotations

from typing import Mapping

from thaiqr.core.checksum import CRC_TAG, compute_checksum, parse_checksum
from thaiqr.errors import ChecksumMismatchError, LengthConstraintError, PayloadFormatError

# Largest value a 2-digit length field can describe.
MAX_VALUE_LENGTH = 99


def encode_tlv_record(tag: str, value: str) -> str:
    """
    Encode a single record as ``tag + 2-digit length + value``.

    Raises:
        LengthConstraintError: If ``value`` is longer than 99 code points.
    """
    if len(value) > MAX_VALUE_LENGTH:
        raise LengthConstraintError(
            field=f"tag {tag}", actual=len(value), maximum=MAX_VALUE_LENGTH, tag=tag
        )
    return f"{tag}{len(value):02d}{value}"


def _check_tag(tag: str) -> None:
    if len(tag) != 2 or not tag.isascii() or not tag.isdigit():
        raise PayloadFormatError(f"Tag id must be two decimal digits, got '{tag}'")


def serialize_payload(tags: Mapping[str, str]) -> str:
    """
    Turn a top-level tag -> value mapping into the final payload string.

    Tags are written in ascending order and empty values are skipped. A
    checksum already present under tag 63 is re-computed and must match;
    otherwise one is computed and appended as the last record.

    Args:
        tags: Mapping of 2-digit tag ids to values.

    Returns:
        The payload string, ending with a checksum record when tag 63 was absent.

    Raises:
        ChecksumMismatchError: If a supplied checksum does not match the content.
        PayloadFormatError: If a tag id is malformed or a supplied checksum is not hex.
        LengthConstraintError: If a value is longer than 99 code points.
    """
    parts: list[str] = []
    for tag in sorted(tags):
        value = tags[tag]
        if not value:
            continue
        _check_tag(tag)
        if tag == CRC_TAG:
            expected = compute_checksum("".join(parts))
            if parse_checksum(value) != int(expected, 16):
                raise ChecksumMismatchError(expected=expected, actual=value)
        parts.append(encode_tlv_record(tag, value))

    if not tags.get(CRC_TAG):
        parts.append(encode_tlv_record(CRC_TAG, compute_checksum("".join(parts))))
    return "".join(parts)
