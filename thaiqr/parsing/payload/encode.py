"""
Encoder: ``PaymentQRCode`` -> tag map -> payload string.
"""
from __future__ import annotations

from operator import attrgetter

from thaiqr.domain.models import PaymentQRCode
from thaiqr.errors import LengthConstraintError
from thaiqr.parsing.payload import fields as f
from thaiqr.parsing.tlv import MAX_VALUE_LENGTH, serialize_payload


def model_to_tags(qr: PaymentQRCode) -> dict[str, str]:
    """
    Flatten the model into a top-level tag -> value mapping.

    Only populated fields appear in the result. Nested groups are encoded to
    their TLV text and omitted entirely when none of their subfields are set.
    Tag 63 carries ``qr.crc`` when the caller supplied one.

    Raises:
        LengthConstraintError: If a fixed-width field has the wrong width or a
            value is longer than 99 code points.
    """
    f.validate_widths(qr)

    tags: dict[str, str] = {}
    for tag, path in f.FLAT_FIELDS:
        value = attrgetter(path)(qr)
        if value:
            tags[tag] = value

    for group, path in f.SUBGROUPS:
        value = attrgetter(path)(qr)
        if not value.is_empty():
            tags[group.tag] = group.encode(value)

    for tag, value in tags.items():
        if len(value) > MAX_VALUE_LENGTH:
            raise LengthConstraintError(
                field=f"tag {tag}", actual=len(value), maximum=MAX_VALUE_LENGTH, tag=tag
            )
    return tags


def encode_payload(qr: PaymentQRCode) -> str:
    return serialize_payload(model_to_tags(qr))
