"""
Public entry points of the payload codec.

``decode`` and ``encode`` are pure, synchronous text transformations. All
intermediate state lives in local variables of the call, so both are safe to
use from several threads at once.
"""
from __future__ import annotations

import logging

from thaiqr.domain.models import PaymentQRCode
from thaiqr.errors import QRPayloadError
from thaiqr.logging import log_event
from thaiqr.parsing.payload import decode_payload, encode_payload


def decode(payload: str) -> PaymentQRCode:
    """
    Decode a scanned QR payload string.

    Args:
        payload: The text embedded in the QR code.

    Returns:
        The structured ``PaymentQRCode``.

    Raises:
        QRPayloadError: A subclass describing the first failure found.
    """
    try:
        qr = decode_payload(payload)
    except QRPayloadError as exc:
        log_event(
            "qr_decode_failed",
            {"error": str(exc), "kind": type(exc).__name__, "payload": payload},
            level=logging.WARNING,
        )
        raise
    log_event(
        "qr_decoded",
        {
            "networks": qr.merchant.id.networks(),
            "amount": qr.transaction.amount,
            "mobile_number": qr.merchant.id.promptpay.mobile_number,
        },
    )
    return qr


def encode(qr: PaymentQRCode) -> str:
    """
    Encode a ``PaymentQRCode`` into a checksummed payload string.

    The checksum is computed when ``qr.crc`` is empty and verified when it is set.

    Raises:
        QRPayloadError: A subclass describing the first failure found.
    """
    try:
        payload = encode_payload(qr)
    except QRPayloadError as exc:
        log_event(
            "qr_encode_failed",
            {"error": str(exc), "kind": type(exc).__name__},
            level=logging.WARNING,
        )
        raise
    log_event("qr_encoded", {"networks": qr.merchant.id.networks(), "payload": payload})
    return payload
