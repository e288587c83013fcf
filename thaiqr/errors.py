"""
Exceptions raised by the payload codec.

Every failure aborts the current decode or encode call; a raised error means
no usable model or payload string was produced.
"""
from __future__ import annotations

from typing import Optional


class QRPayloadError(ValueError):
    """Base class for all decode and encode failures."""
    pass


class PayloadFormatError(QRPayloadError):
    """Raised when TLV framing is truncated or malformed, or a checksum is not hex."""
    pass


class ChecksumMismatchError(QRPayloadError):
    """Raised when a computed CRC disagrees with the one carried by the payload."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"CRC mismatch: expected {expected}, got {actual or '(none)'}")


class FixedValueMismatchError(QRPayloadError):
    """Raised when a field does not carry its mandated constant (country, currency, AID)."""

    def __init__(self, field: str, expected: str, actual: str) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid {field}: expected '{expected}', got '{actual}'")


class LengthConstraintError(QRPayloadError):
    """
    Raised when a value breaks a width rule.

    Either ``expected`` is set (a fixed-width field of the wrong width) or
    ``maximum`` is set (a value longer than a TLV length field can express).
    """

    def __init__(
        self,
        field: str,
        actual: int,
        expected: Optional[int] = None,
        maximum: Optional[int] = None,
        tag: Optional[str] = None,
    ) -> None:
        self.field = field
        self.actual = actual
        self.expected = expected
        self.maximum = maximum
        self.tag = tag
        label = f"{field} (tag {tag})" if tag and tag not in field else field
        if expected is not None:
            message = f"{label} must be {expected} characters but got {actual}"
        else:
            message = f"{label} must not be longer than {maximum} characters but got {actual}"
        super().__init__(message)
