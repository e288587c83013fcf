from thaiqr.codec import decode, encode
from thaiqr.core.binary import crc16_ccitt_false
from thaiqr.core.checksum import verify_checksum
from thaiqr.domain import (
    AdditionalData,
    Merchant,
    MerchantIdentifier,
    PaymentQRCode,
    PromptPay,
    PromptPayAPI,
    PromptPayBillPayment,
    Transaction,
)
from thaiqr.errors import (
    ChecksumMismatchError,
    FixedValueMismatchError,
    LengthConstraintError,
    PayloadFormatError,
    QRPayloadError,
)
from thaiqr.parsing.payload import model_to_tags, tags_to_model
from thaiqr.parsing.tlv import parse_tlv, serialize_payload
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "decode",
    "encode",
    "crc16_ccitt_false",
    "verify_checksum",
    "parse_tlv",
    "tags_to_model",
    "model_to_tags",
    "serialize_payload",
    "AdditionalData",
    "Merchant",
    "MerchantIdentifier",
    "PaymentQRCode",
    "PromptPay",
    "PromptPayAPI",
    "PromptPayBillPayment",
    "Transaction",
    "ChecksumMismatchError",
    "FixedValueMismatchError",
    "LengthConstraintError",
    "PayloadFormatError",
    "QRPayloadError",
]

try:
    __version__ = version("thaiqr")
except PackageNotFoundError:
    __version__ = "0.0.0"
