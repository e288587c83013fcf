"""
Tag ids, nested-group tables and width rules for the Thai QR payload.
"""
from __future__ import annotations

from operator import attrgetter

from thaiqr.domain.models import (
    BILL_PAYMENT_AID,
    COUNTRY_CODE_TH,
    CURRENCY_CODE_THB,
    PROMPTPAY_AID,
    AdditionalData,
    PaymentQRCode,
    PromptPay,
    PromptPayAPI,
    PromptPayBillPayment,
)
from thaiqr.errors import FixedValueMismatchError, LengthConstraintError
from thaiqr.parsing.tlv import TLVSubgroup

PAYLOAD_FORMAT_INDICATOR = "00"
POINT_OF_INITIATION_METHOD = "01"
MERCHANT_VISA = "02"
MERCHANT_MASTERCARD = "04"
MERCHANT_CUP = "14"
MERCHANT_UNION_PAY = "15"
MERCHANT_EMVCO = "17"
MERCHANT_TPN = "26"
MERCHANT_PROMPT_CARD = "27"
MERCHANT_VISA_LOCAL = "28"
MERCHANT_PROMPTPAY = "29"
MERCHANT_PROMPTPAY_BILL_PAYMENT = "30"
MERCHANT_API = "31"
MASTERCARD_DATA_OBJECT = "51"
MERCHANT_CATEGORY_CODE = "52"
TRANSACTION_CURRENCY = "53"
TRANSACTION_AMOUNT = "54"
COUNTRY_CODE = "58"
MERCHANT_NAME = "59"
MERCHANT_CITY = "60"
ADDITIONAL_DATA = "62"
CRC = "63"

# Flat top-level fields: tag -> attribute path on PaymentQRCode.
FLAT_FIELDS: tuple[tuple[str, str], ...] = (
    (PAYLOAD_FORMAT_INDICATOR, "payload_format_indicator"),
    (POINT_OF_INITIATION_METHOD, "point_of_initiation_method"),
    (MERCHANT_VISA, "merchant.id.visa"),
    (MERCHANT_MASTERCARD, "merchant.id.mastercard"),
    (MERCHANT_CUP, "merchant.id.cup"),
    (MERCHANT_UNION_PAY, "merchant.id.union_pay"),
    (MERCHANT_EMVCO, "merchant.id.emvco"),
    (MERCHANT_TPN, "merchant.id.tpn"),
    (MERCHANT_PROMPT_CARD, "merchant.id.prompt_card"),
    (MERCHANT_VISA_LOCAL, "merchant.id.visa_local"),
    (MASTERCARD_DATA_OBJECT, "mastercard_data_object"),
    (MERCHANT_CATEGORY_CODE, "merchant.category_code"),
    (TRANSACTION_CURRENCY, "transaction.currency_code"),
    (TRANSACTION_AMOUNT, "transaction.amount"),
    (COUNTRY_CODE, "country_code"),
    (MERCHANT_NAME, "merchant.name"),
    (MERCHANT_CITY, "merchant.city"),
    (CRC, "crc"),
)

PROMPTPAY_GROUP = TLVSubgroup(
    tag=MERCHANT_PROMPTPAY,
    name="PromptPay",
    factory=PromptPay,
    fields=(
        ("00", "aid"),
        ("01", "mobile_number"),
        ("02", "national_id"),
        ("03", "ewallet_id"),
        ("04", "bank_account"),
        ("05", "national_ewallet_id"),
    ),
    aid=PROMPTPAY_AID,
)

BILL_PAYMENT_GROUP = TLVSubgroup(
    tag=MERCHANT_PROMPTPAY_BILL_PAYMENT,
    name="PromptPay bill payment",
    factory=PromptPayBillPayment,
    fields=(
        ("00", "aid"),
        ("01", "biller_id"),
        ("02", "reference_1"),
        ("03", "reference_2"),
    ),
    aid=BILL_PAYMENT_AID,
)

API_GROUP = TLVSubgroup(
    tag=MERCHANT_API,
    name="API",
    factory=PromptPayAPI,
    fields=(
        ("00", "aid"),
        ("01", "acquirer_id"),
        ("02", "merchant_id"),
        ("03", "transaction_ref"),
        ("04", "reference_no"),
        ("05", "terminal_id"),
    ),
)

ADDITIONAL_DATA_GROUP = TLVSubgroup(
    tag=ADDITIONAL_DATA,
    name="additional data",
    factory=AdditionalData,
    fields=(
        ("01", "bill_number"),
        ("02", "mobile_number"),
        ("03", "store_id"),
        ("04", "loyalty_number"),
        ("05", "reference_id"),
        ("06", "consumer_id"),
        ("07", "terminal_id"),
        ("08", "purpose_of_transaction"),
        ("09", "additional_consumer_data_request"),
    ),
)

# Nested group -> attribute path of the group on PaymentQRCode.
SUBGROUPS: tuple[tuple[TLVSubgroup, str], ...] = (
    (PROMPTPAY_GROUP, "merchant.id.promptpay"),
    (BILL_PAYMENT_GROUP, "merchant.id.promptpay_bill_payment"),
    (API_GROUP, "merchant.id.api"),
    (ADDITIONAL_DATA_GROUP, "additional_data"),
)

# (attribute path, tag, width); only non-empty values are checked.
FIXED_WIDTHS: tuple[tuple[str, str, int], ...] = (
    ("payload_format_indicator", PAYLOAD_FORMAT_INDICATOR, 2),
    ("point_of_initiation_method", POINT_OF_INITIATION_METHOD, 2),
    ("merchant.category_code", MERCHANT_CATEGORY_CODE, 4),
    ("transaction.currency_code", TRANSACTION_CURRENCY, 3),
    ("country_code", COUNTRY_CODE, 2),
    ("crc", CRC, 4),
    ("mastercard_data_object", MASTERCARD_DATA_OBJECT, 25),
)

FIXED_VALUES: tuple[tuple[str, str, str], ...] = (
    ("country_code", COUNTRY_CODE, COUNTRY_CODE_TH),
    ("transaction.currency_code", TRANSACTION_CURRENCY, CURRENCY_CODE_THB),
)


def validate_widths(qr: PaymentQRCode) -> None:
    """Raise ``LengthConstraintError`` for the first fixed-width field of the wrong width."""
    for path, tag, width in FIXED_WIDTHS:
        value = attrgetter(path)(qr)
        if value and len(value) != width:
            raise LengthConstraintError(field=path, actual=len(value), expected=width, tag=tag)


def validate_fixed_values(qr: PaymentQRCode) -> None:
    for path, tag, expected in FIXED_VALUES:
        actual = attrgetter(path)(qr)
        if actual != expected:
            raise FixedValueMismatchError(field=f"{path} (tag {tag})", expected=expected, actual=actual)
