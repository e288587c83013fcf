"""
Decoder: scanned payload string -> ``PaymentQRCode``.

Steps run in a fixed order and the first failure aborts the call:
tokenize, verify checksum, decode nested groups, check nested-group AIDs,
check fixed widths, check fixed values.
"""
from __future__ import annotations

from thaiqr.core.checksum import verify_checksum
from thaiqr.domain.models import Merchant, MerchantIdentifier, PaymentQRCode, Transaction
from thaiqr.parsing.payload import fields as f
from thaiqr.parsing.tlv import TLVScan, parse_tlv


def tags_to_model(scan: TLVScan) -> PaymentQRCode:
    """
    Build the model from a tokenized top-level payload.

    Args:
        scan: Output of ``parse_tlv`` for the whole payload.

    Returns:
        A freshly built ``PaymentQRCode``.

    Raises:
        PayloadFormatError: If the checksum is missing or not hex, or a nested
            group is malformed.
        ChecksumMismatchError: If the checksum does not match the payload.
        FixedValueMismatchError: If an AID, the country or the currency is wrong.
        LengthConstraintError: If a fixed-width field has the wrong width.
    """
    verify_checksum(scan.checksum_input, scan.claimed_checksum)
    m = scan.tags

    subtags = {group.tag: group.parse(m.get(group.tag, "")) for group, _ in f.SUBGROUPS}
    for group, _ in f.SUBGROUPS:
        group.check_discriminator(subtags[group.tag])

    merchant_id = MerchantIdentifier(
        visa=m.get(f.MERCHANT_VISA, ""),
        mastercard=m.get(f.MERCHANT_MASTERCARD, ""),
        cup=m.get(f.MERCHANT_CUP, ""),
        union_pay=m.get(f.MERCHANT_UNION_PAY, ""),
        emvco=m.get(f.MERCHANT_EMVCO, ""),
        tpn=m.get(f.MERCHANT_TPN, ""),
        prompt_card=m.get(f.MERCHANT_PROMPT_CARD, ""),
        visa_local=m.get(f.MERCHANT_VISA_LOCAL, ""),
        promptpay=f.PROMPTPAY_GROUP.build(subtags[f.MERCHANT_PROMPTPAY]),
        promptpay_bill_payment=f.BILL_PAYMENT_GROUP.build(subtags[f.MERCHANT_PROMPTPAY_BILL_PAYMENT]),
        api=f.API_GROUP.build(subtags[f.MERCHANT_API]),
    )
    qr = PaymentQRCode(
        payload_format_indicator=m.get(f.PAYLOAD_FORMAT_INDICATOR, ""),
        point_of_initiation_method=m.get(f.POINT_OF_INITIATION_METHOD, ""),
        merchant=Merchant(
            id=merchant_id,
            category_code=m.get(f.MERCHANT_CATEGORY_CODE, ""),
            name=m.get(f.MERCHANT_NAME, ""),
            city=m.get(f.MERCHANT_CITY, ""),
        ),
        transaction=Transaction(
            currency_code=m.get(f.TRANSACTION_CURRENCY, ""),
            amount=m.get(f.TRANSACTION_AMOUNT, ""),
        ),
        country_code=m.get(f.COUNTRY_CODE, ""),
        additional_data=f.ADDITIONAL_DATA_GROUP.build(subtags[f.ADDITIONAL_DATA]),
        crc=m.get(f.CRC, ""),
        mastercard_data_object=m.get(f.MASTERCARD_DATA_OBJECT, ""),
    )

    f.validate_widths(qr)
    f.validate_fixed_values(qr)
    return qr


def decode_payload(payload: str) -> PaymentQRCode:
    """Tokenize ``payload`` and build the model; see ``tags_to_model`` for errors."""
    return tags_to_model(parse_tlv(payload))
