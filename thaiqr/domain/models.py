"""
Structured model of a Thai QR payment payload.

Every string field defaults to ``""``; an empty string means the tag (or
subfield) is absent from the payload. Comments give the tag id each field
maps to.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

PROMPTPAY_AID = "A000000677010111"
BILL_PAYMENT_AID = "A000000677010112"
# Not enforced on decode; API acquirers validate their own AID.
API_AID = "A000000677010113"

COUNTRY_CODE_TH = "TH"
CURRENCY_CODE_THB = "764"


class _SubfieldGroup:
    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


@dataclass
class PromptPay(_SubfieldGroup):
    """Credit transfer with PromptPay ID (tag 29)."""
    aid: str = ""                  # 00
    mobile_number: str = ""        # 01
    national_id: str = ""          # 02
    ewallet_id: str = ""           # 03
    bank_account: str = ""         # 04
    national_ewallet_id: str = ""  # 05


@dataclass
class PromptPayBillPayment(_SubfieldGroup):
    """PromptPay bill payment (tag 30)."""
    aid: str = ""          # 00
    biller_id: str = ""    # 01
    reference_1: str = ""  # 02
    reference_2: str = ""  # 03


@dataclass
class PromptPayAPI(_SubfieldGroup):
    """API extension (tag 31)."""
    aid: str = ""              # 00
    acquirer_id: str = ""      # 01
    merchant_id: str = ""      # 02
    transaction_ref: str = ""  # 03
    reference_no: str = ""     # 04
    terminal_id: str = ""      # 05


@dataclass
class MerchantIdentifier:
    """
    Network-specific merchant account identifiers.

    In practice one network is populated per payload, but several may be set
    at once and all of them are carried through decode and encode.
    """
    visa: str = ""         # 02
    mastercard: str = ""   # 04
    cup: str = ""          # 14
    union_pay: str = ""    # 15
    emvco: str = ""        # 17
    tpn: str = ""          # 26
    prompt_card: str = ""  # 27
    visa_local: str = ""   # 28
    # 29, 30 and 31 are nested TLV groups.
    promptpay: PromptPay = field(default_factory=PromptPay)
    promptpay_bill_payment: PromptPayBillPayment = field(default_factory=PromptPayBillPayment)
    api: PromptPayAPI = field(default_factory=PromptPayAPI)

    def networks(self) -> list[str]:
        """Names of the populated networks, in tag order."""
        populated = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, _SubfieldGroup):
                if not value.is_empty():
                    populated.append(f.name)
            elif value:
                populated.append(f.name)
        return populated


@dataclass
class Merchant:
    id: MerchantIdentifier = field(default_factory=MerchantIdentifier)
    category_code: str = ""  # 52
    name: str = ""           # 59
    city: str = ""           # 60


@dataclass
class Transaction:
    currency_code: str = ""  # 53
    amount: str = ""         # 54


@dataclass
class AdditionalData(_SubfieldGroup):
    """Additional data field template (tag 62)."""
    bill_number: str = ""                       # 01
    mobile_number: str = ""                     # 02
    store_id: str = ""                          # 03
    loyalty_number: str = ""                    # 04
    reference_id: str = ""                      # 05
    consumer_id: str = ""                       # 06
    terminal_id: str = ""                       # 07
    purpose_of_transaction: str = ""            # 08
    additional_consumer_data_request: str = ""  # 09


@dataclass
class PaymentQRCode:
    """
    Root of a decoded payload.

    Attributes:
        payload_format_indicator: Tag 00, two characters when present.
        point_of_initiation_method: Tag 01, two characters when present.
        merchant: Merchant identity, category, name and city.
        transaction: Currency and amount.
        country_code: Tag 58, must be ``"TH"``.
        additional_data: Tag 62 nested group.
        crc: Tag 63. Leave empty on encode to have it computed.
        mastercard_data_object: Tag 51, legacy MasterCard data (25 characters).
    """
    payload_format_indicator: str = ""
    point_of_initiation_method: str = ""
    merchant: Merchant = field(default_factory=Merchant)
    transaction: Transaction = field(default_factory=Transaction)
    country_code: str = ""
    additional_data: AdditionalData = field(default_factory=AdditionalData)
    crc: str = ""
    mastercard_data_object: str = ""

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
