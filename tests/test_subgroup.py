"""Tests for the generic nested TLV group."""
from dataclasses import dataclass

import pytest

from thaiqr.errors import FixedValueMismatchError, PayloadFormatError
from thaiqr.parsing.payload.fields import ADDITIONAL_DATA_GROUP, API_GROUP, PROMPTPAY_GROUP
from thaiqr.parsing.tlv import TLVSubgroup
from thaiqr.domain import PROMPTPAY_AID, AdditionalData, PromptPay, PromptPayAPI


@dataclass
class _Pair:
    first: str = ""
    second: str = ""


def _decode(group: TLVSubgroup, value: str):
    """Helper: run the decoder's parse, check and build steps for one group."""
    subtags = group.parse(value)
    group.check_discriminator(subtags)
    return group.build(subtags)


def test_fields_sorted_by_subfield_id():
    group = TLVSubgroup(tag="80", name="pair", factory=_Pair, fields=(("02", "second"), ("01", "first")))
    assert group.fields == (("01", "first"), ("02", "second"))
    assert group.encode(_Pair(first="a", second="bb")) == "0101a0202bb"


def test_encode_empty_group():
    assert PROMPTPAY_GROUP.encode(PromptPay()) == ""
    assert PromptPay().is_empty()
    assert not PromptPay(aid=PROMPTPAY_AID).is_empty()


def test_encode_skips_empty_subfields():
    group = PromptPay(aid=PROMPTPAY_AID, national_id="1234567890123")
    assert PROMPTPAY_GROUP.encode(group) == "0016" + PROMPTPAY_AID + "02131234567890123"


def test_encode_ascending_order():
    api = PromptPayAPI(terminal_id="T1", aid="A1", merchant_id="M1")
    assert API_GROUP.encode(api) == "0002A10202M10502T1"


def test_parse_empty_value():
    assert PROMPTPAY_GROUP.parse("") == {}
    assert PROMPTPAY_GROUP.build({}) == PromptPay()


def test_decode_promptpay():
    value = "0016" + PROMPTPAY_AID + "01130066812345678"
    assert _decode(PROMPTPAY_GROUP, value) == PromptPay(aid=PROMPTPAY_AID, mobile_number="0066812345678")


def test_check_discriminator_empty_map():
    PROMPTPAY_GROUP.check_discriminator({})


def test_wrong_aid():
    with pytest.raises(FixedValueMismatchError) as exc_info:
        _decode(PROMPTPAY_GROUP, "0016A000000677010112")
    assert exc_info.value.expected == PROMPTPAY_AID
    assert exc_info.value.actual == "A000000677010112"


def test_missing_aid():
    with pytest.raises(FixedValueMismatchError):
        _decode(PROMPTPAY_GROUP, "01130066812345678")


def test_no_discriminator():
    assert _decode(API_GROUP, "0002XX0102AC") == PromptPayAPI(aid="XX", acquirer_id="AC")


def test_build_ignores_unknown_subfields():
    assert _decode(ADDITIONAL_DATA_GROUP, "0106INV0019903abc") == AdditionalData(bill_number="INV001")


def test_parse_malformed_value():
    with pytest.raises(PayloadFormatError):
        ADDITIONAL_DATA_GROUP.parse("0199short")
