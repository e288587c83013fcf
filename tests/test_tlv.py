"""Tests for the TLV tokenizer, record encoder and payload serializer."""
import pytest

from thaiqr.core.checksum import compute_checksum
from thaiqr.errors import ChecksumMismatchError, LengthConstraintError, PayloadFormatError
from thaiqr.parsing.tlv import (
    encode_tlv_record,
    parse_tlv,
    serialize_payload,
)


def test_parse_simple_records():
    scan = parse_tlv("000201010211")
    assert scan.tags == {"00": "01", "01": "11"}
    assert scan.checksum_body == "000201010211"
    assert scan.claimed_checksum == ""


def test_parse_empty():
    scan = parse_tlv("")
    assert scan.tags == {}
    assert scan.checksum_body == ""
    assert scan.claimed_checksum == ""


def test_parse_checksum_excluded_from_coverage():
    scan = parse_tlv("0002016304ABCD")
    assert scan.tags["63"] == "ABCD"
    assert scan.claimed_checksum == "ABCD"
    assert scan.checksum_body == "000201"
    assert scan.checksum_input == "0002016304"


def test_parse_keeps_input_order_in_coverage():
    scan = parse_tlv("5802TH000201")
    assert scan.checksum_body == "5802TH000201"


def test_parse_counts_code_points():
    # 4 code points, 12 UTF-8 bytes
    scan = parse_tlv("5904ร้าน6002BK")
    assert scan.tags == {"59": "ร้าน", "60": "BK"}


def test_parse_zero_length_value():
    scan = parse_tlv("0000010211")
    assert scan.tags == {"00": "", "01": "11"}


def test_parse_nested_value_kept_verbatim():
    scan = parse_tlv("62100106INV001")
    assert scan.tags["62"] == "0106INV001"
    assert parse_tlv(scan.tags["62"]).tags == {"01": "INV001"}


def test_parse_duplicate_tag_last_wins():
    scan = parse_tlv("540210540250")
    assert scan.tags == {"54": "50"}
    # Both records were on the wire, both are covered by the checksum.
    assert scan.checksum_body == "540210540250"


@pytest.mark.parametrize(
    "payload, message",
    [
        ("0", "Truncated tag"),
        ("0002010", "Truncated tag"),
        ("00", "Truncated length"),
        ("000", "Truncated length"),
        ("0005ab", "Truncated value"),
        ("00020101021", "Truncated value"),
    ],
)
def test_parse_truncated(payload, message):
    with pytest.raises(PayloadFormatError, match=message):
        parse_tlv(payload)


def test_parse_non_decimal_length():
    with pytest.raises(PayloadFormatError, match="Invalid length"):
        parse_tlv("00ab12")


def test_parse_non_decimal_tag():
    with pytest.raises(PayloadFormatError, match="Invalid tag id"):
        parse_tlv("AB0212")


def test_encode_record_pads_length():
    assert encode_tlv_record("01", "abc") == "0103abc"
    assert encode_tlv_record("59", "x" * 42) == "5942" + "x" * 42


def test_encode_record_max_length():
    assert encode_tlv_record("59", "x" * 99).startswith("5999")


def test_encode_record_too_long():
    with pytest.raises(LengthConstraintError) as exc_info:
        encode_tlv_record("59", "x" * 100)
    assert exc_info.value.tag == "59"
    assert exc_info.value.maximum == 99
    assert exc_info.value.actual == 100


def test_serialize_appends_checksum():
    result = serialize_payload({"58": "TH", "00": "01", "53": "764"})
    body = "000201" + "5303764" + "5802TH"
    assert result == body + "6304" + compute_checksum(body)


def test_serialize_skips_empty_values():
    result = serialize_payload({"00": "01", "54": ""})
    assert result.startswith("0002016304")
    assert "54" not in parse_tlv(result).tags


def test_serialize_verifies_supplied_checksum():
    body = "000201" + "5802TH"
    crc = compute_checksum(body)
    assert serialize_payload({"00": "01", "58": "TH", "63": crc}) == body + "6304" + crc


def test_serialize_supplied_checksum_lowercase_is_emitted_as_given():
    body = "000201"
    crc = compute_checksum(body).lower()
    assert serialize_payload({"00": "01", "63": crc}) == body + "6304" + crc


def test_serialize_rejects_wrong_checksum():
    body = "000201"
    good = compute_checksum(body)
    bad = "0000" if good != "0000" else "FFFF"
    with pytest.raises(ChecksumMismatchError) as exc_info:
        serialize_payload({"00": "01", "63": bad})
    assert exc_info.value.expected == good


def test_serialize_rejects_non_hex_checksum():
    with pytest.raises(PayloadFormatError):
        serialize_payload({"00": "01", "63": "WXYZ"})


@pytest.mark.parametrize("tag", ["1", "123", "A1", "٠١"])
def test_serialize_rejects_bad_tag(tag):
    with pytest.raises(PayloadFormatError):
        serialize_payload({tag: "x"})


def test_serialize_then_parse_checksum_agrees():
    payload = serialize_payload({"00": "01", "59": "ร้านกาแฟ", "58": "TH"})
    scan = parse_tlv(payload)
    assert scan.claimed_checksum == compute_checksum(scan.checksum_body)
