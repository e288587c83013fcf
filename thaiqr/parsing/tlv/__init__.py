"""
TLV (Tag-Length-Value) codec for the QR payment payload.

Records are ``TT LL V...`` with a 2-digit decimal tag id and a 2-digit
decimal length counted in code points.
"""
from thaiqr.parsing.tlv.decode import TLVScan, parse_tlv
from thaiqr.parsing.tlv.encode import (
    MAX_VALUE_LENGTH,
    encode_tlv_record,
    serialize_payload,
)
from thaiqr.parsing.tlv.subgroup import TLVSubgroup

__all__ = [
    "MAX_VALUE_LENGTH",
    "TLVScan",
    "TLVSubgroup",
    "encode_tlv_record",
    "parse_tlv",
    "serialize_payload",
]
