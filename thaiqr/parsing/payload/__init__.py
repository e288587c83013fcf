"""
Mapping between the top-level TLV tags and the ``PaymentQRCode`` model.
"""
from thaiqr.parsing.payload.decode import decode_payload, tags_to_model
from thaiqr.parsing.payload.encode import encode_payload, model_to_tags

__all__ = [
    "decode_payload",
    "encode_payload",
    "model_to_tags",
    "tags_to_model",
]
