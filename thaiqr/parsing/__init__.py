"""
This package contains the payload codec.

Sub-packages:

- ``tlv``: Tag-length-value tokenizing, record encoding, checksum-aware
  serialization and the generic nested-group abstraction.
- ``payload``: Mapping between TLV tags and the ``PaymentQRCode`` model.
"""
