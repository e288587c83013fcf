"""
Nested TLV groups carried inside a single top-level tag.

Tags 29, 30, 31 and 62 hold values that are themselves TLV strings. A
``TLVSubgroup`` describes one of them by an ordered table of
``(subfield id, attribute)`` pairs, so the same code decodes, validates and
encodes every group.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from thaiqr.errors import FixedValueMismatchError
from thaiqr.parsing.tlv.decode import parse_tlv

AID_SUBFIELD = "00"


@dataclass(frozen=True)
class TLVSubgroup:
    """
    Attributes:
        tag: The top-level tag carrying the group.
        name: Human-readable group name used in error messages.
        factory: Callable building the group model from keyword arguments.
        fields: ``(subfield id, attribute)`` pairs; kept sorted by subfield id.
        aid: When set, subfield ``00`` of a non-empty group must equal it.
    """
    tag: str
    name: str
    factory: Callable[..., Any]
    fields: tuple[tuple[str, str], ...]
    aid: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(sorted(self.fields)))

    def parse(self, value: str) -> dict[str, str]:
        if not value:
            return {}
        return parse_tlv(value).tags

    def check_discriminator(self, subtags: dict[str, str]) -> None:
        if self.aid is None or not subtags:
            return
        actual = subtags.get(AID_SUBFIELD, "")
        if actual != self.aid:
            raise FixedValueMismatchError(
                field=f"{self.name} AID (tag {self.tag}, subfield {AID_SUBFIELD})",
                expected=self.aid,
                actual=actual,
            )

    def build(self, subtags: dict[str, str]) -> Any:
        return self.factory(**{attr: subtags.get(sub_id, "") for sub_id, attr in self.fields})

    def encode(self, group: Any) -> str:
        """Encode the populated subfields in ascending id order; ``""`` when none are set."""
        parts = []
        for sub_id, attr in self.fields:
            value = getattr(group, attr)
            if value:
                parts.append(f"{sub_id}{len(value):02d}{value}")
        return "".join(parts)
