"""
Segmentation Models
===================
Enums, capacity constants and result types for SMS segment counting.
"""

from dataclasses import dataclass
from enum import Enum


class EncodingType(str, Enum):
    """SMS payload encodings."""
    GSM7 = "GSM-7"
    UTF16 = "UTF-16"


class CharClass(str, Enum):
    """Classification of a single UTF-16 code unit."""
    GSM7_BASIC = "gsm7_basic"
    GSM7_ESCAPE = "gsm7_escape"
    NON_GSM7 = "non_gsm7"

    @property
    def weight(self) -> int:
        # Escape characters take two septets on the wire
        return 2 if self is CharClass.GSM7_ESCAPE else 1


# Segment capacities in weighted units. Concatenated segments carry a
# 6-octet User Data Header: 7 septets for GSM-7, 3 units for UTF-16.
GSM7_SINGLE_CAPACITY = 160
GSM7_MULTI_CAPACITY = 153
UTF16_SINGLE_CAPACITY = 70
UTF16_MULTI_CAPACITY = 67


@dataclass(frozen=True)
class SegmentReport:
    """Result of a segment calculation."""
    segments: int
    encoding: EncodingType
    units: int  # Weighted body units, opt-out link excluded
    opt_out_link_length: int = 0

    @property
    def is_concatenated(self) -> bool:
        return self.segments > 1
