"""
Encoding Selection
==================
UTF-16 code unit conversion, line-ending normalization and encoding
detection for SMS bodies.
"""

import struct
from typing import Iterable, Tuple

from .charset import char_weight, classify
from .models import CharClass, EncodingType

CARRIAGE_RETURN = 0x0D


def to_code_units(text: str) -> Tuple[int, ...]:
    """
    Convert text to its UTF-16 code units.

    Characters outside the BMP become two units (a surrogate pair). Lone
    surrogates are passed through unchanged.

    Args:
        text: Message content

    Returns:
        Tuple of 16-bit code unit values
    """
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def normalize_message(text: str) -> Tuple[int, ...]:
    """
    Convert text to code units with every carriage return removed.

    SMS providers count line feeds only, so CRLF and bare CR both lose
    their CR unit.
    """
    return tuple(unit for unit in to_code_units(text) if unit != CARRIAGE_RETURN)


def select_encoding(units: Iterable[int]) -> EncodingType:
    """
    Choose the encoding for a normalized message body.

    Args:
        units: Normalized UTF-16 code units

    Returns:
        EncodingType.UTF16 if any unit falls outside GSM-7, else EncodingType.GSM7
    """
    for unit in units:
        if classify(unit) is CharClass.NON_GSM7:
            return EncodingType.UTF16
    return EncodingType.GSM7


def detect_encoding(text: str) -> EncodingType:
    """Normalize text and select its encoding."""
    return select_encoding(normalize_message(text))


def count_gsm7_units(units: Iterable[int]) -> int:
    """
    Count GSM-7 septets for a normalized body (escape characters count as 2).

    Args:
        units: Normalized UTF-16 code units, all within GSM-7

    Returns:
        Total weight used for segmentation
    """
    return sum(char_weight(unit) for unit in units)
