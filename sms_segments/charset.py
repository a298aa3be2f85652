"""
GSM-7 Character Classification
==============================
Classifies UTF-16 code units against the GSM 03.38 alphabet.

The basic table is expressed as numeric ranges and the remaining half of the
alphabet (including the escape-table characters) as a fixed set. Both tables
are part of the counting contract and must not be edited.
"""

from typing import Union

from .models import CharClass

CodeUnit = Union[int, str]

# Half of the 7-bit alphabet, as inclusive code unit ranges
GSM7_BASIC_RANGES = (
    (0x20, 0x5A),  # space ! " # $ % & ' ( ) * + , - . / 0-9 : ; < = > ? @ A-Z
    (0x61, 0x7A),  # a-z
    (0xA3, 0xA5),  # £ ¤ ¥
    (0xC4, 0xC7),  # Ä Å Æ Ç
    (0xE4, 0xE6),  # ä å æ
)

# Escape-table characters, each encoded as ESC + septet
GSM7_ESCAPE_CHARS = frozenset("\u000C^{}\\[~]|€")

# The other half of the alphabet, escape characters included
GSM7_EXTENDED_HALF = frozenset(
    "èéùìò\u000AØø\u000DΔ_ΦΓΛΩΠΨΣΘΞ\u001BßÉ¡ÖÑÜ§¿öñüà"
) | GSM7_ESCAPE_CHARS

_ESCAPE_UNITS = frozenset(ord(c) for c in GSM7_ESCAPE_CHARS)
_EXTENDED_HALF_UNITS = frozenset(ord(c) for c in GSM7_EXTENDED_HALF)

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF


def _unit_value(unit: CodeUnit) -> int:
    if isinstance(unit, str):
        return ord(unit)
    return unit


def is_gsm7_basic(unit: CodeUnit) -> bool:
    """Check whether a code unit is in the range-encoded half of GSM-7."""
    value = _unit_value(unit)
    return any(low <= value <= high for low, high in GSM7_BASIC_RANGES)


def is_gsm7_extended_half(unit: CodeUnit) -> bool:
    """Check whether a code unit is in the set-encoded half of GSM-7."""
    return _unit_value(unit) in _EXTENDED_HALF_UNITS


def is_high_surrogate(unit: CodeUnit) -> bool:
    value = _unit_value(unit)
    return HIGH_SURROGATE_MIN <= value <= HIGH_SURROGATE_MAX


def classify(unit: CodeUnit) -> CharClass:
    """
    Classify a single UTF-16 code unit.

    Args:
        unit: Code unit as an int, or a one-character string

    Returns:
        CharClass.NON_GSM7 for units outside GSM-7 (high surrogates included),
        CharClass.GSM7_ESCAPE for escape-table units, else CharClass.GSM7_BASIC
    """
    value = _unit_value(unit)

    if is_high_surrogate(value):
        return CharClass.NON_GSM7

    if is_gsm7_basic(value):
        return CharClass.GSM7_BASIC

    if value not in _EXTENDED_HALF_UNITS:
        return CharClass.NON_GSM7

    if value in _ESCAPE_UNITS:
        return CharClass.GSM7_ESCAPE

    return CharClass.GSM7_BASIC


def char_weight(unit: CodeUnit) -> int:
    """Number of GSM-7 septets a code unit occupies."""
    return 2 if _unit_value(unit) in _ESCAPE_UNITS else 1
