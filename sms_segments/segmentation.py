"""
Message Segmentation
====================
Counts the concatenated SMS segments needed for a message plus its trailing
opt-out link.

Segment limits:
- GSM-7: 160 septets (single), 153 septets per segment (concatenated)
- UTF-16: 70 units (single), 67 units per segment (concatenated)

A character is never split across segments. When an escape character does
not fit the room left in a segment it moves whole to the next one and the
leftover septet is padding.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import structlog

from .config import get_config
from .encoding import normalize_message, select_encoding
from .charset import char_weight
from .exceptions import InvalidArgument
from .models import (
    EncodingType,
    SegmentReport,
    GSM7_SINGLE_CAPACITY,
    GSM7_MULTI_CAPACITY,
    UTF16_SINGLE_CAPACITY,
    UTF16_MULTI_CAPACITY,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PackedBody:
    """Segments used by a message body and the fill of its last segment."""
    segments: int
    last_fill: int


def _validate(message, opt_out_link_length) -> None:
    if message is None:
        raise InvalidArgument("message", "message is required")
    if not isinstance(message, str):
        raise InvalidArgument(
            "message", f"expected str, got {type(message).__name__}"
        )
    if opt_out_link_length is None:
        raise InvalidArgument("opt_out_link_length", "opt-out link length is required")
    if isinstance(opt_out_link_length, bool) or not isinstance(opt_out_link_length, int):
        raise InvalidArgument(
            "opt_out_link_length",
            f"expected int, got {type(opt_out_link_length).__name__}",
        )
    if opt_out_link_length < 0:
        raise InvalidArgument(
            "opt_out_link_length",
            f"must be non-negative, got {opt_out_link_length}",
        )


def first_segment_end(weights: Sequence[int]) -> Optional[int]:
    """
    Find where the first segment ends once a header is required.

    Args:
        weights: GSM-7 weight of each body unit

    Returns:
        None if the whole body fits a single 160-septet segment, else the
        index of the first unit that does not fit a 153-septet first segment
    """
    running = 0
    header_end = 0
    for index, weight in enumerate(weights):
        running += weight
        if running > GSM7_SINGLE_CAPACITY:
            return header_end
        if running <= GSM7_MULTI_CAPACITY:
            header_end = index + 1
    return None


def pack_greedy(weights: Sequence[int], capacity: int) -> PackedBody:
    """Pack weights into fixed-capacity segments, opening one whenever the next weight overflows."""
    segments = 0
    fill = 0
    for weight in weights:
        if segments == 0 or fill + weight > capacity:
            segments += 1
            fill = weight
        else:
            fill += weight
    return PackedBody(segments=segments, last_fill=fill)


def pack_gsm7(weights: Sequence[int]) -> PackedBody:
    """
    Pack a GSM-7 body into segments.

    The first segment holds 160 septets only if the body fits in a single
    message. Otherwise it is capped at 153 and the rest is packed at 153
    per segment.
    """
    boundary = first_segment_end(weights)
    if boundary is None:
        return PackedBody(segments=1, last_fill=sum(weights))

    rest = pack_greedy(weights[boundary:], GSM7_MULTI_CAPACITY)
    return PackedBody(segments=1 + rest.segments, last_fill=rest.last_fill)


def count_gsm7_segments(weights: Sequence[int], opt_out_link_length: int) -> int:
    """
    Count segments for a GSM-7 body followed by the opt-out link.

    The link is treated as weight-1 units appended to the last segment. It
    does not trigger the 160 to 153 first-segment adjustment, so a link
    long enough to span several segments is estimated by division only.
    """
    body = pack_gsm7(weights)

    capacity = GSM7_SINGLE_CAPACITY if body.segments == 1 else GSM7_MULTI_CAPACITY
    total = body.last_fill + opt_out_link_length
    if total > capacity:
        return body.segments + total // capacity
    return body.segments


def count_utf16_segments(unit_count: int, opt_out_link_length: int) -> int:
    """Count segments for a UTF-16 body of unit_count units plus the opt-out link."""
    total = unit_count + opt_out_link_length
    if total <= UTF16_SINGLE_CAPACITY:
        return 1
    return (total + UTF16_MULTI_CAPACITY - 1) // UTF16_MULTI_CAPACITY


def calculate_segments(message: str, opt_out_link_length: int = 0) -> SegmentReport:
    """
    Calculate the segments required for a message and its opt-out link.

    Args:
        message: Message content
        opt_out_link_length: Units the appended opt-out link occupies

    Returns:
        SegmentReport with segment count, encoding and weighted body units

    Raises:
        InvalidArgument: If message is missing or the link length is negative
    """
    _validate(message, opt_out_link_length)

    units = normalize_message(message)
    encoding = select_encoding(units)

    if encoding == EncodingType.GSM7:
        weights = [char_weight(unit) for unit in units]
        segments = count_gsm7_segments(weights, opt_out_link_length)
        body_units = sum(weights)
    else:
        segments = count_utf16_segments(len(units), opt_out_link_length)
        body_units = len(units)

    logger.debug(
        "Segments calculated",
        encoding=encoding.value,
        units=body_units,
        opt_out_link_length=opt_out_link_length,
        segments=segments,
    )

    return SegmentReport(
        segments=segments,
        encoding=encoding,
        units=body_units,
        opt_out_link_length=opt_out_link_length,
    )


def compute_segment_count(message: str, opt_out_link_length: int = 0) -> int:
    """
    Return the number of concatenated SMSs needed to send a message.

    Args:
        message: Message content
        opt_out_link_length: Units the appended opt-out link occupies

    Returns:
        Segment count, always at least 1
    """
    return calculate_segments(message, opt_out_link_length).segments


def estimate_cost(
    message: str,
    opt_out_link_length: int = 0,
    cost_per_segment: Optional[float] = None,
) -> float:
    """
    Estimate the cost to send a message.

    Args:
        message: Message content
        opt_out_link_length: Units the appended opt-out link occupies
        cost_per_segment: Cost per SMS segment (defaults to configuration)

    Returns:
        Estimated cost
    """
    if cost_per_segment is None:
        cost_per_segment = get_config().cost_per_segment
    return compute_segment_count(message, opt_out_link_length) * cost_per_segment
