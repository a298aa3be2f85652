"""
SMS Segments
============
Counts the concatenated SMS segments needed for a message plus its
trailing opt-out link.
"""

__version__ = "0.1.0"

# Models
from sms_segments.models import (
    EncodingType,
    CharClass,
    SegmentReport,
    GSM7_SINGLE_CAPACITY,
    GSM7_MULTI_CAPACITY,
    UTF16_SINGLE_CAPACITY,
    UTF16_MULTI_CAPACITY,
)

# Classification
from sms_segments.charset import (
    classify,
    char_weight,
    is_gsm7_basic,
    is_gsm7_extended_half,
    is_high_surrogate,
)

# Encoding
from sms_segments.encoding import (
    to_code_units,
    normalize_message,
    select_encoding,
    detect_encoding,
    count_gsm7_units,
)

# Segmentation
from sms_segments.segmentation import (
    compute_segment_count,
    calculate_segments,
    estimate_cost,
)

# Errors
from sms_segments.exceptions import SegmentationError, InvalidArgument

# Configuration
from sms_segments.config import SegmentsConfig, get_config, load_config

__all__ = [
    "__version__",
    # Models
    "EncodingType",
    "CharClass",
    "SegmentReport",
    "GSM7_SINGLE_CAPACITY",
    "GSM7_MULTI_CAPACITY",
    "UTF16_SINGLE_CAPACITY",
    "UTF16_MULTI_CAPACITY",
    # Classification
    "classify",
    "char_weight",
    "is_gsm7_basic",
    "is_gsm7_extended_half",
    "is_high_surrogate",
    # Encoding
    "to_code_units",
    "normalize_message",
    "select_encoding",
    "detect_encoding",
    "count_gsm7_units",
    # Segmentation
    "compute_segment_count",
    "calculate_segments",
    "estimate_cost",
    # Errors
    "SegmentationError",
    "InvalidArgument",
    # Configuration
    "SegmentsConfig",
    "get_config",
    "load_config",
]
