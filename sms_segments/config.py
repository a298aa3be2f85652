"""
Segments Configuration
======================
Configuration read from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SegmentsConfig:
    """Configuration for segment counting and its HTTP route."""
    service_name: str = field(
        default_factory=lambda: os.environ.get("SERVICE_NAME", "sms-segments")
    )
    # Link length assumed when a request does not provide one
    opt_out_link_length: int = field(
        default_factory=lambda: int(os.environ.get("SMS_OPTOUT_LINK_LENGTH", "0"))
    )
    cost_per_segment: float = field(
        default_factory=lambda: float(os.environ.get("SMS_COST_PER_SEGMENT", "0.01"))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )
    log_json: bool = field(default_factory=lambda: _env_bool("LOG_JSON", "true"))


_config: Optional[SegmentsConfig] = None


def load_config() -> SegmentsConfig:
    """Build a fresh configuration from the current environment."""
    global _config
    _config = SegmentsConfig()
    return _config


def get_config() -> SegmentsConfig:
    """Get the process-wide configuration, loading it on first use."""
    if _config is None:
        return load_config()
    return _config
