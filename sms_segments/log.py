"""
Structured Logging Setup
========================
Configures structlog for services embedding the segment counter.

Usage:
    from sms_segments.log import setup_logging

    setup_logging(service_name="smsly-sms", level="DEBUG", json_output=False)
"""

import logging
import sys
from typing import Optional

import structlog

from .config import SegmentsConfig, get_config


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> structlog.stdlib.BoundLogger:
    """
    Configure structlog and the stdlib root logger.

    Args:
        service_name: Name bound to every log event
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON (for production) instead of console output

    Returns:
        Logger for the calling service
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)

    logger = structlog.get_logger(service_name)
    logger.info("Logging configured", log_level=level.upper(), json_output=json_output)
    return logger


def setup_logging_from_config(config: Optional[SegmentsConfig] = None) -> structlog.stdlib.BoundLogger:
    """Configure logging from SERVICE_NAME, LOG_LEVEL and LOG_JSON."""
    config = config or get_config()
    return setup_logging(
        service_name=config.service_name,
        level=config.log_level,
        json_output=config.log_json,
    )
