"""
Segments API
============
FastAPI router exposing segment counting to other services.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
import structlog

from .config import SegmentsConfig, get_config
from .exceptions import InvalidArgument
from .segmentation import calculate_segments

logger = structlog.get_logger(__name__)


class SegmentRequest(BaseModel):
    message: Optional[str] = None
    opt_out_link_length: Optional[int] = None


class SegmentResponse(BaseModel):
    segments: int
    encoding: str
    units: int
    opt_out_link_length: int
    estimated_cost: float


def create_invalid_argument_error(exc: InvalidArgument) -> HTTPException:
    """
    Create a 400 HTTPException for a rejected input.

    The technical reason is logged; the response only names the argument.
    """
    logger.warning(
        "Segment request rejected",
        code="INVALID_ARGUMENT",
        argument=exc.argument,
        reason=exc.message,
    )
    return HTTPException(
        status_code=400,
        detail={
            "error": "Invalid argument",
            "message": f"Invalid value for '{exc.argument}'",
            "code": "INVALID_ARGUMENT",
        },
    )


def create_segments_router(config: Optional[SegmentsConfig] = None) -> APIRouter:
    """
    Create the segment counting router.

    Args:
        config: Configuration to use (defaults to the environment configuration)

    Returns:
        FastAPI router with POST /v1/segments
    """
    router = APIRouter(tags=["Segments"])

    @router.post("/v1/segments", response_model=SegmentResponse)
    async def count_segments(request: SegmentRequest) -> SegmentResponse:
        """Count the SMS segments for a message and its opt-out link."""
        settings = config or get_config()

        link_length = request.opt_out_link_length
        if link_length is None:
            link_length = settings.opt_out_link_length

        try:
            report = calculate_segments(request.message, link_length)
        except InvalidArgument as e:
            raise create_invalid_argument_error(e) from e

        return SegmentResponse(
            segments=report.segments,
            encoding=report.encoding.value,
            units=report.units,
            opt_out_link_length=report.opt_out_link_length,
            estimated_cost=report.segments * settings.cost_per_segment,
        )

    return router
