"""
Segmentation Exceptions
=======================
Exception classes for segment counting.
"""


class SegmentationError(Exception):
    """Base exception for segment counting errors."""
    pass


class InvalidArgument(SegmentationError, ValueError):
    """Raised when an input to the segment counter is absent or out of range."""

    def __init__(self, argument: str, message: str):
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")
