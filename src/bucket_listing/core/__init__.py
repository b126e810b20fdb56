"""Core utilities and shared components for bucket-listing."""

from .config import settings
from .exceptions import BucketListingError, CommandExecutionError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "BucketListingError",
    "CommandExecutionError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
